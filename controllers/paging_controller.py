"""PagingController: Flask glue for the paging helpers

Creates a PageCalculator per request from the Flask request and hands
paging bars to views. Calculators are kept on flask.g under an id, so a
page can show the same bar above and below its results.
"""

import logging

from flask import g, request

from config.paging import PagingSettings, load_paging_settings
from models.paging_bar_view_model import PagingBarViewModel
from paging.errors import ConfigurationError
from paging.models.paging_request import PagingRequest
from paging.services.page_calculator import PageCalculator
from paging.services.page_url_builder import PageUrlBuilder
from paging.services.page_window_builder import PageWindowBuilder

logger = logging.getLogger(__name__)

DEFAULT_CALCULATOR_ID = "paging"


class PagingController:
    """Controller for paging result sets in Flask views"""

    def __init__(self, settings: PagingSettings = None, window_builder: PageWindowBuilder = None):
        """Initialize controller with optional service injection

        Args:
            settings: PagingSettings snapshot (or None to load from the environment)
            window_builder: PageWindowBuilder instance (or None for default)
        """
        self.settings = settings or load_paging_settings()
        self.window_builder = window_builder or PageWindowBuilder()

    def _calculators(self):
        if "paging_calculators" not in g:
            g.paging_calculators = {}
        return g.paging_calculators

    def create_calculator(self, calculator_id=DEFAULT_CALCULATOR_ID, paging_request=None,
                          maximum_results_available=0, total_is_approximate=False):
        """Create a calculator for the current request

        Args:
            calculator_id: Id to store the calculator under for this request
            paging_request: PagingRequest snapshot (or None to read the Flask request)
            maximum_results_available: Cap on retrievable results (0 = unlimited)
            total_is_approximate: Whether the total is an estimate

        Returns:
            PageCalculator with the requested page already read
        """
        if paging_request is None:
            paging_request = PagingRequest.from_flask_request(request)

        calculator = PageCalculator(
            settings=self.settings,
            paging_request=paging_request,
            maximum_results_available=maximum_results_available,
            total_is_approximate=total_is_approximate,
        )
        self._calculators()[calculator_id] = calculator
        return calculator

    def get_calculator(self, calculator_id=DEFAULT_CALCULATOR_ID):
        """Look up a calculator created earlier in this request

        Raises:
            ConfigurationError: If no calculator exists with that id
        """
        calculator = self._calculators().get(calculator_id)
        if calculator is None:
            raise ConfigurationError(calculator_id)
        return calculator

    def build_paging_bar(self, calculator_id=DEFAULT_CALCULATOR_ID):
        """Build the paging bar view model for a calculator created earlier in this request

        Raises:
            ConfigurationError: If no calculator exists with that id
        """
        calculator = self.get_calculator(calculator_id)
        url_builder = PageUrlBuilder.for_request(calculator.paging_request)
        return PagingBarViewModel(
            calculator,
            url_builder=url_builder,
            window_builder=self.window_builder,
            calculator_id=calculator_id,
        )

    def paging_preview(self):
        """Describe the paging bar for the totals given in the query string

        Returns:
            Dict for JSON serialization

        Raises:
            ValueError: If a numeric parameter is not an integer
            InvalidInputError: If a total or cap is negative
        """
        total = int(request.values.get("total", ""))
        maximum = int(request.values.get("max") or 0)
        approximate = request.values.get("approximate", "").lower() in ("1", "true", "yes")

        calculator = self.create_calculator(
            maximum_results_available=maximum,
            total_is_approximate=approximate,
        )
        calculator.total_results = total
        logger.info(f"Paging preview: page {calculator.current_page} of {calculator.total_pages} ({total} results)")

        return {"paging": self.build_paging_bar().to_dict()}
