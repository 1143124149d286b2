"""
Tests for PagingController.

Uses Flask request contexts so calculators read the page from a real request.
"""

import pytest
from unittest.mock import Mock
from config.paging import PagingSettings
from controllers.paging_controller import PagingController
from paging.errors import ConfigurationError
from paging.models.paging_request import PagingRequest


@pytest.fixture
def controller(paging_settings):
    """Provide a PagingController with default settings."""
    return PagingController(settings=paging_settings)


class TestCreateCalculator:
    """Test creating calculators from the current request."""

    def test_page_read_from_query_string(self, app, controller):
        with app.test_request_context("/search?q=cats&page=3"):
            calculator = controller.create_calculator()
            assert calculator.current_page == 3

    def test_post_starts_at_first_page(self, app, controller):
        with app.test_request_context("/search?page=3", method="POST"):
            calculator = controller.create_calculator()
            assert calculator.current_page == 1

    def test_page_size_override(self, app, controller):
        with app.test_request_context("/search?pagesize=25"):
            calculator = controller.create_calculator()
            assert calculator.page_size == 25

    def test_configured_page_size(self, app):
        controller = PagingController(settings=PagingSettings(page_size=20))
        with app.test_request_context("/search"):
            assert controller.create_calculator().page_size == 20

    def test_explicit_paging_request(self, app, controller):
        """An explicit snapshot takes precedence over the live request."""
        with app.test_request_context("/search?page=3"):
            calculator = controller.create_calculator(paging_request=PagingRequest(page="7"))
            assert calculator.current_page == 7

    def test_cap_passed_through(self, app, controller):
        with app.test_request_context("/search?page=9"):
            calculator = controller.create_calculator(maximum_results_available=50)
            calculator.total_results = 95

            assert calculator.available_pages == 5
            assert calculator.current_page == 5


class TestGetCalculator:
    """Test looking up calculators by id."""

    def test_lookup_by_id(self, app, controller):
        with app.test_request_context("/search"):
            created = controller.create_calculator("results")
            assert controller.get_calculator("results") is created

    def test_separate_ids(self, app, controller):
        with app.test_request_context("/search?page=2"):
            first = controller.create_calculator("first")
            second = controller.create_calculator("second")
            assert controller.get_calculator("first") is first
            assert controller.get_calculator("second") is second

    def test_missing_id_raises(self, app, controller):
        with app.test_request_context("/search"):
            with pytest.raises(ConfigurationError) as exc_info:
                controller.get_calculator("pagingTop")

            assert "'pagingTop'" in exc_info.value.message

    def test_calculators_not_shared_between_requests(self, app, controller):
        with app.test_request_context("/search"):
            controller.create_calculator()

        with app.test_request_context("/search"):
            with pytest.raises(ConfigurationError):
                controller.get_calculator()


class TestBuildPagingBar:
    """Test building paging bars for the current request."""

    def test_links_keep_query_string(self, app, controller):
        with app.test_request_context("/search?q=cats&page=3"):
            controller.create_calculator().total_results = 95
            data = controller.build_paging_bar().to_dict()

            assert data["current_page"] == 3
            assert data["previous_url"] == "/search?q=cats&page=2"
            assert data["next_url"] == "/search?q=cats&page=4"

    def test_same_calculator_for_two_bars(self, app, controller):
        """Bars above and below results share one calculator."""
        with app.test_request_context("/search?page=2"):
            controller.create_calculator().total_results = 30

            top = controller.build_paging_bar()
            bottom = controller.build_paging_bar()

            assert top.calculator is bottom.calculator
            assert top.to_dict() == bottom.to_dict()

    def test_injected_window_builder_used(self, app, paging_settings):
        window_builder = Mock()
        window_builder.build.return_value = []
        controller = PagingController(settings=paging_settings, window_builder=window_builder)

        with app.test_request_context("/search"):
            calculator = controller.create_calculator()
            calculator.total_results = 95
            controller.build_paging_bar()

        window_builder.build.assert_called_once_with(calculator)

    def test_missing_calculator(self, app, controller):
        with app.test_request_context("/search"):
            with pytest.raises(ConfigurationError):
                controller.build_paging_bar("pagingBottom")
