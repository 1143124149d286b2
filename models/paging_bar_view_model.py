from paging.errors import ConfigurationError
from paging.models.page_window_token import TokenKind
from paging.services.page_url_builder import PageUrlBuilder
from paging.services.page_window_builder import PageWindowBuilder

from models import BaseModel

PREVIOUS_LABEL = "< Prev"
NEXT_LABEL = "Next >"
ELLIPSIS_LABEL = "…"
EN_DASH = "–"


class PagingBarViewModel(BaseModel):
    """Model for handling paging bar presentation logic"""

    def __init__(self, calculator, url_builder=None, window_builder=None, calculator_id=None):
        """
        Args:
            calculator: PageCalculator for the result set being shown
            url_builder: PageUrlBuilder for page links (defaults to bare '?page=N' links)
            window_builder: PageWindowBuilder policy (defaults to the standard window)
            calculator_id: Id the calculator was looked up by, used in error messages

        Raises:
            ConfigurationError: If no calculator is available
        """
        if calculator is None:
            raise ConfigurationError(calculator_id)

        self.calculator = calculator
        self.url_builder = url_builder or PageUrlBuilder()
        self.window_builder = window_builder or PageWindowBuilder()
        self.initialize()

    def initialize(self):
        """Initialize the view model"""
        self.tokens = self.window_builder.build(self.calculator)

    @property
    def visible(self):
        """Only show the bar when there are some results"""
        return self.calculator.total_results > 0

    @property
    def range_text(self):
        return self.calculator.current_range_text().replace("-", EN_DASH)

    @property
    def results_text(self):
        return self.calculator.results_text_current

    @property
    def results_in_context(self):
        return self.calculator.results_in_context_text()

    def format_pages(self):
        """Format the page window tokens as link descriptions for a template"""
        pages = []
        for token in self.tokens:
            if token.kind == TokenKind.PREVIOUS:
                label = PREVIOUS_LABEL
            elif token.kind == TokenKind.NEXT:
                label = NEXT_LABEL
            elif token.kind == TokenKind.ELLIPSIS:
                label = ELLIPSIS_LABEL
            else:
                label = str(token.page)

            # The ellipsis is shown as plain text, and so is the current page
            linked = token.kind != TokenKind.ELLIPSIS and not token.is_current
            pages.append({
                "kind": token.kind.value,
                "page": token.page,
                "label": label,
                "href": self.url_builder.url_for_page(token.page) if linked else None,
                "current": token.is_current,
            })
        return pages

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        calculator = self.calculator
        return {
            "visible": self.visible,
            "current_page": calculator.current_page,
            "total_pages": calculator.total_pages,
            "available_pages": calculator.available_pages,
            "total_results": calculator.total_results,
            "page_size": calculator.page_size,
            "first_result": calculator.first_result_on_page,
            "last_result": calculator.last_result_on_page,
            "range_text": self.range_text,
            "results_text": self.results_text,
            "results_in_context": self.results_in_context,
            "previous_url": self.url_builder.url_for_page(calculator.previous_page),
            "next_url": self.url_builder.url_for_page(calculator.next_page),
            "pages": self.format_pages(),
        }
