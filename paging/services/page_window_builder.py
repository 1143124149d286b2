"""
Service for choosing which page links a paging bar shows.

Shows the first page, a few pages either side of the current page and
the last page, collapsing long runs behind an ellipsis so the number of
links stays small however many pages there are.
"""

import logging
from typing import List

from paging.errors import InvalidConfigurationError
from paging.models.page_window_token import PageWindowToken

logger = logging.getLogger(__name__)

DEFAULT_SPREAD = 5
DEFAULT_WINDOW = 4


class PageWindowBuilder:
    """Builds the page window tokens for a PageCalculator."""

    def __init__(self, spread: int = DEFAULT_SPREAD, window: int = DEFAULT_WINDOW):
        """
        Args:
            spread: Largest distance to the first/last page that is listed in full
            window: Pages kept next to the current page when a side is collapsed
        """
        if window < 1 or window >= spread:
            raise InvalidConfigurationError(
                "spread/window", (spread, window),
                message=f"Page window needs 1 <= window < spread, got spread={spread}, window={window}"
            )
        self.spread = spread
        self.window = window

    def build(self, calculator) -> List[PageWindowToken]:
        """
        Produce the ordered tokens for the calculator's current state.

        Args:
            calculator: PageCalculator (or anything exposing current_page,
                total_pages and available_pages)

        Returns:
            List of PageWindowToken, empty when there is only one page
        """
        current = calculator.current_page
        total_pages = calculator.total_pages
        available = calculator.available_pages
        tokens: List[PageWindowToken] = []

        if total_pages <= 1:
            return tokens

        if current > 1:
            tokens.append(PageWindowToken.previous(current - 1))

        tokens.append(PageWindowToken.page_link(1, is_current=current == 1))

        tokens.extend(self._lower_pages(current))

        if 1 < current < total_pages:
            tokens.append(PageWindowToken.page_link(current, is_current=True))

        tokens.extend(self._upper_pages(current, total_pages, available))

        # With a capped result set the real last page can't be reached
        if available >= total_pages:
            tokens.append(PageWindowToken.page_link(total_pages, is_current=current == total_pages))

        if current < available:
            tokens.append(PageWindowToken.next(current + 1))

        logger.debug(f"Built {len(tokens)} page tokens for page {current} of {total_pages}")
        return tokens

    def _lower_pages(self, current: int) -> List[PageWindowToken]:
        lower_spread = current - 1
        if lower_spread > self.spread:
            first = current - self.window
            tokens = [PageWindowToken.ellipsis(first - 1)]
        elif lower_spread >= 2:
            first = 2
            tokens = []
        else:
            return []

        tokens.extend(PageWindowToken.page_link(page) for page in range(first, current))
        return tokens

    def _upper_pages(self, current: int, total_pages: int, available: int) -> List[PageWindowToken]:
        upper_spread = total_pages - current
        if upper_spread > self.spread:
            last = current + self.window
            collapsed = True
        elif upper_spread >= 2:
            last = total_pages - 1
            collapsed = False
        else:
            return []

        tokens = [
            PageWindowToken.page_link(page)
            for page in range(current + 1, min(last, available) + 1)
        ]
        if collapsed and last + 1 <= available:
            tokens.append(PageWindowToken.ellipsis(last + 1))
        return tokens
