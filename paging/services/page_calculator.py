"""
Service for the numeric model of a paged result set.

Works out the current page, total and available page counts, the range
of results shown on the current page and the text describing it.
Knows nothing about HTML or Flask - request values arrive as a
PagingRequest snapshot.
"""

import logging
import re
from typing import List, Optional, TypeVar

from config.paging import PagingSettings
from paging.errors import InvalidConfigurationError, InvalidInputError
from paging.models.paging_request import PagingRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Page numbers outside a signed 32-bit int are treated as unparseable
MAX_PAGE_NUMBER = 2 ** 31 - 1

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def _parse_page_number(raw: Optional[str]) -> Optional[int]:
    """Parse a page number from request text, or None if it can't be used."""
    if raw is None or not _INTEGER_RE.match(raw):
        return None
    value = int(raw)
    if value > MAX_PAGE_NUMBER or value < -MAX_PAGE_NUMBER - 1:
        return None
    return value


def _count_pages(results: int, page_size: int) -> int:
    leftover = results % page_size
    if leftover > 0:
        return (results - leftover) // page_size + 1
    return results // page_size


def _capitalise(word: str) -> str:
    return word[:1].upper() + word[1:]


class PageCalculator:
    """Pagination arithmetic for one request."""

    def __init__(
        self,
        settings: Optional[PagingSettings] = None,
        paging_request: Optional[PagingRequest] = None,
        maximum_results_available: int = 0,
        total_is_approximate: bool = False
    ):
        """
        Initialize the calculator and read the requested page.

        Args:
            settings: Default page size and results words (or None for defaults)
            paging_request: Request snapshot supplying page, pagesize and method
            maximum_results_available: Cap on retrievable results (0 = unlimited)
            total_is_approximate: Whether the total is an estimate

        Raises:
            InvalidConfigurationError: If the effective page size is below 1
        """
        settings = settings or PagingSettings()
        paging_request = paging_request or PagingRequest()
        self.paging_request = paging_request

        self.results_text_singular = settings.results_text_singular
        self.results_text_plural = settings.results_text_plural
        self.total_is_approximate = total_is_approximate

        self._page_size = self._resolve_page_size(settings.page_size, paging_request.page_size)
        self._total_results = 0
        self._total_pages = 0
        self._available_pages = 0
        self._maximum_results_available = 0
        self._results_known = False
        self.current_page = 1

        self.maximum_results_available = maximum_results_available
        self.set_current_page_from_request(paging_request.page, paging_request.method)

    @staticmethod
    def _resolve_page_size(default_size: int, raw_override: Optional[str]) -> int:
        if raw_override:
            override = _parse_page_number(raw_override)
            if override is not None and override > 0:
                return override
            logger.warning(f"Ignoring invalid pagesize parameter {raw_override!r}")

        if default_size is None or default_size < 1:
            raise InvalidConfigurationError(
                "page_size", default_size,
                message=f"Page size must be at least 1, got {default_size!r}"
            )
        return default_size

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_results(self) -> int:
        return self._total_results

    @total_results.setter
    def total_results(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidInputError("total_results", value)

        self._total_results = value
        self._results_known = True
        self._total_pages = _count_pages(value, self._page_size)
        self._calculate_available_pages()
        self._limit_page_to_upper_boundary()

    @property
    def maximum_results_available(self) -> int:
        return self._maximum_results_available

    @maximum_results_available.setter
    def maximum_results_available(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidInputError("maximum_results_available", value)

        self._maximum_results_available = value
        self._calculate_available_pages()
        # Before the total is known there is nothing to clamp against,
        # and clamping would throw away the requested page.
        if self._results_known:
            self._limit_page_to_upper_boundary()

    def set_current_page_from_request(self, raw_page: Optional[str], method: str = "GET"):
        """
        Set the current page from the raw 'page' request parameter.

        A form submission always starts again at page 1. A missing or
        unparseable value falls back to the current page count (page 1
        before any results are known).

        Args:
            raw_page: Raw query string value, or None
            method: HTTP method of the request
        """
        if method and method.upper() == "POST":
            self.current_page = 1
        elif raw_page is not None:
            page = _parse_page_number(raw_page)
            if page is None:
                logger.debug(f"Unparseable page parameter {raw_page!r}, falling back")
                self.current_page = max(1, self._total_pages)
            else:
                # Upper bound unknown until the total is set
                self.current_page = max(1, page)
        else:
            self.current_page = 1

        if self._results_known:
            self._limit_page_to_upper_boundary()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def available_pages(self) -> int:
        return self._available_pages

    @property
    def first_result_on_page(self) -> int:
        return (self.current_page * self._page_size) - (self._page_size - 1)

    @property
    def last_result_on_page(self) -> int:
        if self.current_page == self._total_pages:
            return self._total_results
        return self.current_page * self._page_size

    @property
    def previous_page(self) -> Optional[int]:
        """Number of the previous page, or None on the first page."""
        return self.current_page - 1 if self.current_page > 1 else None

    @property
    def next_page(self) -> Optional[int]:
        """Number of the next reachable page, or None on the last one."""
        return self.current_page + 1 if self.current_page < self._available_pages else None

    @property
    def results_text_current(self) -> str:
        """The singular or plural results word, depending on the total."""
        return self.results_text_singular if self._total_results == 1 else self.results_text_plural

    def _calculate_available_pages(self):
        maximum = self._maximum_results_available
        if maximum == 0 or self._total_results <= maximum:
            self._available_pages = self._total_pages
        else:
            self._available_pages = _count_pages(maximum, self._page_size)

    def _limit_page_to_upper_boundary(self):
        requested = self.current_page
        if self._total_pages <= 0:
            self.current_page = 1
        else:
            self.current_page = min(self.current_page, self._total_pages)
            if self._available_pages > 0:
                self.current_page = min(self.current_page, self._available_pages)

        if self.current_page != requested:
            logger.debug(f"Clamped page {requested} to {self.current_page}")

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def current_range_text(self) -> str:
        """
        Describe the results on the current page, e.g. "11-20 of 95".

        Returns just the total when everything fits on one page.
        """
        first = self.first_result_on_page
        last = self.last_result_on_page
        total = self._total_results

        if total <= self._page_size:
            return f"{total}"
        if first == total or first == last:
            return f"{first} of {total}"
        if self.current_page == self._total_pages:
            return f"{first}-{last} of {total}"

        about = "about " if self.total_is_approximate else ""
        return f"{first}-{last} of {about}{total}"

    def results_in_context_text(self, singular: Optional[str] = None, plural: Optional[str] = None) -> str:
        """
        Describe the results on the current page using results words,
        e.g. "Item 3 of 3 items" or "11–20 of 95 items".

        Args:
            singular: Word for one result (defaults to the configured word)
            plural: Word for several results (defaults to the configured word)
        """
        if singular is None:
            singular = self.results_text_singular
        if plural is None:
            plural = self.results_text_plural
        first = self.first_result_on_page
        last = self.last_result_on_page
        total = self._total_results

        if total == 0:
            return f"0 {plural}"
        if total == 1:
            return f"{_capitalise(singular)} {first} of {total}"
        if first == total or first == last:
            return f"{_capitalise(singular)} {first} of {total} {plural}"
        return f"{first}–{last} of {total} {plural}"

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def trim_rows(self, items: List[T]) -> List[T]:
        """
        Delete, in place, the items which don't belong on the current page.

        Only needed when the data source could not apply paging itself.
        If no total has been set, the length of items is used as the total.

        Args:
            items: Every result, in display order

        Returns:
            The same list, now holding only the current page
        """
        if self._total_results == 0 and len(items) > 0:
            self.total_results = len(items)

        first_row = self.first_result_on_page - 1
        last_row = self.last_result_on_page - 1

        del items[last_row + 1:]
        del items[:first_row]
        return items
