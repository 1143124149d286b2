"""
Service for building links to other pages of a result set.

Keeps every query string parameter of the current request except
'page', which is replaced with the target page number.
"""

from typing import Optional
from urllib.parse import parse_qsl, urlencode

from paging.models.paging_request import PagingRequest


class PageUrlBuilder:
    """Builds page URLs relative to the current request."""

    def __init__(self, path: str = "", query_string: str = "", page_parameter: str = "page"):
        """
        Args:
            path: Path that the links point at
            query_string: Current query string, with or without a leading '?'
            page_parameter: Name of the page number parameter
        """
        self.path = path
        self.page_parameter = page_parameter
        query = parse_qsl(query_string.lstrip("?"), keep_blank_values=True)
        self._preserved = [(key, value) for key, value in query if key != page_parameter]

    @classmethod
    def for_request(cls, paging_request: PagingRequest) -> "PageUrlBuilder":
        return cls(paging_request.path, paging_request.query_string)

    def url_for_page(self, page: Optional[int]) -> Optional[str]:
        """
        Get the URL for a page number, or None when there is no page.

        Escaping for HTML output is left to the template engine.
        """
        if page is None:
            return None

        params = self._preserved + [(self.page_parameter, str(page))]
        return f"{self.path}?{urlencode(params)}"
