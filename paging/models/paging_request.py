"""
Snapshot of the request values the pager depends on.

Taking the snapshot once per request keeps the calculator free of any
implicit access to the live Flask request.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PagingRequest:
    """Raw paging inputs read from an incoming request."""

    page: Optional[str] = None
    """Raw 'page' query parameter, or None when absent."""

    page_size: Optional[str] = None
    """Raw 'pagesize' query parameter, or None when absent."""

    method: str = "GET"
    """HTTP method of the request."""

    path: str = ""
    """Path that paging links should point at."""

    query_string: str = ""
    """Raw query string of the request, without the leading '?'."""

    @classmethod
    def from_flask_request(cls, request) -> "PagingRequest":
        """Build a snapshot from a Flask/Werkzeug request object."""
        query_string = request.query_string
        if isinstance(query_string, bytes):
            query_string = query_string.decode("utf-8", errors="replace")

        return cls(
            page=request.args.get("page"),
            page_size=request.args.get("pagesize"),
            method=request.method,
            path=request.path,
            query_string=query_string,
        )
