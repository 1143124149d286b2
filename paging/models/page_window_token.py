"""
Tokens describing one entry of a paging bar.

A presentation layer turns each token into a link, an emphasised page
number or a static ellipsis. Tokens carry page numbers only, never URLs.
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    PREVIOUS = "previous"
    PAGE = "page"
    ELLIPSIS = "ellipsis"
    NEXT = "next"


@dataclass(frozen=True)
class PageWindowToken:
    """A single entry in a page window."""

    kind: TokenKind
    page: int
    """Target page. For an ellipsis this is the first skipped page."""

    is_current: bool = False

    @classmethod
    def previous(cls, page: int) -> "PageWindowToken":
        return cls(TokenKind.PREVIOUS, page)

    @classmethod
    def next(cls, page: int) -> "PageWindowToken":
        return cls(TokenKind.NEXT, page)

    @classmethod
    def page_link(cls, page: int, is_current: bool = False) -> "PageWindowToken":
        return cls(TokenKind.PAGE, page, is_current)

    @classmethod
    def ellipsis(cls, jump_target: int) -> "PageWindowToken":
        return cls(TokenKind.ELLIPSIS, jump_target)

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "page": self.page,
            "current": self.is_current,
        }
