from .paging_request import PagingRequest
from .page_window_token import PageWindowToken, TokenKind

__all__ = ['PagingRequest', 'PageWindowToken', 'TokenKind']
