"""
Paging helpers: page arithmetic, page window tokens and page URLs.
"""
