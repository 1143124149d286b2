"""
Paging defaults loaded from the environment.

The values are read once into an immutable PagingSettings snapshot which
is then injected into calculators, so nothing in the paging core reaches
for process-wide configuration on its own.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_RESULTS_TEXT_SINGULAR = "item"
DEFAULT_RESULTS_TEXT_PLURAL = "items"


@dataclass(frozen=True)
class PagingSettings:
    """Default page size and the words used to describe results."""

    page_size: int = DEFAULT_PAGE_SIZE
    results_text_singular: str = DEFAULT_RESULTS_TEXT_SINGULAR
    results_text_plural: str = DEFAULT_RESULTS_TEXT_PLURAL


def load_paging_settings(environ: Optional[Mapping[str, str]] = None) -> PagingSettings:
    """
    Build PagingSettings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        PagingSettings with fallbacks applied for missing or unusable values
    """
    if environ is None:
        environ = os.environ

    raw_page_size = environ.get("PAGING_PAGE_SIZE")
    page_size = DEFAULT_PAGE_SIZE
    if raw_page_size:
        try:
            page_size = int(raw_page_size)
        except ValueError:
            logger.warning(f"PAGING_PAGE_SIZE={raw_page_size!r} is not a number, using {DEFAULT_PAGE_SIZE}")

    return PagingSettings(
        page_size=page_size,
        results_text_singular=environ.get("PAGING_RESULTS_TEXT_SINGULAR") or DEFAULT_RESULTS_TEXT_SINGULAR,
        results_text_plural=environ.get("PAGING_RESULTS_TEXT_PLURAL") or DEFAULT_RESULTS_TEXT_PLURAL,
    )
