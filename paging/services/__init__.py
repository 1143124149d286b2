from .page_calculator import PageCalculator
from .page_window_builder import PageWindowBuilder
from .page_url_builder import PageUrlBuilder

__all__ = ['PageCalculator', 'PageWindowBuilder', 'PageUrlBuilder']
