"""Services package."""

from .calculator import PageWindowCalculator, compute_links
from .paginator import Paginator, default_display_config

__all__ = [
    "PageWindowCalculator",
    "compute_links",
    "Paginator",
    "default_display_config",
]
