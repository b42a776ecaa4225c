"""Pagination link computation and rendering."""

from pagelinks.core.config import settings
from pagelinks.core.exceptions import (InvalidConfiguration, PaginationError,
                                       RouteResolutionError)
from pagelinks.core.logging import setup_logging
from pagelinks.models.pagination import (DisplayConfig, LinkDescriptor,
                                         LinkKind, PageLinks, PaginationState,
                                         WindowBias)
from pagelinks.services.calculator import PageWindowCalculator, compute_links
from pagelinks.services.paginator import Paginator

__version__ = "0.1.0"

__all__ = [
    "compute_links",
    "PageWindowCalculator",
    "Paginator",
    "PaginationState",
    "DisplayConfig",
    "LinkDescriptor",
    "LinkKind",
    "PageLinks",
    "WindowBias",
    "PaginationError",
    "InvalidConfiguration",
    "RouteResolutionError",
]

if settings.configure_logging:
    setup_logging()
