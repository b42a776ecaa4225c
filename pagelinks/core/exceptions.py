"""Exceptions raised by the pagination package."""

from typing import Optional


class PaginationError(Exception):
    """Base exception for pagination errors"""


class InvalidConfiguration(PaginationError, ValueError):
    """Pagination state or display options that cannot produce a window"""


class RouteResolutionError(PaginationError):
    """A page URL could not be built for the requested route"""

    def __init__(self, message: str, route_name: Optional[str] = None):
        super().__init__(message)
        self.route_name = route_name
