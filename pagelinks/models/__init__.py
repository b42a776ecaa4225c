"""Data models package."""

from .pagination import (DEFAULT_WINDOW_BIAS, DisplayConfig, LinkDescriptor,
                         LinkKind, PageLinks, PageWindow, PaginationState,
                         WindowBias, slice_records)

__all__ = [
    "PaginationState",
    "DisplayConfig",
    "LinkDescriptor",
    "LinkKind",
    "PageLinks",
    "PageWindow",
    "WindowBias",
    "DEFAULT_WINDOW_BIAS",
    "slice_records",
]
