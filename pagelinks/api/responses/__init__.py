"""Response builders package."""

from .links import LinkRenderer

__all__ = [
    "LinkRenderer",
]
