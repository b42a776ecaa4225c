"""Pagination state, display options and link descriptors."""

from dataclasses import dataclass
from enum import Enum
from math import ceil
from typing import Any, Dict, Iterator, List, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError, validator

from pagelinks.core.exceptions import InvalidConfiguration


class LinkKind(str, Enum):
    """Kinds of link in a pagination control."""

    FIRST = "first"
    PREV = "prev"
    NEXT = "next"
    LAST = "last"
    NUMBER = "number"


class WindowBias(str, Enum):
    """Side of the current page that receives the odd neighbour slot."""

    BEFORE = "before"
    AFTER = "after"


DEFAULT_WINDOW_BIAS = WindowBias.AFTER


@dataclass(frozen=True)
class PaginationState:
    """Where the reader is within a collection of records."""

    current_page: int
    total_items: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def last_page(self) -> int:
        if self.page_size <= 0:
            raise InvalidConfiguration(
                f"page_size must be positive, got {self.page_size}"
            )
        if self.total_items <= 0:
            return 0
        return ceil(self.total_items / self.page_size)


def slice_records(records: Sequence[Any], state: PaginationState) -> List[Any]:
    """Return the records shown on the current page."""
    start = max(state.offset, 0)
    return list(records[start : start + state.page_size])


@dataclass(frozen=True)
class LinkDescriptor:
    """A single entry of a pagination control.

    ``target_page`` only means something when ``enabled`` is true.
    ``is_active`` is only ever set on ``number`` links.
    """

    kind: LinkKind
    target_page: int
    enabled: bool
    is_active: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "targetPage": self.target_page,
            "enabled": self.enabled,
            "isActive": self.is_active,
        }


PageWindow = Tuple[LinkDescriptor, ...]


class DisplayConfig(BaseModel):
    """Display options for a pagination control."""

    show_first_last: bool = Field(True, description="Render first/last links")
    show_prev_next: bool = Field(True, description="Render prev/next links")
    show_numbers: bool = Field(True, description="Render numbered page links")
    max_numbers: int = Field(10, description="Upper bound on numbered links")

    first_text: str = "<< First"
    first_text_disabled: str = ""
    prev_text: str = "< Prev"
    prev_text_disabled: str = ""
    next_text: str = "Next >"
    next_text_disabled: str = ""
    last_text: str = "Last >>"
    last_text_disabled: str = ""

    open_tag: str = "<li>"
    active_open_tag: str = '<li class="active">'
    close_tag: str = "</li>"
    paging_wrapper: str = Field(
        "<ul>{content}</ul>", description="Template wrapping the whole control"
    )

    window_bias: WindowBias = Field(
        DEFAULT_WINDOW_BIAS,
        description="Side that gets the spare slot when max_numbers is even",
    )

    @validator("paging_wrapper")
    def wrapper_has_content_slot(cls, v):
        """Wrapper template must contain the {content} placeholder."""
        if "{content}" not in v:
            raise ValueError("paging_wrapper must contain '{content}'")
        return v

    class Config:
        """Pydantic config."""

        extra = "forbid"
        frozen = True

    def merged(self, **overrides: Any) -> "DisplayConfig":
        """Return a copy with ``overrides`` applied on top of this config."""
        if not overrides:
            return self
        try:
            return DisplayConfig(**{**self.model_dump(), **overrides})
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid display options: {e}") from e

    def text_for(self, kind: LinkKind, enabled: bool) -> str:
        """Text shown for a first/prev/next/last link."""
        suffix = "_text" if enabled else "_text_disabled"
        return getattr(self, f"{kind.value}{suffix}")


@dataclass(frozen=True)
class PageLinks:
    """Every link a pagination control can show, before gating."""

    first: LinkDescriptor
    prev: LinkDescriptor
    numbers: PageWindow
    next: LinkDescriptor
    last: LinkDescriptor

    def ordered(self, config: DisplayConfig) -> Iterator[LinkDescriptor]:
        """Yield links in display order, skipping sections that are switched off."""
        if config.show_first_last:
            yield self.first
        if config.show_prev_next:
            yield self.prev
        if config.show_numbers:
            yield from self.numbers
        if config.show_prev_next:
            yield self.next
        if config.show_first_last:
            yield self.last

    def to_dict(self) -> Dict[str, Any]:
        return {
            "first": self.first.to_dict(),
            "prev": self.prev.to_dict(),
            "numbers": [link.to_dict() for link in self.numbers],
            "next": self.next.to_dict(),
            "last": self.last.to_dict(),
        }
