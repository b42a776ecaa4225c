"""Page window and link state computation."""

from typing import Tuple

from pagelinks.core.exceptions import InvalidConfiguration
from pagelinks.core.logging import get_logger
from pagelinks.models.pagination import (DEFAULT_WINDOW_BIAS, DisplayConfig,
                                         LinkDescriptor, LinkKind, PageLinks,
                                         PageWindow, PaginationState,
                                         WindowBias)

logger = get_logger(__name__)


class PageWindowCalculator:
    """Derives the first/prev/numbers/next/last links for one page.

    The calculator never clamps ``current_page``. A page past the end of the
    collection simply produces disabled next/last links and an empty or
    partial window.
    """

    def __init__(
        self,
        state: PaginationState,
        max_numbers: int = 10,
        window_bias: WindowBias = DEFAULT_WINDOW_BIAS,
    ):
        _validate(state, max_numbers)
        self.state = state
        self.max_numbers = max_numbers
        self.window_bias = WindowBias(window_bias)

    def last_page(self) -> int:
        return self.state.last_page

    def first(self) -> LinkDescriptor:
        return LinkDescriptor(
            kind=LinkKind.FIRST,
            target_page=1,
            enabled=self.state.current_page > 1,
        )

    def prev(self) -> LinkDescriptor:
        return LinkDescriptor(
            kind=LinkKind.PREV,
            target_page=self.state.current_page - 1,
            enabled=self.state.current_page > 1,
        )

    def next(self) -> LinkDescriptor:
        # Enabled while at least one record lies past the end of this page
        state = self.state
        return LinkDescriptor(
            kind=LinkKind.NEXT,
            target_page=state.current_page + 1,
            enabled=state.total_items > state.page_size * state.current_page,
        )

    def last(self) -> LinkDescriptor:
        last_page = self.last_page()
        return LinkDescriptor(
            kind=LinkKind.LAST,
            target_page=last_page,
            enabled=last_page > self.state.current_page,
        )

    def window_bounds(self) -> Tuple[int, int]:
        """
        Inclusive (start, end) of the numbered window.

        The current page takes one slot and the remaining ``max_numbers - 1``
        are split around it. An odd remainder goes to the side named by
        ``window_bias``. Bounds are clamped to [1, last_page] without shifting
        the window, so it shrinks near either edge. ``start > end`` means the
        window is empty.
        """
        neighbours = self.max_numbers - 1
        before = after = neighbours // 2
        if neighbours % 2:
            if self.window_bias is WindowBias.AFTER:
                after += 1
            else:
                before += 1

        current = self.state.current_page
        start = max(1, current - before)
        end = min(self.last_page(), current + after)
        return start, end

    def numbers(self) -> PageWindow:
        start, end = self.window_bounds()
        current = self.state.current_page
        return tuple(
            LinkDescriptor(
                kind=LinkKind.NUMBER,
                target_page=page,
                enabled=True,
                is_active=page == current,
            )
            for page in range(start, end + 1)
        )

    def compute(self) -> PageLinks:
        return PageLinks(
            first=self.first(),
            prev=self.prev(),
            numbers=self.numbers(),
            next=self.next(),
            last=self.last(),
        )


def _validate(state: PaginationState, max_numbers: int) -> None:
    """Reject pagination input that cannot produce a meaningful window."""
    problem = None
    if state.page_size <= 0:
        problem = f"page_size must be positive, got {state.page_size}"
    elif max_numbers <= 0:
        problem = f"max_numbers must be positive, got {max_numbers}"
    elif state.total_items < 0:
        problem = f"total_items must not be negative, got {state.total_items}"

    if problem:
        logger.warning(
            f"Rejected pagination configuration: {problem}",
            extra={
                "page": state.current_page,
                "total_items": state.total_items,
                "page_size": state.page_size,
            },
        )
        raise InvalidConfiguration(problem)


def compute_links(state: PaginationState, config: DisplayConfig) -> PageLinks:
    """Compute every pagination link for ``state`` under ``config``."""
    return PageWindowCalculator(
        state, max_numbers=config.max_numbers, window_bias=config.window_bias
    ).compute()
