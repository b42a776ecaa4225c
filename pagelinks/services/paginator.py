"""Full pagination control: first, prev, numbers, next, last."""

from typing import Any, List, Optional

from starlette.requests import Request

from pagelinks.api.adapters import (RequestContextAdapter, RequestUrlBuilder,
                                    RouteParams, UrlBuilder)
from pagelinks.api.responses.links import LinkRenderer
from pagelinks.core.config import settings
from pagelinks.core.logging import get_logger, log_event
from pagelinks.models.pagination import (DisplayConfig, LinkDescriptor,
                                         PageLinks, PaginationState)
from pagelinks.services.calculator import compute_links

logger = get_logger(__name__)


def default_display_config() -> DisplayConfig:
    """Display options seeded from settings."""
    return DisplayConfig(
        max_numbers=settings.max_numbers,
        show_first_last=settings.show_first_last,
        show_prev_next=settings.show_prev_next,
        show_numbers=settings.show_numbers,
        paging_wrapper=settings.paging_wrapper,
    )


class Paginator:
    """
    Renders pagination controls for one page of a collection.

    Keyword overrides given to a rendering method apply to that call only.
    Use ``set_defaults`` to change the options later calls start from; it is
    the only method that mutates the paginator and is not synchronised, so
    do not call it while another thread is rendering with the same instance.
    """

    def __init__(
        self,
        state: PaginationState,
        url_builder: UrlBuilder,
        config: Optional[DisplayConfig] = None,
        renderer: Optional[LinkRenderer] = None,
    ):
        self.state = state
        self.defaults = config or default_display_config()
        self.renderer = renderer or LinkRenderer(url_builder)

    @classmethod
    def from_request(
        cls,
        request: Request,
        total_items: int,
        page_size: int,
        route: Optional[RouteParams] = None,
        config: Optional[DisplayConfig] = None,
        adapter: Optional[RequestContextAdapter] = None,
    ) -> "Paginator":
        """Paginator for the page requested by ``request``.

        Without an explicit ``route`` the links point back at the route that
        served the request.
        """
        adapter = adapter or RequestContextAdapter()
        state = adapter.state_from_request(request, total_items, page_size)
        if route is None:
            route = adapter.route_from_request(request)
        url_builder = RequestUrlBuilder(request, route, page_param=adapter.page_param)
        return cls(state, url_builder, config=config)

    def set_defaults(self, **options: Any) -> DisplayConfig:
        """Merge ``options`` into the stored defaults for all later calls."""
        self.defaults = self.defaults.merged(**options)
        return self.defaults

    def _compute(self, overrides: dict) -> tuple:
        config = self.defaults.merged(**overrides)
        return config, compute_links(self.state, config)

    def first(self, **overrides: Any) -> str:
        config, links = self._compute(overrides)
        return self.renderer.render(links.first, config)

    def prev(self, **overrides: Any) -> str:
        config, links = self._compute(overrides)
        return self.renderer.render(links.prev, config)

    def numbers(self, **overrides: Any) -> str:
        config, links = self._compute(overrides)
        return self.renderer.render_all(links.numbers, config)

    def next(self, **overrides: Any) -> str:
        config, links = self._compute(overrides)
        return self.renderer.render(links.next, config)

    def last(self, **overrides: Any) -> str:
        config, links = self._compute(overrides)
        return self.renderer.render(links.last, config)

    def page_links(self, **overrides: Any) -> PageLinks:
        """All links, ungated."""
        _, links = self._compute(overrides)
        return links

    def links(self, **overrides: Any) -> List[LinkDescriptor]:
        """Links in display order with switched-off sections left out."""
        config, links = self._compute(overrides)
        return list(links.ordered(config))

    def paginate(self, **overrides: Any) -> str:
        """Markup of the full control, wrapped in ``paging_wrapper``."""
        config, links = self._compute(overrides)
        content = self.renderer.render_all(links.ordered(config), config)

        window = links.numbers
        log_event(
            logger,
            "debug",
            "pagination_rendered",
            page=self.state.current_page,
            total_items=self.state.total_items,
            page_size=self.state.page_size,
            window_start=window[0].target_page if window else None,
            window_end=window[-1].target_page if window else None,
        )
        return self.renderer.wrap(content, config)
