"""
Request-facing collaborators.

Reads pagination state from an incoming Starlette/FastAPI request and turns
page numbers back into absolute URLs for the same route.
"""

from dataclasses import dataclass, field
from typing import (Any, Dict, Iterable, List, Mapping, Optional, Protocol,
                    Tuple, Union)
from urllib.parse import urlencode

from starlette.datastructures import URL, QueryParams
from starlette.requests import Request
from starlette.routing import NoMatchFound

from pagelinks.core.config import settings
from pagelinks.core.exceptions import RouteResolutionError
from pagelinks.core.logging import get_logger, log_event
from pagelinks.models.pagination import PaginationState

logger = get_logger(__name__)

QueryItems = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]


@dataclass(frozen=True)
class RouteParams:
    """Route a page URL is built for.

    ``name`` is the route name given to ``request.url_for``; ``None`` means
    "the URL of the current request".
    """

    name: Optional[str] = None
    path_params: Dict[str, Any] = field(default_factory=dict)


class UrlBuilder(Protocol):
    """Builds the URL that shows a given page."""

    def url_for_page(self, page: int) -> str:
        ...


def _carried_query(
    items: Iterable[Tuple[str, Any]], page_param: str, excluded: Iterable[str]
) -> List[Tuple[str, str]]:
    """Query parameters kept on every page URL."""
    dropped = set(excluded) | {page_param}
    return [(key, str(value)) for key, value in items if key not in dropped]


def _query_items(query: QueryItems) -> List[Tuple[str, Any]]:
    if query is None:
        return []
    if isinstance(query, QueryParams):
        return query.multi_items()
    if isinstance(query, Mapping):
        return list(query.items())
    return list(query)


class QueryUrlBuilder:
    """Page URLs made from a fixed base URL plus a query string."""

    def __init__(
        self,
        base_url: str,
        query: QueryItems = None,
        page_param: Optional[str] = None,
        excluded_query_params: Optional[Iterable[str]] = None,
    ):
        self.page_param = page_param or settings.page_param
        excluded = (
            settings.excluded_query_params
            if excluded_query_params is None
            else excluded_query_params
        )

        self.base = URL(base_url)
        items = QueryParams(self.base.query).multi_items() + _query_items(query)
        self.query = _carried_query(items, self.page_param, excluded)

    def url_for_page(self, page: int) -> str:
        params = self.query + [(self.page_param, str(page))]
        return str(self.base.replace(query=urlencode(params)))


class RequestUrlBuilder:
    """Page URLs for a route of the application serving ``request``.

    When the route declares the page parameter in its path, the page goes
    there; otherwise it is added to the query string. The current query
    string is carried over except for excluded parameters.
    """

    def __init__(
        self,
        request: Request,
        route: Optional[RouteParams] = None,
        page_param: Optional[str] = None,
        excluded_query_params: Optional[Iterable[str]] = None,
    ):
        self.request = request
        self.route = route or RouteParams()
        self.page_param = page_param or settings.page_param
        excluded = (
            settings.excluded_query_params
            if excluded_query_params is None
            else excluded_query_params
        )
        self.query = _carried_query(
            request.query_params.multi_items(), self.page_param, excluded
        )

    def _resolve(self, page: int) -> Tuple[URL, bool]:
        """Return the base URL and whether the page is already in its path."""
        if self.route.name is None:
            return self.request.url, False

        path_params = dict(self.route.path_params)
        path_params.pop(self.page_param, None)
        try:
            url = self.request.url_for(
                self.route.name, **path_params, **{self.page_param: page}
            )
            return URL(str(url)), True
        except NoMatchFound:
            pass

        try:
            url = self.request.url_for(self.route.name, **path_params)
            return URL(str(url)), False
        except NoMatchFound as e:
            log_event(
                logger,
                "warning",
                "route_resolution_failed",
                route_name=self.route.name,
                path_params=path_params,
            )
            raise RouteResolutionError(
                f"No route named '{self.route.name}' matches {sorted(path_params)}",
                route_name=self.route.name,
            ) from e

    def url_for_page(self, page: int) -> str:
        base, page_in_path = self._resolve(page)
        params = list(self.query)
        if not page_in_path:
            params.append((self.page_param, str(page)))
        return str(base.replace(query=urlencode(params)))


class RequestContextAdapter:
    """Extracts pagination input from an incoming request."""

    def __init__(self, page_param: Optional[str] = None):
        self.page_param = page_param or settings.page_param

    def page_from_request(self, request: Request) -> int:
        """
        Current page number, normalised to at least 1.

        A page given in the route path wins over one in the query string.
        Missing, blank, non-numeric, zero and negative values all become 1.
        """
        raw = request.path_params.get(self.page_param)
        if raw is None:
            raw = request.query_params.get(self.page_param)

        try:
            page = int(raw) if raw not in (None, "") else 1
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric page value {raw!r}")
            page = 1

        return max(page, 1)

    def state_from_request(
        self, request: Request, total_items: int, page_size: int
    ) -> PaginationState:
        return PaginationState(
            current_page=self.page_from_request(request),
            total_items=total_items,
            page_size=page_size,
        )

    def route_from_request(self, request: Request) -> RouteParams:
        """Name and path params of the route that matched ``request``."""
        route = request.scope.get("route")
        path_params = {
            key: value
            for key, value in request.path_params.items()
            if key != self.page_param
        }
        return RouteParams(name=getattr(route, "name", None), path_params=path_params)
