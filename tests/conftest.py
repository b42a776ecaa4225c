"""Pytest configuration and shared fixtures for pagelinks tests."""

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from pagelinks.api.adapters import QueryUrlBuilder, RouteParams
from pagelinks.core.config import get_settings
from pagelinks.models.pagination import DisplayConfig, PaginationState
from pagelinks.services.paginator import Paginator

# ============================================================================
# State Fixtures
# ============================================================================


@pytest.fixture
def make_state():
    """Factory for pagination states."""

    def _make(current_page=1, total_items=100, page_size=10):
        return PaginationState(
            current_page=current_page, total_items=total_items, page_size=page_size
        )

    return _make


@pytest.fixture
def display_config():
    """Display options with every default in place."""
    return DisplayConfig()


@pytest.fixture
def url_builder():
    """URL builder pointing at a fixed listing URL."""
    return QueryUrlBuilder("http://testserver/items", query={"sort": "name"})


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def paginated_app():
    """FastAPI app whose endpoints render pagination from the request."""
    app = FastAPI()

    @app.get("/items", name="list_items")
    async def list_items(request: Request, total: int = 95, limit: int = 10):
        paginator = Paginator.from_request(request, total_items=total, page_size=limit)
        return HTMLResponse(paginator.paginate())

    @app.get("/items/page/{page}", name="list_items_paged")
    async def list_items_paged(request: Request, page: str, total: int = 95):
        paginator = Paginator.from_request(request, total_items=total, page_size=10)
        return HTMLResponse(paginator.paginate(show_first_last=False))

    @app.get("/projects/{project}/tasks", name="project_tasks")
    async def project_tasks(request: Request, project: str):
        paginator = Paginator.from_request(request, total_items=30, page_size=10)
        return JSONResponse(
            {
                "page": paginator.state.current_page,
                "links": paginator.page_links().to_dict(),
                "urls": [
                    paginator.renderer.url_builder.url_for_page(n) for n in (1, 2, 3)
                ],
            }
        )

    @app.get("/search", name="search")
    async def search(request: Request):
        paginator = Paginator.from_request(
            request,
            total_items=50,
            page_size=10,
            route=RouteParams(name="project_tasks", path_params={"project": "alpha"}),
        )
        return HTMLResponse(paginator.next())

    @app.get("/broken", name="broken")
    async def broken(request: Request):
        paginator = Paginator.from_request(
            request,
            total_items=50,
            page_size=10,
            route=RouteParams(name="does_not_exist"),
        )
        return HTMLResponse(paginator.paginate())

    return app


# ============================================================================
# Cache Management
# ============================================================================


@pytest.fixture(autouse=True)
def reset_lru_caches():
    """Reset LRU caches between tests."""
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


# ============================================================================
# Markers
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
