"""
Main entrypoint for the Trip Expense API.

This module assembles the FastAPI application: logging, the HTTP
plumbing (CORS headers, error envelopes, the 500 guard) and the API
router mounted under ``/api``.  ``create_app`` builds and configures
the app; the module-level ``app`` is what ASGI servers import::

    uvicorn trip_expense_api.app.main:app --port 4000

Storage and route search are injected: pass a ``DocumentStore`` and a
``RouteProvider`` to ``create_app`` to replace the JSON file named by
``settings.data_file`` and the sample route data.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.http import install_http_handlers
from .core.logging_config import setup_logging
from .core.store import DocumentStore, JsonFileStore, get_data_path
from .services.route_service import RouteProvider, SampleRouteProvider


def create_app(
    store: Optional[DocumentStore] = None,
    route_provider: Optional[RouteProvider] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DocumentStore]
        Storage for trip requests and expenses.  Defaults to a
        ``JsonFileStore`` on ``settings.data_file``.
    route_provider : Optional[RouteProvider]
        Source of route search results.  Defaults to
        ``SampleRouteProvider``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    # Paths are matched exactly; "/api/trip-requests/" is a 404, not a redirect.
    app.router.redirect_slashes = False
    app.state.store = store if store is not None else JsonFileStore(get_data_path())
    app.state.route_provider = route_provider if route_provider is not None else SampleRouteProvider()

    install_http_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


# Created at import time so that uvicorn can discover it.  The data
# file is not touched until the first request.
app = create_app()
