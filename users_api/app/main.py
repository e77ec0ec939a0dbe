"""
Main entrypoint for the Users API.

This module assembles the FastAPI application: logging, the record
store, the interceptor chain, exception handlers and the router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn users_api.app.main:app --port 8080
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import setup_error_handling
from .core.logging_config import setup_logging
from .core.middleware import CorsInterceptor, ErrorInterceptor, InterceptorChain, LoggingInterceptor
from .core.store import UserStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.
    store : Optional[UserStore]
        Record store to serve.  When omitted a new store is created,
        seeded with the sample users if ``settings.seed_users`` is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if store is None:
        store = UserStore.seeded() if settings.seed_users else UserStore()
    app.state.settings = settings
    app.state.user_store = store
    app.state.started_at = time.monotonic()

    # Interceptors run in list order before the router dispatches.
    app.add_middleware(
        InterceptorChain,
        interceptors=[
            LoggingInterceptor(),
            CorsInterceptor(allow_origin=settings.cors_allow_origin),
            ErrorInterceptor(),
        ],
    )
    setup_error_handling(app)
    app.include_router(router)

    logger.debug("Application created with %d users", len(store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
