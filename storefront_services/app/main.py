"""
Application factory for the storefront services.

This module assembles a FastAPI application for one service, sets up
logging and includes the shared router.  ``create_app`` builds and
configures the app for a given service; one instance per known
service is created at module import time so that an ASGI server can
be pointed at it directly, e.g.::

    uvicorn storefront_services.app.main:auth_app --port 3000

The interactive docs and OpenAPI routes are disabled: the root route
is the only path a service answers, everything else is a 404.
"""

import logging
from typing import Union

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .schemas.service import ServiceDefinition
from .services.registry import registry


logger = logging.getLogger(__name__)


def create_app(service: Union[ServiceDefinition, str]) -> FastAPI:
    """Create and configure a FastAPI application for one service.

    Parameters
    ----------
    service : ServiceDefinition or str
        The service definition, or a key looked up in the registry
        (``"auth"``, ``"product"`` or ``"order"``).

    Returns
    -------
    FastAPI
        A configured application whose ``state.service`` holds the
        definition it serves.

    Raises
    ------
    UnknownServiceError
        If ``service`` is a key that is not in the registry.
    """
    setup_logging(settings.log_level, settings.log_file)

    if isinstance(service, str):
        service = registry.get(service)

    app = FastAPI(title=service.name, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.service = service
    app.include_router(router)

    logger.debug("Created application for %s", service.key)
    return app


auth_app = create_app("auth")
product_app = create_app("product")
order_app = create_app("order")
