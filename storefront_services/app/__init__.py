"""
Application package.

Each service is the same small FastAPI application bound to a
different ``ServiceDefinition``.  The package is organised the usual
way: ``core`` for configuration and logging, ``schemas`` for the
definition model, ``services`` for the registry, ``api`` for routes,
and ``server`` for running an application under uvicorn.
"""

from .main import auth_app, create_app, order_app, product_app  # noqa: F401
