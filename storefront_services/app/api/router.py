"""
Top‑level router shared by all services.

The services expose identical route tables; only the definition
attached to the application differs.  New endpoint modules should be
included here.
"""

from fastapi import APIRouter

from .endpoints import root

router = APIRouter()

router.include_router(root.router, tags=["root"])
