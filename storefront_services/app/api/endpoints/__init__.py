"""
Endpoint subpackage.

Each module in this package defines an APIRouter.  The routers are
aggregated in ``router.py`` at the package level and then included in
the application built by ``create_app``.
"""
