"""
Top‑level package for the storefront services.

The package bundles three independent placeholder HTTP services
(auth, product and order).  All functionality lives in submodules
under ``app``; the ``cli`` module launches one or more services.
"""

__all__ = []
