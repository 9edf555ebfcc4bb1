"""
API package containing the routes served by every service.

The ``router`` module exposes a top‑level ``router`` which includes
the endpoint modules from ``endpoints``.
"""
