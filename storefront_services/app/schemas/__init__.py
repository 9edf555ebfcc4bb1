"""
Pydantic schemas used by the services.

Only the service definition lives here; the services themselves
expose no request or response models beyond a plain‑text body.
"""

from .service import ServiceDefinition  # noqa: F401
