"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the standard port layout (auth on 3000, product on 3001,
order on 3002), so a deployment without any variables set behaves
exactly like the stock services.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .logging_config import normalize_log_level


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    host: str = field(default_factory=lambda: os.getenv("SERVICE_HOST", "0.0.0.0"))
    log_level: str = field(default_factory=lambda: normalize_log_level(os.getenv("LOG_LEVEL") or "info"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    access_log: bool = field(default_factory=lambda: _env_bool("ACCESS_LOG", True))

    # Per‑service port overrides.  Keys match the service registry.
    auth_port: int = field(default_factory=lambda: _env_int("AUTH_SERVICE_PORT", 3000))
    product_port: int = field(default_factory=lambda: _env_int("PRODUCT_SERVICE_PORT", 3001))
    order_port: int = field(default_factory=lambda: _env_int("ORDER_SERVICE_PORT", 3002))

    def port_for(self, key: str) -> Optional[int]:
        """Return the configured port for a service key, if any."""
        return getattr(self, f"{key}_port", None)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests construct their
# own ``Settings`` instances instead.
settings = Settings()
