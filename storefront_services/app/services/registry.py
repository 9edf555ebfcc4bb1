"""
Registry of the known services.

The registry holds the three placeholder services (auth, product and
order) with their response messages and ports.  Ports come from
``Settings`` so that each one can be overridden through the
environment; with the defaults the layout is 3000/3001/3002.
"""

import logging
from typing import Dict, Iterator, List, Optional

from storefront_services.app.core.config import Settings, settings as default_settings
from storefront_services.app.schemas.service import ServiceDefinition


logger = logging.getLogger(__name__)


DEFAULT_SERVICES: List[ServiceDefinition] = [
    ServiceDefinition(key="auth", name="Auth Service", port=3000, message="Auth Service is running 🚀"),
    ServiceDefinition(key="product", name="Product Service", port=3001, message="Product Service is running 🛍️"),
    ServiceDefinition(
        key="order",
        name="Order Service",
        port=3002,
        message="Order Service is running 💼",
        startup_template="{name} is running on port {port}",
    ),
]


class UnknownServiceError(KeyError):
    """Raised when a service key is not present in the registry."""

    def __init__(self, key: str, known: List[str]) -> None:
        super().__init__(key)
        self.key = key
        self.known = known

    def __str__(self) -> str:
        return f"Unknown service {self.key!r}; expected one of: {', '.join(self.known)}"


class ServiceRegistry:
    """Lookup table of service definitions keyed by service key."""

    def __init__(self, services: List[ServiceDefinition]) -> None:
        self._services: Dict[str, ServiceDefinition] = {}
        used_ports: Dict[int, str] = {}
        for service in services:
            if service.key in self._services:
                raise ValueError(f"Duplicate service key {service.key!r}")
            # Port 0 means "any free port" and never collides.
            if service.port and service.port in used_ports:
                raise ValueError(
                    f"Services {used_ports[service.port]!r} and {service.key!r} "
                    f"are both configured for port {service.port}"
                )
            used_ports[service.port] = service.key
            self._services[service.key] = service

    @classmethod
    def build(cls, config: Optional[Settings] = None) -> "ServiceRegistry":
        """Build the registry, applying port overrides from settings."""
        config = config or default_settings
        services = []
        for service in DEFAULT_SERVICES:
            port = config.port_for(service.key)
            if port is not None and port != service.port:
                logger.debug("Port for %s overridden: %d -> %d", service.key, service.port, port)
                service = service.with_port(port)
            services.append(service)
        return cls(services)

    def get(self, key: str) -> ServiceDefinition:
        try:
            return self._services[key]
        except KeyError:
            raise UnknownServiceError(key, self.keys()) from None

    def keys(self) -> List[str]:
        return list(self._services)

    def __iter__(self) -> Iterator[ServiceDefinition]:
        return iter(self._services.values())

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, key: object) -> bool:
        return key in self._services


registry = ServiceRegistry.build()
