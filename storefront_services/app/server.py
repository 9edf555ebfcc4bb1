"""
Run services under uvicorn.

A ``ServiceServer`` is a ``uvicorn.Server`` bound to one service
definition.  Once its listening socket is bound it writes a single
confirmation line to standard output naming the service and port.
Bind failures (e.g. address already in use) are left to uvicorn,
which logs the error and exits the process with status 1.
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from uvicorn import Config, Server

from .core.config import settings
from .core.logging_config import normalize_log_level
from .main import create_app
from .schemas.service import ServiceDefinition


logger = logging.getLogger(__name__)


class ServiceServer(Server):
    """uvicorn server that announces its service once listening."""

    def __init__(self, config: Config, service: ServiceDefinition) -> None:
        super().__init__(config)
        self.service = service

    @property
    def bound_port(self) -> Optional[int]:
        """Port of the first listening socket, once bound."""
        for server in self.servers:
            for sock in server.sockets or ():
                return sock.getsockname()[1]
        return None

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            print(self.service.startup_line(self.bound_port), flush=True)

    def close_listeners(self) -> None:
        """Close any listening socket still open, e.g. after an interrupted startup."""
        for server in self.servers:
            server.close()


def build_server(
    service: ServiceDefinition,
    host: Optional[str] = None,
    port: Optional[int] = None,
    log_level: Optional[str] = None,
) -> ServiceServer:
    """Create a server for ``service`` without starting it.

    ``host`` and ``port`` default to ``settings.host`` and the
    service's own port.
    """
    if port is not None:
        service = service.with_port(port)
    config = Config(
        app=create_app(service),
        host=host or settings.host,
        port=service.port,
        log_level=normalize_log_level(log_level or settings.log_level),
        access_log=settings.access_log,
        reload=False,
    )
    return ServiceServer(config, service)


async def serve(
    service: ServiceDefinition,
    host: Optional[str] = None,
    port: Optional[int] = None,
    log_level: Optional[str] = None,
) -> None:
    """Run a single service until it is asked to stop."""
    server = build_server(service, host=host, port=port, log_level=log_level)
    logger.info("Starting %s on %s:%d", service.name, server.config.host, server.config.port)
    await server.serve()


class ServiceExitError(RuntimeError):
    """A server asked to exit the process while running alongside others."""

    def __init__(self, service: ServiceDefinition, code) -> None:
        super().__init__(f"{service.name} exited with status {code}")
        self.service = service
        self.code = code


async def _serve_one(server: ServiceServer) -> None:
    logger.info("Starting %s on %s:%d", server.service.name, server.config.host, server.config.port)
    try:
        await server.serve()
    except SystemExit as exc:
        # uvicorn exits on bind failure; the siblings still need stopping.
        raise ServiceExitError(server.service, exc.code) from None


async def run_servers(servers: Iterable[ServiceServer]) -> None:
    """Run already built servers side by side until all of them stop.

    When one of them fails, the others are asked to exit, their
    listening sockets are closed, and the failure is re‑raised.  A
    uvicorn exit request (e.g. a bind failure) is re‑raised as
    ``SystemExit`` with the original status.
    """
    servers = list(servers)
    tasks: List[asyncio.Task] = [
        asyncio.create_task(_serve_one(server), name=server.service.key) for server in servers
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    if pending:
        for server in servers:
            server.should_exit = True
        await asyncio.gather(*pending, return_exceptions=True)
    for server in servers:
        server.close_listeners()

    for task in done:
        exception = task.exception()
        if exception is None:
            continue
        logger.error("Service %s failed: %s", task.get_name(), exception)
        if isinstance(exception, ServiceExitError):
            raise SystemExit(exception.code)
        raise exception


async def serve_many(
    services: Iterable[ServiceDefinition],
    host: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """Run several services concurrently, each on its own socket."""
    await run_servers(build_server(service, host=host, log_level=log_level) for service in services)
