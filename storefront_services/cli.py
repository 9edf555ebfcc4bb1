"""
Command line launcher for the storefront services.

Usage:
    storefront-service auth
    storefront-service product --port 8001
    storefront-service auth product order --host 127.0.0.1

With a single key the service runs on its configured port (``--port``
overrides it).  Several keys run side by side in one interpreter, each
on its own port; this is meant for local development only.
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from uvicorn.config import LOG_LEVELS

from storefront_services.app.core.config import settings
from storefront_services.app.core.logging_config import canonical_log_level, setup_logging
from storefront_services.app.server import serve, serve_many
from storefront_services.app.services.registry import registry


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 0 and 65535, got {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="storefront-service", description="Run one or more storefront services.")
    ap.add_argument("services", nargs="+", choices=registry.keys(), metavar="SERVICE",
                    help=f"Service(s) to run: {', '.join(registry.keys())}")
    ap.add_argument("--host", default=None, help=f"Interface to bind (default: {settings.host})")
    ap.add_argument("--port", type=_port, default=None, help="Port override; only valid with a single service")
    ap.add_argument("--log-level", type=canonical_log_level, choices=list(LOG_LEVELS), default=None,
                    help=f"Log level (default: {settings.log_level})")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    ap = build_parser()
    args = ap.parse_args(argv)

    keys = list(dict.fromkeys(args.services))
    if args.port is not None and len(keys) > 1:
        ap.error("--port can only be used with a single service")

    log_level = args.log_level or settings.log_level
    setup_logging(log_level, settings.log_file)
    logging.getLogger(__name__).debug("Launching %s", ", ".join(keys))

    services = [registry.get(key) for key in keys]
    try:
        if len(services) == 1:
            asyncio.run(serve(services[0], host=args.host, port=args.port, log_level=log_level))
        else:
            asyncio.run(serve_many(services, host=args.host, log_level=log_level))
    except KeyboardInterrupt:
        # A failed bind raises SystemExit(1) and must keep its exit status.
        pass


if __name__ == "__main__":
    main()
