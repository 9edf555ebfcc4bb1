"""Unified entry point for the storefront services.

This script launches one or more of the auth, product and order
services.  It is intended to be executed from the project root, for
example in a container where you only specify a single Python file
to run.

Ports, host and log level can be overridden through environment
variables (``AUTH_SERVICE_PORT``, ``SERVICE_HOST``, ``LOG_LEVEL``,
...).

Usage:
    python run.py auth
    python run.py auth product order
"""

from storefront_services.cli import main


if __name__ == "__main__":
    main()
