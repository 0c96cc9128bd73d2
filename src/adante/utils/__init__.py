"""Shared utilities: cross-cutting concerns with no business logic.

Rules
-----
* No business logic.
* No I/O beyond what the application explicitly configures.
* Importable by any layer.
"""

from adante.utils.log import configure_logging, get_logger

__all__: list[str] = ["configure_logging", "get_logger"]
