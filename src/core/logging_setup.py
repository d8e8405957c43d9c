"""Bootstrap de logging (stdlib + Rich).

Los módulos usan `logging.getLogger(__name__)`; solo la CLI llama a
`configure_logging`. La librería no instala handlers por su cuenta.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "rutcheck-rich"


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> None:
    """Instala un único `RichHandler` en el root logger (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
