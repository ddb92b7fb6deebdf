"""Configuración de logging para los entry-points.

Los módulos usan `logging.getLogger(__name__)`; solo la CLI llama a
`configure_logging`, una vez, para enviar los registros a stderr con Rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "rd-docs"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Instala un `RichHandler` en el logger raíz (idempotente)."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
    return root
