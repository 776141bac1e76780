"""
Configuración de logging (stdlib logging + rich.logging.RichHandler).

Nivel: argumento explícito → PROVCTL_LOG_LEVEL → INFO.
"""

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


_DEFAULT_LOG_LEVEL = "INFO"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    candidate = (level or os.getenv("PROVCTL_LOG_LEVEL", _DEFAULT_LOG_LEVEL)).upper()
    resolved = logging.getLevelName(candidate)
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def configure_logging(level: Optional[Union[str, int]] = None, force: bool = False) -> None:
    root = logging.getLogger()
    resolved_level = _resolve_level(level)
    root.setLevel(resolved_level)

    if root.handlers and not force:
        for handler in root.handlers:
            handler.setLevel(resolved_level)
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=resolved_level <= logging.DEBUG,
        rich_tracebacks=True,
    )
    handler.setLevel(resolved_level)
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s", datefmt="[%X]"))
    root.handlers.clear()
    root.addHandler(handler)
