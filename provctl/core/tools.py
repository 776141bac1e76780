"""
Herramientas externas (binarios) que un provider puede requerir.
"""

import shutil
from typing import Iterable, List, Optional

from provctl.core.errors import ToolNotInstalledError


class ExternalTool:
    """Binario externo requerido por un provider (ej: bicep, terraform)."""

    def __init__(self, name: str, install_url: str = "", binary: Optional[str] = None):
        self.name = name
        self.install_url = install_url
        self.binary = binary or name

    def check_installed(self) -> bool:
        return shutil.which(self.binary) is not None

    def __repr__(self) -> str:
        return f"ExternalTool({self.name!r})"


def ensure_installed(tools: Iterable[ExternalTool]) -> None:
    """Lanza ToolNotInstalledError con todas las herramientas que falten."""
    missing: List[ExternalTool] = [t for t in tools if not t.check_installed()]
    if missing:
        raise ToolNotInstalledError(missing)
