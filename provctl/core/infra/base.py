"""
Base opcional para providers: implementación por defecto de métodos comunes.

Los providers pueden heredar de aquí o implementar solo el contrato (Protocol).
"""

from pathlib import Path
from typing import List, Optional

from provctl.core.environment import Environment
from provctl.core.input import Console, Prompter
from provctl.core.project.models import ProvisioningOptions
from provctl.core.tools import ExternalTool


class BaseProvider:
    """Base opcional para providers; no obligatorio usar herencia."""

    display_name: str = "Base"

    def __init__(self, env: Environment, console: Console, prompter: Prompter):
        self.env = env
        self.console = console
        self.prompter = prompter
        self.project_path: Optional[Path] = None
        self.options: Optional[ProvisioningOptions] = None

    def name(self) -> str:
        return self.display_name

    def required_external_tools(self) -> List[ExternalTool]:
        """Por defecto: sin herramientas externas."""
        return []

    def initialize(self, project_path: Path, options: ProvisioningOptions) -> None:
        """Guarda ruta y opciones y valida el ambiente; cualquier fallo de ensure_env se propaga."""
        self.project_path = project_path
        self.options = options
        self.ensure_env()

    def ensure_env(self) -> None:
        """Por defecto: el ambiente no requiere nada."""
        return None
