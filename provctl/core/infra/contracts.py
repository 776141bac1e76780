"""
Contrato que deben implementar los providers de provisionamiento.

El core solo define interfaces; la implementación vive en provctl/providers/*.
Los fallos se reportan con excepciones de provctl.core.errors.
"""

from pathlib import Path
from typing import Callable, List, Optional, Protocol

from provctl.core.environment import Environment
from provctl.core.infra.models import (
    DeployPreviewResult,
    DeployResult,
    DestroyOptions,
    DestroyResult,
    StateOptions,
    StateResult,
)
from provctl.core.input import Console, Prompter
from provctl.core.project.models import ProvisioningOptions
from provctl.core.tools import ExternalTool


class ProviderContract(Protocol):
    """
    Contrato mínimo de un provider (custom, bicep, terraform, ...).
    El orquestador llama initialize() una vez y luego la operación del verbo pedido.
    """
    def name(self) -> str:
        """Nombre legible del provider."""
        ...

    def required_external_tools(self) -> List[ExternalTool]:
        """Binarios externos que deben estar instalados."""
        ...

    def initialize(self, project_path: Path, options: ProvisioningOptions) -> None:
        """Guarda ruta y opciones y deja el ambiente listo para provisionar."""
        ...

    def ensure_env(self) -> None:
        """Garantiza que el ambiente tenga los valores requeridos, pidiéndolos si faltan."""
        ...

    def state(self, options: Optional[StateOptions] = None) -> StateResult:
        """Estado actual de los recursos desplegados."""
        ...

    def get_deployment(self) -> DeployResult:
        """Último despliegue conocido."""
        ...

    def deploy(self) -> DeployResult:
        """Provisiona la infraestructura."""
        ...

    def preview(self) -> DeployPreviewResult:
        """Qué cambios aplicaría deploy() (sin ejecutar)."""
        ...

    def destroy(self, options: DestroyOptions) -> DestroyResult:
        """Elimina la infraestructura."""
        ...


ProviderFactory = Callable[[Environment, Console, Prompter], ProviderContract]
