"""
Resultados de las operaciones de un provider (estado, despliegue, preview, destroy).

Cada contenedor usa default_factory: cada instancia recibe su propio dict/list vacío.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class InputParameter:
    type: str
    default_value: Any = None
    value: Any = None


@dataclass
class OutputParameter:
    type: str
    value: Any = None


@dataclass
class Resource:
    id: str


@dataclass
class State:
    """Snapshot de recursos desplegados y valores de salida."""
    outputs: Dict[str, OutputParameter] = field(default_factory=dict)
    resources: List[Resource] = field(default_factory=list)


@dataclass
class StateResult:
    state: State = field(default_factory=State)


@dataclass
class Deployment:
    """Entradas y salidas de una operación de provisionamiento."""
    parameters: Dict[str, InputParameter] = field(default_factory=dict)
    outputs: Dict[str, OutputParameter] = field(default_factory=dict)


@dataclass
class DeployResult:
    deployment: Deployment = field(default_factory=Deployment)


@dataclass
class DeploymentPreviewChange:
    change_type: str
    resource_type: str
    name: str


@dataclass
class DeploymentPreviewProperties:
    changes: List[DeploymentPreviewChange] = field(default_factory=list)


@dataclass
class DeploymentPreview:
    status: str
    properties: DeploymentPreviewProperties = field(default_factory=DeploymentPreviewProperties)


@dataclass
class DeployPreviewResult:
    preview: DeploymentPreview


@dataclass
class DestroyResult:
    # Claves del ambiente que dejan de ser válidas tras el destroy
    invalidated_env_keys: List[str] = field(default_factory=list)


@dataclass
class StateOptions:
    hint: str = ""


@dataclass
class DestroyOptions:
    force: bool = False
    purge: bool = False
