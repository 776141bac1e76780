"""
Modelos del archivo de proyecto (provctl.yaml), agnósticos de CLI y filesystem.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HookShell(str, Enum):
    SH = "sh"
    PWSH = "pwsh"


class HookConfig(BaseModel):
    run: str = Field(..., description="Comando o script a ejecutar")
    shell: HookShell = HookShell.SH
    continue_on_error: bool = False
    interactive: bool = False

    model_config = ConfigDict(use_enum_values=True)


class ProvisioningOptions(BaseModel):
    """Cómo debe ejecutarse el provisionamiento; los providers nunca lo modifican."""
    provider: str = Field("custom", description="Tipo de provider registrado")
    path: str = Field("infra", description="Directorio de infraestructura relativo al proyecto")
    module: str = Field("main", description="Módulo de entrada dentro de path")

    model_config = ConfigDict(frozen=True)

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, v: str) -> str:
        v = (v or "").strip().lower()
        return v or "custom"


class ProjectConfig(BaseModel):
    name: str = Field(..., description="Nombre del proyecto")
    infra: ProvisioningOptions = Field(default_factory=ProvisioningOptions)
    hooks: Dict[str, HookConfig] = Field(default_factory=dict)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("el nombre del proyecto no puede estar vacío")
        return v.strip()
