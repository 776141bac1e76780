"""
Carga de provctl.yaml (PyYAML) validado contra ProjectConfig (pydantic).
"""

from pathlib import Path

import pydantic
import yaml

from provctl.core.errors import ConfigError, ValidationError
from provctl.core.project.models import ProjectConfig
from provctl.core.runtime.resolver import PROJECT_FILE


def load_project(root: Path) -> ProjectConfig:
    """Lee <root>/provctl.yaml y devuelve el ProjectConfig validado."""
    path = root / PROJECT_FILE
    if not path.exists():
        raise ConfigError(f"No se encontró {PROJECT_FILE} en {root}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Formato YAML inválido en {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} debe contener un mapeo en la raíz")

    data.setdefault("name", root.name)
    try:
        return ProjectConfig(**data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Configuración inválida en {path}:\n{e}") from e
