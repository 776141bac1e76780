"""
Ambientes: almacén clave/valor de configuración de un despliegue.

Cada ambiente persiste en <proyecto>/.provctl/<nombre>/.env (python-dotenv).
Un ambiente sin root vive solo en memoria (útil en tests y en ejecuciones efímeras).
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from dotenv import dotenv_values, set_key, unset_key

from provctl.core.errors import ConfigError, ValidationError
from provctl.core.runtime.resolver import environments_root


logger = logging.getLogger(__name__)

ENV_NAME_KEY = "AZURE_ENV_NAME"
SUBSCRIPTION_ID_KEY = "AZURE_SUBSCRIPTION_ID"
LOCATION_KEY = "AZURE_LOCATION"

DOTENV_FILE = ".env"
CONFIG_FILE = "config.yaml"

_ENV_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")


def validate_environment_name(name: str) -> None:
    """Valida que el nombre sea seguro para paths (letras, dígitos, '-', '_', '.')."""
    if not name or not _ENV_NAME_RE.match(name):
        raise ValidationError(
            f"Nombre de ambiente inválido: '{name}' "
            "(solo letras, dígitos, '-', '_' y '.', máximo 64 caracteres)"
        )


class Environment:
    """Valores de configuración de un ambiente (suscripción, ubicación, outputs...)."""

    def __init__(self, name: str, values: Optional[Dict[str, str]] = None, root: Optional[Path] = None):
        self.name = name
        self.root = root
        self._values: Dict[str, str] = dict(values or {})
        if root is not None:
            self.reload()
        if name and not self._values.get(ENV_NAME_KEY):
            self._values[ENV_NAME_KEY] = name

    @property
    def path(self) -> Optional[Path]:
        return self.root / DOTENV_FILE if self.root is not None else None

    def getenv(self, key: str) -> str:
        """Valor de la clave; cadena vacía si no existe."""
        return self._values.get(key, "")

    def setenv(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def values(self) -> Dict[str, str]:
        return dict(self._values)

    def subscription_id(self) -> str:
        return self.getenv(SUBSCRIPTION_ID_KEY)

    def location(self) -> str:
        return self.getenv(LOCATION_KEY)

    def reload(self) -> None:
        """Relee el .env desde disco (p. ej. después de que un hook lo modificó)."""
        path = self.path
        if path is None or not path.exists():
            return
        loaded = dotenv_values(path, interpolate=False)
        self._values = {k: v for k, v in loaded.items() if v is not None}

    def save(self) -> None:
        """Escribe los valores al .env del ambiente. Sin root no hace nada."""
        path = self.path
        if path is None:
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)

        on_disk = dotenv_values(path, interpolate=False)
        for key in on_disk:
            if key not in self._values:
                unset_key(path, key)
        for key, value in self._values.items():
            set_key(path, key, value, quote_mode="always")
        logger.debug("Ambiente '%s' guardado en %s", self.name, path)


class EnvironmentManager:
    """Crea, lista y selecciona ambientes dentro de un proyecto."""

    def __init__(self, project_root: Path):
        self.project_root = project_root
        self.base = environments_root(project_root)

    def _env_dir(self, name: str) -> Path:
        return self.base / name

    def _config_path(self) -> Path:
        return self.base / CONFIG_FILE

    def list(self) -> List[str]:
        if not self.base.exists():
            return []
        return sorted(
            p.name for p in self.base.iterdir()
            if p.is_dir() and (p / DOTENV_FILE).exists()
        )

    def exists(self, name: str) -> bool:
        return (self._env_dir(name) / DOTENV_FILE).exists()

    def create(self, name: str) -> Environment:
        validate_environment_name(name)
        if self.exists(name):
            raise ConfigError(f"El ambiente '{name}' ya existe")
        env = Environment(name, root=self._env_dir(name))
        env.save()
        logger.info("Ambiente '%s' creado", name)
        return env

    def get(self, name: str) -> Environment:
        validate_environment_name(name)
        if not self.exists(name):
            raise ConfigError(
                f"El ambiente '{name}' no existe. Créalo con: provctl env new {name}"
            )
        return Environment(name, root=self._env_dir(name))

    def _load_config(self) -> dict:
        path = self._config_path()
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Formato inválido en {path}: {e}") from e

    def get_default(self) -> Optional[str]:
        name = self._load_config().get("default_environment")
        return str(name) if name else None

    def set_default(self, name: str) -> None:
        if not self.exists(name):
            raise ConfigError(f"El ambiente '{name}' no existe")
        config = self._load_config()
        config["default_environment"] = name
        path = self._config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
