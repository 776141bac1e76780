"""
Cuenta: suscripciones y ubicaciones disponibles para un ambiente.

Las ubicaciones salen de un catálogo YAML (provctl/catalog/locations.yaml
o PROVCTL_LOCATIONS_FILE).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import yaml


CATALOG_DIR = Path(__file__).resolve().parent.parent / "catalog"


@dataclass
class Location:
    """Ubicación (región) donde se despliegan recursos."""
    name: str
    display_name: str = ""
    regional_display_name: str = ""

    def label(self) -> str:
        return self.regional_display_name or self.display_name or self.name


LocationFilter = Callable[[Location], bool]


def locations_catalog_path() -> Path:
    """PROVCTL_LOCATIONS_FILE si está definido; si no, el catálogo empaquetado."""
    explicit = os.environ.get("PROVCTL_LOCATIONS_FILE", "").strip()
    if explicit:
        return Path(explicit).expanduser()
    return CATALOG_DIR / "locations.yaml"


def load_locations(path: Optional[Path] = None) -> List[Location]:
    """Carga el catálogo de ubicaciones; lista vacía si falta o no se puede leer."""
    path = path or locations_catalog_path()
    if not path.exists():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return []

    out: List[Location] = []
    for item in data.get("locations", []):
        if isinstance(item, str):
            out.append(Location(name=item))
        elif isinstance(item, dict) and item.get("name"):
            out.append(Location(
                name=str(item["name"]),
                display_name=str(item.get("display_name", "")),
                regional_display_name=str(item.get("regional_display_name", "")),
            ))
    return out
