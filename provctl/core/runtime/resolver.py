"""
Resolución de rutas del proyecto y de sus ambientes.

- project_root(): directorio que contiene provctl.yaml.
- environments_root(): directorio .provctl/ dentro del proyecto (un .env por ambiente).

El resolver no escribe en disco; solo expone estas rutas.
"""

import os
from pathlib import Path
from typing import Optional


PROJECT_FILE = "provctl.yaml"
STATE_DIR = ".provctl"


def project_root(start: Optional[Path] = None) -> Optional[Path]:
    """
    Directorio raíz del proyecto.
    Resolución: PROVCTL_PROJECT_ROOT → primer directorio (cwd y padres) con provctl.yaml; si no, None.
    """
    explicit = os.environ.get("PROVCTL_PROJECT_ROOT", "").strip()
    if explicit:
        return Path(explicit).expanduser().resolve()

    cwd = (start or Path.cwd()).resolve()
    for d in [cwd, *cwd.parents]:
        if (d / PROJECT_FILE).exists():
            return d
    return None


def environments_root(root: Path) -> Path:
    """Directorio donde viven los ambientes del proyecto (.provctl/)."""
    return root / STATE_DIR
