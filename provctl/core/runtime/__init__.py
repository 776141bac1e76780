"""
Runtime: resolución de rutas del proyecto y de sus ambientes.

El estado de cada ambiente vive en <proyecto>/.provctl/<ambiente>/.env.
"""

from provctl.core.runtime.resolver import project_root, environments_root

__all__ = ["project_root", "environments_root"]
