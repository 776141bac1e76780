"""
Project: modelos y carga del archivo de proyecto (provctl.yaml).
"""

from provctl.core.project.models import HookConfig, HookShell, ProjectConfig, ProvisioningOptions
from provctl.core.project.loader import load_project

__all__ = [
    "HookConfig",
    "HookShell",
    "ProjectConfig",
    "ProvisioningOptions",
    "load_project",
]
