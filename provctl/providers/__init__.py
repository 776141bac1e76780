"""
Implementaciones de providers.

register_builtin_providers() se llama explícitamente desde el arranque (CLI);
importar este paquete no modifica ningún registro.
"""

from typing import Optional

from provctl.core.infra.registry import ProviderRegistry, default_registry
from provctl.providers.custom import CustomProvisionProvider, new_custom_provision_provider

BUILTIN_PROVIDERS = {
    "custom": new_custom_provision_provider,
}


def register_builtin_providers(registry: Optional[ProviderRegistry] = None) -> ProviderRegistry:
    """Registra los providers incluidos; los ya registrados se omiten."""
    registry = registry or default_registry()
    for kind, factory in BUILTIN_PROVIDERS.items():
        if not registry.is_registered(kind):
            registry.register(kind, factory)
    return registry


__all__ = ["CustomProvisionProvider", "register_builtin_providers"]
