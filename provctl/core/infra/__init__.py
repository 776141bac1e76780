"""
Contratos, registro y orquestación de providers de provisionamiento.

Los providers (custom, ...) implementan estos contratos;
el core no depende de ningún provider concreto.
"""

from provctl.core.infra.contracts import ProviderContract, ProviderFactory
from provctl.core.infra.manager import Manager
from provctl.core.infra.registry import ProviderRegistry, new_provider, register_provider

__all__ = [
    "ProviderContract",
    "ProviderFactory",
    "Manager",
    "ProviderRegistry",
    "new_provider",
    "register_provider",
]
