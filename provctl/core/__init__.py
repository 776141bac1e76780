"""
Core: contratos, ambiente y orquestación de provisionamiento.

ENFORCEMENT (arquitectura limpia):
- Este paquete NO debe importar provctl.cli ni provctl.providers.* (implementaciones).
- Los providers y la CLI importan desde core; nunca al revés.
"""

from provctl.core.errors import (
    ProvctlError,
    ValidationError,
    ConfigError,
    ProviderError,
    EnvironmentNotReadyError,
    PromptError,
    UserDeclinedError,
)

__all__ = [
    "ProvctlError",
    "ValidationError",
    "ConfigError",
    "ProviderError",
    "EnvironmentNotReadyError",
    "PromptError",
    "UserDeclinedError",
]
