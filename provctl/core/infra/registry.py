"""
Registro de providers: tipo (ej: "custom") → factory.

Importar un módulo no registra nada; el arranque llama explícitamente a
provctl.providers.register_builtin_providers().
"""

from typing import Dict, List

from provctl.core.environment import Environment
from provctl.core.errors import ProviderError
from provctl.core.infra.contracts import ProviderContract, ProviderFactory
from provctl.core.input import Console, Prompter


class ProviderRegistry:
    """Mapa tipo de provider → factory(env, console, prompter)."""

    def __init__(self):
        self._factories: Dict[str, ProviderFactory] = {}

    @staticmethod
    def _key(kind: str) -> str:
        return (kind or "").strip().lower()

    def register(self, kind: str, factory: ProviderFactory) -> None:
        key = self._key(kind)
        if not key:
            raise ProviderError("El tipo de provider no puede estar vacío")
        if key in self._factories:
            raise ProviderError(f"El provider '{key}' ya está registrado")
        self._factories[key] = factory

    def is_registered(self, kind: str) -> bool:
        return self._key(kind) in self._factories

    def create(
        self,
        kind: str,
        env: Environment,
        console: Console,
        prompter: Prompter,
    ) -> ProviderContract:
        key = self._key(kind)
        factory = self._factories.get(key)
        if factory is None:
            available = ", ".join(self.kinds()) or "ninguno"
            raise ProviderError(f"Provider '{key}' no registrado (disponibles: {available})")
        return factory(env, console, prompter)

    def kinds(self) -> List[str]:
        return sorted(self._factories)


# Registro global del proceso
_default_registry = ProviderRegistry()


def default_registry() -> ProviderRegistry:
    return _default_registry


def register_provider(kind: str, factory: ProviderFactory) -> None:
    _default_registry.register(kind, factory)


def new_provider(kind: str, env: Environment, console: Console, prompter: Prompter) -> ProviderContract:
    return _default_registry.create(kind, env, console, prompter)


def provider_kinds() -> List[str]:
    return _default_registry.kinds()
