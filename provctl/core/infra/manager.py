"""
Manager: orquesta un provider sobre un ambiente.

Crea el provider desde el registro, verifica herramientas, y sincroniza el
ambiente con los resultados (outputs tras deploy, claves invalidadas tras destroy).
"""

import logging
from pathlib import Path
from typing import Optional

from provctl.core.environment import Environment
from provctl.core.errors import ProviderError
from provctl.core.infra.contracts import ProviderContract
from provctl.core.infra.models import (
    DeployPreviewResult,
    DeployResult,
    DestroyOptions,
    DestroyResult,
    StateOptions,
    StateResult,
)
from provctl.core.infra.registry import ProviderRegistry, default_registry
from provctl.core.input import Console, Prompter
from provctl.core.project.models import ProvisioningOptions
from provctl.core.tools import ensure_installed


logger = logging.getLogger(__name__)


class Manager:

    def __init__(
        self,
        env: Environment,
        console: Console,
        prompter: Prompter,
        registry: Optional[ProviderRegistry] = None,
    ):
        self.env = env
        self.console = console
        self.prompter = prompter
        self.registry = registry or default_registry()
        self._provider: Optional[ProviderContract] = None

    @property
    def provider(self) -> ProviderContract:
        if self._provider is None:
            raise ProviderError("El manager no fue inicializado (llama a initialize primero)")
        return self._provider

    def initialize(self, project_path: Path, options: ProvisioningOptions) -> None:
        provider = self.registry.create(options.provider, self.env, self.console, self.prompter)
        ensure_installed(provider.required_external_tools())
        logger.debug("Inicializando provider %s en %s", provider.name(), project_path)
        provider.initialize(project_path, options)
        self._provider = provider

    def deploy(self) -> DeployResult:
        result = self.provider.deploy()
        outputs = result.deployment.outputs
        for name, output in outputs.items():
            self.env.setenv(name.upper(), "" if output.value is None else str(output.value))
        self.env.save()
        logger.info("Deploy con %s: %d outputs", self.provider.name(), len(outputs))
        return result

    def preview(self) -> DeployPreviewResult:
        return self.provider.preview()

    def state(self, options: Optional[StateOptions] = None) -> StateResult:
        return self.provider.state(options or StateOptions())

    def get_deployment(self) -> DeployResult:
        return self.provider.get_deployment()

    def destroy(self, options: DestroyOptions) -> DestroyResult:
        result = self.provider.destroy(options)
        for key in result.invalidated_env_keys:
            self.env.unset(key)
        self.env.save()
        logger.info(
            "Destroy con %s: %d claves invalidadas",
            self.provider.name(),
            len(result.invalidated_env_keys),
        )
        return result
