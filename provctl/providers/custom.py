"""
Provider "custom": no provisiona nada.

Cumple el contrato de provider con cuerpos inertes para que el trabajo real
lo hagan los hooks del proyecto (preprovision, postprovision, predown, ...),
que el orquestador ejecuta alrededor de estas llamadas.
"""

from typing import Optional

from provctl.core.environment import Environment
from provctl.core.errors import UserDeclinedError
from provctl.core.infra.base import BaseProvider
from provctl.core.infra.contracts import ProviderContract
from provctl.core.infra.ensure import ensure_subscription_and_location
from provctl.core.infra.models import (
    DeployPreviewResult,
    DeployResult,
    Deployment,
    DeploymentPreview,
    DeploymentPreviewProperties,
    DestroyOptions,
    DestroyResult,
    State,
    StateOptions,
    StateResult,
)
from provctl.core.input import Console, Prompter


DESTROY_CONFIRM_MESSAGE = "Are you sure you want to destroy?"
PREVIEW_STATUS_COMPLETED = "Completed"


class CustomProvisionProvider(BaseProvider):

    display_name = "Custom"

    def ensure_env(self) -> None:
        """
        Un ambiente está listo si tiene AZURE_SUBSCRIPTION_ID y AZURE_LOCATION;
        se piden al usuario si faltan. Se acepta cualquier ubicación.
        """
        ensure_subscription_and_location(self.env, self.prompter, lambda _location: True)

    def state(self, options: Optional[StateOptions] = None) -> StateResult:
        return StateResult(state=State(outputs={}, resources=[]))

    def get_deployment(self) -> DeployResult:
        return DeployResult(deployment=Deployment(parameters={}, outputs={}))

    def deploy(self) -> DeployResult:
        # El provisionamiento real lo hacen los hooks
        return DeployResult(deployment=Deployment(parameters={}, outputs={}))

    def preview(self) -> DeployPreviewResult:
        return DeployPreviewResult(
            preview=DeploymentPreview(
                status=PREVIEW_STATUS_COMPLETED,
                properties=DeploymentPreviewProperties(),
            )
        )

    def destroy(self, options: DestroyOptions) -> DestroyResult:
        confirmed = self.console.confirm(DESTROY_CONFIRM_MESSAGE)
        if not confirmed:
            raise UserDeclinedError("user denied confirmation")
        return DestroyResult(invalidated_env_keys=[])


def new_custom_provision_provider(env: Environment, console: Console, prompter: Prompter) -> ProviderContract:
    return CustomProvisionProvider(env, console, prompter)
