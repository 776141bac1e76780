"""
Preparación del ambiente: suscripción y ubicación.

Un ambiente está listo para provisionar si tiene AZURE_SUBSCRIPTION_ID y
AZURE_LOCATION. Los valores faltantes se piden al usuario y se guardan.
"""

import logging

from provctl.core.account import LocationFilter
from provctl.core.environment import Environment, LOCATION_KEY, SUBSCRIPTION_ID_KEY
from provctl.core.errors import EnvironmentNotReadyError, PromptError
from provctl.core.input import Prompter


logger = logging.getLogger(__name__)


def ensure_subscription_and_location(
    env: Environment,
    prompter: Prompter,
    location_filter: LocationFilter,
) -> None:
    """Pide y guarda suscripción y ubicación si faltan; nunca repregunta valores existentes."""
    if not env.subscription_id():
        try:
            subscription_id = prompter.prompt_subscription(
                "Selecciona una suscripción para este ambiente"
            )
        except PromptError as e:
            raise EnvironmentNotReadyError(
                f"El ambiente '{env.name}' no tiene {SUBSCRIPTION_ID_KEY}: {e}"
            ) from e
        env.setenv(SUBSCRIPTION_ID_KEY, subscription_id)
        env.save()
        logger.debug("Suscripción %s asignada al ambiente '%s'", subscription_id, env.name)

    if not env.location():
        try:
            location = prompter.prompt_location(
                env.subscription_id(),
                "Selecciona una ubicación para este ambiente",
                location_filter,
            )
        except PromptError as e:
            raise EnvironmentNotReadyError(
                f"El ambiente '{env.name}' no tiene {LOCATION_KEY}: {e}"
            ) from e
        env.setenv(LOCATION_KEY, location)
        env.save()
        logger.debug("Ubicación %s asignada al ambiente '%s'", location, env.name)
