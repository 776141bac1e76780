"""
Errores de provctl.

El core solo define excepciones; la CLI se encarga del formato de salida.
"""


class ProvctlError(Exception):
    """Error base de provctl."""
    pass


class ValidationError(ProvctlError):
    """Error de validación de configuración o modelos."""
    pass


class ConfigError(ProvctlError):
    """Error de configuración (archivo faltante, formato inválido)."""
    pass


class ProviderError(ProvctlError):
    """Error delegado desde un provider o desde el registro de providers."""
    pass


class ToolNotInstalledError(ProviderError):
    """Faltan herramientas externas requeridas por el provider."""

    def __init__(self, missing):
        self.missing = list(missing)
        names = ", ".join(
            f"{t.name} (instalar desde: {t.install_url})" if getattr(t, "install_url", "") else t.name
            for t in self.missing
        )
        super().__init__(f"Herramientas requeridas no instaladas: {names}")


class EnvironmentNotReadyError(ProvctlError):
    """El ambiente no tiene los valores requeridos (suscripción, ubicación)."""
    pass


class PromptError(ProvctlError):
    """Falló el mecanismo de prompt (entrada cerrada, cancelación, --no-prompt)."""
    pass


class UserDeclinedError(ProvctlError):
    """El usuario respondió "no" a una confirmación."""
    pass


class HookError(ProvctlError):
    """Un hook de ciclo de vida terminó con error."""

    def __init__(self, name: str, exit_code: int, message: str = ""):
        self.name = name
        self.exit_code = exit_code
        detail = f": {message}" if message else ""
        super().__init__(f"El hook '{name}' terminó con código {exit_code}{detail}")
