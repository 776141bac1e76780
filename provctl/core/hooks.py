"""
Hooks de ciclo de vida: comandos del proyecto que se ejecutan alrededor
de provision/down (preprovision, postprovision, predown, postdown).

Con el provider custom, los hooks son los que hacen el trabajo real.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional

from provctl.core.environment import Environment
from provctl.core.errors import HookError
from provctl.core.project.models import HookConfig, HookShell


logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


def hook_command(hook: HookConfig) -> List[str]:
    """Comando a ejecutar según el shell del hook."""
    if hook.shell == HookShell.PWSH.value:
        return ["pwsh", "-NoProfile", "-Command", hook.run]
    return ["sh", "-c", hook.run]


class HooksRunner:

    def __init__(
        self,
        project_root: Path,
        hooks: Dict[str, HookConfig],
        env: Environment,
        runner: Optional[Runner] = None,
    ):
        self.project_root = project_root
        self.hooks = hooks
        self.env = env
        self.runner = runner or subprocess.run

    def _process_env(self) -> Dict[str, str]:
        merged = dict(os.environ)
        merged.update(self.env.values())
        return merged

    def run(self, prefix: str, command: str) -> bool:
        """
        Ejecuta el hook f"{prefix}{command}" si está configurado.
        Devuelve True si se ejecutó; lanza HookError si falla y no tiene continue_on_error.
        """
        name = f"{prefix}{command}"
        hook = self.hooks.get(name)
        if hook is None:
            return False

        logger.info("Ejecutando hook '%s'", name)
        result = self.runner(
            hook_command(hook),
            cwd=str(self.project_root),
            env=self._process_env(),
            capture_output=not hook.interactive,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip() if not hook.interactive else ""
            if hook.continue_on_error:
                logger.warning("El hook '%s' falló (código %s); se continúa", name, result.returncode)
            else:
                raise HookError(name, result.returncode, stderr)
        elif result.stdout:
            logger.debug("Salida de '%s':\n%s", name, result.stdout.rstrip())

        # El hook pudo haber escrito valores nuevos en el .env
        self.env.reload()
        return True
