"""
Estado compartido de la CLI: opciones globales y resolución de proyecto/ambiente.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from provctl.core.environment import ENV_NAME_KEY, Environment, EnvironmentManager
from provctl.core.errors import ConfigError, ProvctlError
from provctl.core.input import RichConsole, RichPrompter
from provctl.core.project import ProjectConfig, load_project
from provctl.core.runtime.resolver import project_root


console = Console()


@dataclass
class CliState:
    environment: Optional[str] = None
    no_prompt: bool = False


def get_state(ctx: typer.Context) -> CliState:
    obj = ctx.find_root().obj
    return obj if isinstance(obj, CliState) else CliState()


@contextmanager
def handle_errors() -> Iterator[None]:
    """Convierte ProvctlError en mensaje rojo y código de salida 1."""
    try:
        yield
    except ProvctlError as e:
        console.print(f"[red]✘ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def require_project_root() -> Path:
    root = project_root()
    if root is None:
        raise ConfigError(
            "No se encontró provctl.yaml en el directorio actual ni en sus padres "
            "(o define PROVCTL_PROJECT_ROOT)"
        )
    return root


def resolve_environment_name(state: CliState, manager: EnvironmentManager) -> str:
    """-e/--environment → AZURE_ENV_NAME → ambiente por defecto del proyecto."""
    name = state.environment or os.environ.get(ENV_NAME_KEY, "").strip() or manager.get_default()
    if not name:
        raise ConfigError("No hay ambiente seleccionado. Crea uno con: provctl env new <nombre>")
    return name


def open_environment(state: CliState) -> Tuple[Path, Environment]:
    root = require_project_root()
    manager = EnvironmentManager(root)
    env = manager.get(resolve_environment_name(state, manager))
    return root, env


def load_project_and_environment(state: CliState) -> Tuple[Path, ProjectConfig, Environment]:
    root, env = open_environment(state)
    return root, load_project(root), env


def build_io(state: CliState) -> Tuple[RichConsole, RichPrompter]:
    return (
        RichConsole(terminal=console, no_prompt=state.no_prompt),
        RichPrompter(terminal=console, no_prompt=state.no_prompt),
    )
