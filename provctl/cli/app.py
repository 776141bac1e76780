"""
Aplicación CLI de provctl.

Solo compone comandos; la lógica vive en core y providers.
"""

from typing import Optional

import typer
from dotenv import load_dotenv
from rich.panel import Panel
from rich.table import Table

from provctl import __version__
from provctl.cli import env as env_cli
from provctl.cli.context import (
    CliState,
    build_io,
    console,
    get_state,
    handle_errors,
    load_project_and_environment,
)
from provctl.core.hooks import HooksRunner
from provctl.core.infra.manager import Manager
from provctl.core.infra.models import DestroyOptions
from provctl.core.infra.registry import provider_kinds
from provctl.core.logging_config import configure_logging
from provctl.core.runtime.resolver import project_root
from provctl.providers import register_builtin_providers

app = typer.Typer(
    name="provctl",
    help="provctl - Provisionamiento de ambientes con providers y hooks",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(env_cli.app, name="env", help="Gestión de ambientes")


def _load_project_dotenv() -> None:
    root = project_root()
    if root is not None and (root / ".env").exists():
        load_dotenv(root / ".env")


@app.callback()
def main_callback(
    ctx: typer.Context,
    environment: Optional[str] = typer.Option(None, "--environment", "-e", help="Ambiente a usar"),
    no_prompt: bool = typer.Option(False, "--no-prompt", help="No pedir datos; usar valores por defecto"),
    debug: bool = typer.Option(False, "--debug", help="Logs en nivel DEBUG"),
):
    configure_logging(level="DEBUG" if debug else None)
    _load_project_dotenv()
    register_builtin_providers()
    ctx.obj = CliState(environment=environment, no_prompt=no_prompt)


def _init_manager(state: CliState):
    root, project, env = load_project_and_environment(state)
    io_console, prompter = build_io(state)
    manager = Manager(env, io_console, prompter)
    manager.initialize(root / project.infra.path, project.infra)
    hooks = HooksRunner(root, project.hooks, env)
    return manager, hooks


@app.command()
def provision(
    ctx: typer.Context,
    preview: bool = typer.Option(False, "--preview", help="Solo mostrar qué cambiaría"),
):
    """Provisiona la infraestructura del ambiente (con hooks pre/post)."""
    state = get_state(ctx)
    with handle_errors():
        manager, hooks = _init_manager(state)
        console.print(Panel.fit(
            f"[bold cyan]Provision - {manager.env.name}[/bold cyan]\n"
            f"[dim]Provider: {manager.provider.name()}[/dim]",
            border_style="cyan",
        ))
        if preview:
            result = manager.preview()
            _print_preview(result)
            return
        hooks.run("pre", "provision")
        result = manager.deploy()
        hooks.run("post", "provision")
    console.print(
        f"\n[bold green]✅ Provisionamiento completado[/bold green] "
        f"[dim]({len(result.deployment.outputs)} outputs)[/dim]"
    )


def _print_preview(result) -> None:
    preview = result.preview
    console.print(f"[bold]Estado del preview:[/bold] {preview.status}")
    changes = preview.properties.changes
    if not changes:
        console.print("[dim]Sin cambios detectados por el provider[/dim]")
        return
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Cambio", style="yellow")
    table.add_column("Tipo", style="cyan")
    table.add_column("Nombre", style="green")
    for change in changes:
        table.add_row(change.change_type, change.resource_type, change.name)
    console.print(table)


@app.command()
def show(ctx: typer.Context):
    """Muestra el estado (outputs y recursos) del ambiente."""
    state = get_state(ctx)
    with handle_errors():
        manager, _ = _init_manager(state)
        result = manager.state()
    current = result.state
    if not current.outputs and not current.resources:
        console.print(f"[yellow]El ambiente {manager.env.name} no tiene outputs ni recursos registrados.[/yellow]")
        return
    if current.outputs:
        table = Table(title="Outputs", show_header=True, header_style="bold cyan")
        table.add_column("Nombre", style="cyan")
        table.add_column("Tipo", style="yellow")
        table.add_column("Valor", style="green")
        for name, output in current.outputs.items():
            table.add_row(name, output.type, str(output.value))
        console.print(table)
    if current.resources:
        table = Table(title="Recursos", show_header=True, header_style="bold cyan")
        table.add_column("ID", style="cyan")
        for resource in current.resources:
            table.add_row(resource.id)
        console.print(table)


@app.command()
def down(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="No pedir confirmación al provider (si lo soporta)"),
    purge: bool = typer.Option(False, "--purge", help="Purgar recursos con soft-delete (si el provider lo soporta)"),
):
    """Elimina la infraestructura del ambiente (con hooks pre/post)."""
    state = get_state(ctx)
    with handle_errors():
        manager, hooks = _init_manager(state)
        hooks.run("pre", "down")
        result = manager.destroy(DestroyOptions(force=force, purge=purge))
        hooks.run("post", "down")
    console.print("\n[bold green]✅ Infraestructura eliminada[/bold green]")
    if result.invalidated_env_keys:
        console.print(f"[dim]Claves eliminadas del ambiente: {', '.join(result.invalidated_env_keys)}[/dim]")


@app.command()
def providers():
    """Lista los providers registrados."""
    table = Table(title="Providers", show_header=True, header_style="bold cyan")
    table.add_column("Tipo", style="cyan")
    for kind in provider_kinds():
        table.add_row(kind)
    console.print(table)


@app.command()
def version():
    """Muestra la versión de provctl."""
    console.print(Panel.fit(
        "[bold cyan]provctl[/bold cyan]\n"
        "[dim]Provisionamiento de ambientes con providers y hooks[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan",
    ))


def main():
    app()
