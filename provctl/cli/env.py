"""
Comando env: crear, listar, seleccionar y editar ambientes.
"""

import typer
from rich.panel import Panel
from rich.table import Table

from provctl.cli.context import console, get_state, handle_errors, open_environment, require_project_root
from provctl.core.environment import EnvironmentManager

app = typer.Typer(
    name="env",
    help="Gestión de ambientes (.provctl/<ambiente>/.env)",
    add_completion=False,
    no_args_is_help=True,
)


@app.command()
def new(
    name: str = typer.Argument(..., help="Nombre del ambiente (ej: dev)"),
    select: bool = typer.Option(True, "--select/--no-select", help="Dejarlo como ambiente por defecto"),
):
    """Crea un ambiente nuevo."""
    with handle_errors():
        manager = EnvironmentManager(require_project_root())
        env = manager.create(name)
        if select or manager.get_default() is None:
            manager.set_default(name)
    console.print(f"[green]✓ Ambiente creado:[/green] [bold]{env.name}[/bold]")
    console.print(f"  [dim]{env.path}[/dim]")


@app.command("list")
def list_envs():
    """Lista los ambientes del proyecto."""
    with handle_errors():
        manager = EnvironmentManager(require_project_root())
        names = manager.list()
        default = manager.get_default()
    if not names:
        console.print("[yellow]No hay ambientes.[/yellow]")
        console.print("  [dim]Crea uno con: provctl env new <nombre>[/dim]")
        return
    table = Table(title="Ambientes", show_header=True, header_style="bold cyan")
    table.add_column("Nombre", style="cyan")
    table.add_column("Default", style="green")
    for name in names:
        table.add_row(name, "✓" if name == default else "")
    console.print(table)


@app.command()
def select(name: str = typer.Argument(..., help="Ambiente a usar por defecto")):
    """Selecciona el ambiente por defecto."""
    with handle_errors():
        EnvironmentManager(require_project_root()).set_default(name)
    console.print(f"[green]✓ Ambiente por defecto:[/green] [bold]{name}[/bold]")


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Clave (ej: AZURE_LOCATION)"),
    value: str = typer.Argument(..., help="Valor"),
):
    """Asigna un valor en el ambiente actual."""
    with handle_errors():
        _, env = open_environment(get_state(ctx))
        env.setenv(key, value)
        env.save()
    console.print(f"[green]✓[/green] {key} actualizado en [bold]{env.name}[/bold]")


@app.command("get-values")
def get_values(ctx: typer.Context):
    """Muestra los valores del ambiente actual en formato .env."""
    with handle_errors():
        _, env = open_environment(get_state(ctx))
    console.print(Panel.fit(f"[bold cyan]Ambiente {env.name}[/bold cyan]", border_style="cyan"))
    for key, value in sorted(env.values().items()):
        console.print(f'{key}="{value}"', markup=False, highlight=False)
