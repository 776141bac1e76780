"""
Entrada interactiva: confirmaciones y prompts de suscripción/ubicación.

El core depende solo de los protocolos Console y Prompter; RichConsole y
RichPrompter son las implementaciones de terminal (rich.prompt).
Una interrupción del usuario (Ctrl+C / EOF) se traduce a PromptError.
"""

from typing import List, Optional, Protocol, Tuple

from rich.console import Console as RichTerminal
from rich.prompt import Confirm, Prompt

from provctl.core.account import Location, LocationFilter, load_locations
from provctl.core.errors import PromptError


class Console(Protocol):
    """Protocolo: confirmaciones sí/no."""
    def confirm(self, message: str, default: bool = False) -> bool:
        ...


class Prompter(Protocol):
    """Protocolo: pide suscripción y ubicación cuando faltan en el ambiente."""
    def prompt_subscription(self, message: str) -> str:
        ...

    def prompt_location(self, subscription_id: str, message: str, location_filter: LocationFilter) -> str:
        ...


class RichConsole:
    """Console sobre rich. Con no_prompt=True responde siempre el valor por defecto."""

    def __init__(self, terminal: Optional[RichTerminal] = None, no_prompt: bool = False):
        self.terminal = terminal or RichTerminal()
        self.no_prompt = no_prompt

    def confirm(self, message: str, default: bool = False) -> bool:
        if self.no_prompt:
            return default
        try:
            return Confirm.ask(message, default=default, console=self.terminal)
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptError("Confirmación cancelada por el usuario") from e


def _format_menu(options: List[Tuple[str, str]], indent: str = "  ") -> str:
    """Genera texto del menú numerado."""
    lines = []
    for i, (value, desc) in enumerate(options, 1):
        lines.append(f"{indent}{i}) {value:<16} - {desc}")
    return "\n".join(lines)


def _parse_number(raw: str, max_val: int, default: int = 1) -> int:
    """Parsea número de la entrada; retorna índice 1-based, default si vacío, -1 si inválido."""
    s = (raw or "").strip()
    if not s:
        return default
    try:
        n = int(s)
        if 1 <= n <= max_val:
            return n
    except ValueError:
        pass
    return -1


class RichPrompter:
    """
    Prompter sobre rich.
    - Suscripción: texto libre, no vacío.
    - Ubicación: menú numerado con las ubicaciones del catálogo que pasan el filtro.
    """

    def __init__(
        self,
        terminal: Optional[RichTerminal] = None,
        no_prompt: bool = False,
        locations: Optional[List[Location]] = None,
    ):
        self.terminal = terminal or RichTerminal()
        self.no_prompt = no_prompt
        self._locations = locations

    def _ensure_interactive(self, what: str) -> None:
        if self.no_prompt:
            raise PromptError(f"Se requiere {what} y --no-prompt está activo")

    def prompt_subscription(self, message: str) -> str:
        self._ensure_interactive("una suscripción")
        try:
            while True:
                value = Prompt.ask(message, console=self.terminal).strip()
                if value:
                    return value
                self.terminal.print("[red]La suscripción no puede estar vacía.[/red]")
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptError("Selección de suscripción cancelada") from e

    def prompt_location(self, subscription_id: str, message: str, location_filter: LocationFilter) -> str:
        self._ensure_interactive("una ubicación")
        locations = self._locations if self._locations is not None else load_locations()
        options = [(loc.name, loc.label()) for loc in locations if location_filter(loc)]
        if not options:
            raise PromptError(f"No hay ubicaciones disponibles para la suscripción {subscription_id}")

        self.terminal.print(f"\n[bold cyan]{message}[/bold cyan]")
        self.terminal.print(_format_menu(options))
        max_val = len(options)
        try:
            while True:
                raw = Prompt.ask("> ", default="1", console=self.terminal)
                idx = _parse_number(raw, max_val)
                if idx >= 1:
                    return options[idx - 1][0]
                self.terminal.print(f"[red]Opción inválida. Elige un número entre 1 y {max_val}.[/red]")
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptError("Selección de ubicación cancelada") from e
