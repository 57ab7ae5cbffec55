"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El contrato de texto de stdout vive en un solo lugar.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import ReportResult


def render_result(result: ReportResult, *, out: Console, err: Console) -> None:
    """Imprime un `ReportResult`: líneas a `out` o una línea de error a `err`.

    Sin markup, emoji ni highlighting: el texto de la API se imprime literal.
    """

    error = result.error
    if error is None:
        for line in result.lines:
            out.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
        return

    message = Text()
    message.append(f"Error fetching {result.label}:", style="bold red")
    message.append(f" {error.describe()}")
    err.print(message, emoji=False, highlight=False, soft_wrap=True)


def build_config_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva (para `doctor`)."""

    table = Table(title="CatFacts Lab Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Facts limit", "OK", str(settings.facts_limit))
    table.add_row("Mode", "OK", "sequential" if settings.sequential else "concurrent")
    table.add_row("Logging", "OK", f"{settings.log_level} ({settings.log_format})")
    return table
