"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import CompanyRecord, TaxId


def print_banner(console: Console, language: Language) -> None:
    """Imprime el banner del demo con el subtítulo en el idioma elegido."""

    title = Text("RUTCHECK", style="bold cyan")
    subtitle = Text(language.text("generating"), style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_companies_table(companies: Iterable[CompanyRecord], language: Language) -> Table:
    table = Table(title=language.text("companies_title"))
    table.add_column("#", style="dim", justify="right")
    table.add_column(language.text("name"), style="white")
    table.add_column(language.text("rut"), style="cyan", no_wrap=True)
    table.add_column(language.text("status"))
    for index, company in enumerate(companies, start=1):
        status = (
            Text(language.text("active"), style="green")
            if company.active
            else Text(language.text("inactive"), style="red")
        )
        table.add_row(str(index), company.name, company.rut, status)
    return table


def build_values_table(title: str, header: str, values: Iterable[str]) -> Table:
    """Tabla numerada de una sola columna (patentes, RUTs)."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column(header, style="cyan", no_wrap=True)
    for index, value in enumerate(values, start=1):
        table.add_row(str(index), value)
    return table


def build_rut_validation_table() -> Table:
    table = Table(title="RUT validation")
    table.add_column("Input", style="white", no_wrap=True)
    table.add_column("Format", style="cyan")
    table.add_column("Check digit", style="cyan")
    table.add_column("Valid")
    return table


def build_plate_validation_table() -> Table:
    table = Table(title="License plate validation")
    table.add_column("Input", style="white", no_wrap=True)
    table.add_column("Checked as", style="dim", no_wrap=True)
    table.add_column("Format", style="cyan")
    table.add_column("Valid")
    return table


def yes_no(value: bool) -> Text:
    return Text("yes", style="green") if value else Text("no", style="red")


def build_check_digit_panel(tax_id: TaxId) -> Panel:
    body = Text()
    body.append("Check digit: ", style="bold")
    body.append(tax_id.check_symbol + "\n", style="bold green")
    body.append(f"Compact: {tax_id.formatted()}\n")
    body.append(f"Grouped: {tax_id.formatted(dots=True)}")
    return Panel(body, title=Text(str(tax_id.number), style="bold yellow"), border_style="yellow")
