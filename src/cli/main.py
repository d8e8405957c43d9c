"""CLI principal (Typer).

Por qué Typer + Rich:
- Typer da parsing tipado de argumentos con muy poco código.
- Rich se encarga de tablas/paneles; la lógica vive en `core`.

Códigos de salida:
- 0: todo válido.
- 1: al menos un valor de entrada es inválido (`validate-rut`, `validate-plate`).
- 2: error de uso (Typer/Click).
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_batch_json
from adapters.random_source import PythonRandomSource
from cli import doctor
from cli.ui_components import (
    build_check_digit_panel,
    build_companies_table,
    build_plate_validation_table,
    build_rut_validation_table,
    build_values_table,
    print_banner,
    yes_no,
)
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import RUT_MAX_BODY, RUT_MIN_BODY, TaxId
from core.logging_setup import configure_logging
from core.plates import classify_plate, normalize_plate
from core.rut import is_valid_rut, validate_rut_format
from core.services.test_data import (
    generate_chilean_plate,
    generate_company_rut,
    generate_construction_company,
    generate_new_format_plate,
    generate_old_format_plate,
    generate_personal_rut,
    generate_test_data,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Chilean RUT and license-plate validation, plus test-data generation.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


class GenerateKind(str, Enum):
    COMPANY_RUT = "company-rut"
    PERSONAL_RUT = "personal-rut"
    OLD_PLATE = "old-plate"
    NEW_PLATE = "new-plate"
    PLATE = "plate"
    COMPANY = "company"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    """Configure logging before any command runs."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _source(seed: int | None, settings: AppSettings) -> PythonRandomSource:
    if seed is None:
        return PythonRandomSource.from_settings(settings)
    return PythonRandomSource(seed)


@app.command("check-digit")
def check_digit(
    number: int = typer.Argument(..., help="RUT body, 7 or 8 digits, no separators."),
) -> None:
    """Compute the check digit of a RUT body."""

    if not RUT_MIN_BODY <= number <= RUT_MAX_BODY:
        raise typer.BadParameter("the RUT body must have 7 or 8 digits", param_hint="NUMBER")
    _console.print(build_check_digit_panel(TaxId.from_number(number)))


@app.command("validate-rut")
def validate_rut(
    values: List[str] = typer.Argument(..., help="RUTs like 12.345.678-5 or 12345678-5."),
) -> None:
    """Check format and check digit of one or more RUTs."""

    table = build_rut_validation_table()
    all_valid = True
    for value in values:
        format_ok = validate_rut_format(value)
        valid = is_valid_rut(value)
        all_valid = all_valid and valid
        table.add_row(value, yes_no(format_ok), yes_no(valid) if format_ok else "-", yes_no(valid))
    _console.print(table)
    if not all_valid:
        raise typer.Exit(code=1)


@app.command("validate-plate")
def validate_plate(
    values: List[str] = typer.Argument(..., help="Plates like ABC123 or ABCD12."),
    normalize: bool = typer.Option(
        False,
        "--normalize",
        "-n",
        help="Uppercase and strip separators before validating.",
    ),
) -> None:
    """Check one or more plates against the old and new formats."""

    table = build_plate_validation_table()
    all_valid = True
    for value in values:
        candidate = normalize_plate(value) if normalize else value
        fmt = classify_plate(candidate)
        all_valid = all_valid and fmt is not None
        table.add_row(value, candidate, fmt.value if fmt else "-", yes_no(fmt is not None))
    _console.print(table)
    if not all_valid:
        raise typer.Exit(code=1)


@app.command()
def generate(
    kind: GenerateKind = typer.Argument(..., help="What to generate."),
    count: int = typer.Option(1, "--count", "-c", min=1, max=100_000, help="How many values."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
) -> None:
    """Generate fixture values, one per line."""

    settings = AppSettings()
    source = _source(seed, settings)

    for _ in range(count):
        if kind is GenerateKind.COMPANY_RUT:
            typer.echo(generate_company_rut(source))
        elif kind is GenerateKind.PERSONAL_RUT:
            typer.echo(generate_personal_rut(source))
        elif kind is GenerateKind.OLD_PLATE:
            typer.echo(generate_old_format_plate(source))
        elif kind is GenerateKind.NEW_PLATE:
            typer.echo(generate_new_format_plate(source))
        elif kind is GenerateKind.PLATE:
            typer.echo(generate_chilean_plate(source, settings.old_plate_probability))
        else:
            company = generate_construction_company(source, settings.company_active_probability)
            typer.echo(company.model_dump_json())


@app.command()
def demo(
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also export the batch as JSON."),
    language: Optional[Language] = typer.Option(
        None,
        "--lang",
        help="Output language (defaults to RUTCHECK_DEFAULT_LANGUAGE).",
    ),
) -> None:
    """Print a demo batch of companies, plates and personal RUTs."""

    settings = AppSettings()
    lang = language or settings.default_language
    source = _source(seed, settings)

    batch = generate_test_data(
        source,
        companies=settings.demo_companies,
        plates_per_format=settings.demo_plates_per_format,
        personal_ruts=settings.demo_personal_ruts,
        active_probability=settings.company_active_probability,
    )

    print_banner(_console, lang)
    _console.print(build_companies_table(batch.companies, lang))
    _console.print(build_values_table(lang.text("old_plates_title"), lang.text("plate"), batch.old_plates))
    _console.print(build_values_table(lang.text("new_plates_title"), lang.text("plate"), batch.new_plates))
    _console.print(build_values_table(lang.text("personal_title"), lang.text("rut"), batch.personal_ruts))

    if json_path is not None:
        out = export_batch_json(batch=batch, output_path=json_path)
        logger.info("Batch exported to %s", out)
        _console.print(f"[dim]JSON:[/dim] {out}")

    _console.print(f"\n[green]{lang.text('done')}[/green]")


def run() -> None:
    app()
