"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.random_source import PythonRandomSource
from core.config import AppSettings, get_user_env_file
from core.domain.checksum import compute_check_digit
from core.plates import validate_license_plate_format
from core.rut import is_valid_rut
from core.services.test_data import generate_chilean_plate, generate_company_rut

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# (body, expected digit): covers the "0" and "K" mappings and a 7-digit body.
KNOWN_VECTORS: tuple[tuple[int, str], ...] = (
    (12345678, "5"),
    (76123456, "0"),
    (10000030, "K"),
    (1000000, "9"),
)


def _check_vectors() -> tuple[bool, str]:
    failures = [f"{n}->{compute_check_digit(n)}" for n, d in KNOWN_VECTORS if compute_check_digit(n) != d]
    if failures:
        return False, "Mismatch: " + ", ".join(failures)
    return True, f"{len(KNOWN_VECTORS)} vectors"


def _check_round_trip(settings: AppSettings, samples: int = 1000) -> tuple[bool, str]:
    source = PythonRandomSource.from_settings(settings)
    bad_ruts = sum(not is_valid_rut(generate_company_rut(source)) for _ in range(samples))
    bad_plates = sum(
        not validate_license_plate_format(generate_chilean_plate(source, settings.old_plate_probability))
        for _ in range(samples)
    )
    ok = bad_ruts == 0 and bad_plates == 0
    return ok, f"{samples} RUTs, {samples} plates ({bad_ruts + bad_plates} rejected)"


@app.command()
def run() -> None:
    """Show effective settings and self-check the validators."""

    settings = AppSettings()

    table = Table(title="rutcheck Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    seed = "system entropy" if settings.random_seed is None else str(settings.random_seed)
    table.add_row("Random seed", "OK", seed)
    table.add_row("Old plate probability", "OK", f"{settings.old_plate_probability:.2f}")
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Log level", "OK", settings.log_level)

    ok_vectors, detail_vectors = _check_vectors()
    table.add_row("Check digit vectors", "OK" if ok_vectors else "FAIL", detail_vectors)

    ok_round, detail_round = _check_round_trip(settings)
    table.add_row("Generator round trip", "OK" if ok_round else "FAIL", detail_round)

    _console.print(table)

    if not (ok_vectors and ok_round):
        raise typer.Exit(code=1)
