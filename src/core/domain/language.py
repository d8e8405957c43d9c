"""Language utilities for the toolkit.

This module centralizes the language options supported by the CLI output.
Keeping it in the domain layer allows both the CLI and the services to share
a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.SPANISH

    def label(self) -> str:
        """Human readable label for logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    def text(self, key: str) -> str:
        """Look up a UI string, falling back to English and then to the key."""

        table = _STRINGS.get(self, {})
        return table.get(key) or _STRINGS[Language.ENGLISH].get(key) or key


_STRINGS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "generating": "Generating validation test data...",
        "companies_title": "Companies with valid RUTs (76-77 million)",
        "old_plates_title": "Old format plates (ABC123)",
        "new_plates_title": "New format plates (ABCD12)",
        "personal_title": "Sample personal RUTs",
        "done": "Test data generated successfully!",
        "name": "Name",
        "rut": "RUT",
        "status": "Status",
        "plate": "Plate",
        "active": "Active",
        "inactive": "Inactive",
    },
    Language.SPANISH: {
        "generating": "Generando datos de prueba para validación...",
        "companies_title": "Empresas con RUTs válidos (76-77 millones)",
        "old_plates_title": "Formato antiguo (ABC123)",
        "new_plates_title": "Formato nuevo (ABCD12)",
        "personal_title": "RUTs personales de ejemplo",
        "done": "¡Datos de prueba generados exitosamente!",
        "name": "Nombre",
        "rut": "RUT",
        "status": "Estado",
        "plate": "Patente",
        "active": "Activa",
        "inactive": "Inactiva",
    },
}
