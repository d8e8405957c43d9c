"""Errores del dominio.

Solo los helpers de *parseo* (`parse_rut`, `PlateCode.parse`) lanzan estas
excepciones. Los validadores devuelven `False` y nunca lanzan.
"""

from __future__ import annotations


class ValidationToolkitError(Exception):
    """Base de todos los errores propios del paquete."""


class InvalidRutError(ValidationToolkitError, ValueError):
    """El RUT no tiene un formato reconocido o su dígito verificador no cuadra."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid RUT {value!r}: {reason}")


class InvalidPlateError(ValidationToolkitError, ValueError):
    """La patente no calza con ninguno de los dos formatos vigentes."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid license plate {value!r}: expected ABC123 or ABCD12")
