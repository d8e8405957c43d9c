"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la CLI ni a la fuente de azar.
- Los invariantes (dígito verificador, gramática de patente) se cumplen al
  construir el valor: un `TaxId` inválido no puede existir.

Nota:
- Estos modelos describen *qué* es un RUT o una patente, no *cómo* se generan.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.checksum import CHECK_SYMBOLS, compute_check_digit
from core.domain.errors import InvalidPlateError
from core.domain.plate_format import PlateFormat

RUT_MIN_BODY = 1_000_000
RUT_MAX_BODY = 99_999_999


def _group_thousands(number: int) -> str:
    return f"{number:,}".replace(",", ".")


class TaxId(BaseModel):
    """RUT: cuerpo numérico + símbolo verificador.

    El invariante `check_symbol == compute_check_digit(number)` se valida al
    construir; un símbolo incorrecto produce `ValidationError`.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(
        ...,
        ge=RUT_MIN_BODY,
        le=RUT_MAX_BODY,
        description="Cuerpo del RUT (7 u 8 dígitos, sin separadores).",
    )
    check_symbol: str = Field(
        ...,
        min_length=1,
        max_length=1,
        description="Dígito verificador: 0-9 o K.",
    )

    @field_validator("check_symbol")
    @classmethod
    def _upper_symbol(cls, value: str) -> str:
        symbol = value.upper()
        if symbol not in CHECK_SYMBOLS:
            raise ValueError("check symbol must be a digit or K")
        return symbol

    @model_validator(mode="after")
    def _check_digit_matches(self) -> "TaxId":
        expected = compute_check_digit(self.number)
        if self.check_symbol != expected:
            raise ValueError(
                f"check digit mismatch for {self.number}: got {self.check_symbol}, expected {expected}"
            )
        return self

    @classmethod
    def from_number(cls, number: int) -> "TaxId":
        """Construye el RUT calculando su dígito."""

        return cls(number=number, check_symbol=compute_check_digit(number))

    def formatted(self, *, dots: bool = False) -> str:
        body = _group_thousands(self.number) if dots else str(self.number)
        return f"{body}-{self.check_symbol}"

    def __str__(self) -> str:
        return self.formatted()


class PlateCode(BaseModel):
    """Patente chilena en uno de los dos formatos (ABC123 o ABCD12)."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(
        ...,
        min_length=6,
        max_length=6,
        description="Patente en mayúsculas y sin separadores.",
    )

    @field_validator("value")
    @classmethod
    def _known_format(cls, value: str) -> str:
        if not any(fmt.matches(value) for fmt in PlateFormat):
            raise ValueError("plate must match ABC123 or ABCD12")
        return value

    @classmethod
    def parse(cls, value: str) -> "PlateCode":
        """Como el constructor, pero lanza `InvalidPlateError` (un `ValueError`)."""

        try:
            return cls(value=value)
        except ValidationError as exc:
            raise InvalidPlateError(value) from exc

    @property
    def format(self) -> PlateFormat:
        return PlateFormat.OLD if PlateFormat.OLD.matches(self.value) else PlateFormat.NEW

    def __str__(self) -> str:
        return self.value


class CompanyRecord(BaseModel):
    """Empresa de demostración (no se persiste)."""

    model_config = ConfigDict(frozen=True)

    rut: str = Field(
        ...,
        pattern=r"^[0-9]{7,8}-[0-9K]$",
        description="RUT compacto `{cuerpo}-{dígito}`.",
    )
    name: str = Field(
        ...,
        min_length=2,
        max_length=200,
        description="Razón social con sufijo legal (S.A., Ltda., SpA, EIRL).",
    )
    active: bool = Field(
        default=True,
        description="Si la empresa figura como activa.",
    )

    @field_validator("rut")
    @classmethod
    def _rut_checksum(cls, value: str) -> str:
        body, symbol = value.split("-")
        if compute_check_digit(int(body)) != symbol:
            raise ValueError("RUT check digit does not match")
        return value

    @property
    def tax_id(self) -> TaxId:
        body, symbol = self.rut.split("-")
        return TaxId(number=int(body), check_symbol=symbol)
