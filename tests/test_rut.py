from __future__ import annotations

import pytest

from core.domain.errors import InvalidRutError
from core.domain.models import TaxId
from core.rut import clean_rut, format_rut, is_valid_rut, parse_rut, validate_rut_format


class TestValidateRutFormat:
    @pytest.mark.parametrize(
        "value",
        [
            "12345678-9",  # format only, the digit is wrong
            "12345678-5",
            "1234567-8",
            "76123456-k",
            "76123456-K",
            "12.345.678-5",
            "1.234.567-K",
            "1.234.567-k",
        ],
    )
    def test_accepts(self, value: str) -> None:
        assert validate_rut_format(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "123456789-1",
            "123456-1",
            "12345678",
            "12345678-",
            "12345678-X",
            "12345678-55",
            "12.345678-5",
            "123.456.789-5",
            "12,345,678-5",
            " 12345678-5",
            "12345678-5\n",
            "12345678 5",
            "１２３４５６７８-5",
        ],
    )
    def test_rejects(self, value: str) -> None:
        assert validate_rut_format(value) is False

    @pytest.mark.parametrize("value", [None, 12345678, b"12345678-5", ["12345678-5"]])
    def test_non_strings_return_false(self, value: object) -> None:
        assert validate_rut_format(value) is False


class TestIsValidRut:
    @pytest.mark.parametrize(
        "value",
        ["12345678-5", "12.345.678-5", "76123456-0", "10000030-K", "10000030-k", "1.000.003-3"],
    )
    def test_valid(self, value: str) -> None:
        assert is_valid_rut(value) is True

    @pytest.mark.parametrize(
        "value",
        ["12345678-9", "12345678-0", "76123456-9", "76123456-7", "123456789-1", "", None],
    )
    def test_invalid(self, value: object) -> None:
        assert is_valid_rut(value) is False

    def test_format_and_digit_are_independent(self) -> None:
        assert validate_rut_format("12345678-9")
        assert not is_valid_rut("12345678-9")


def test_clean_rut() -> None:
    assert clean_rut("12.345.678-k") == "12345678K"
    assert clean_rut(" 76123456 - 0 ") == "761234560"


class TestParseRut:
    def test_compact(self) -> None:
        tax_id = parse_rut("12345678-5")
        assert tax_id == TaxId(number=12345678, check_symbol="5")

    def test_grouped_with_whitespace_and_lowercase_k(self) -> None:
        tax_id = parse_rut("  10.000.030-k ")
        assert tax_id.number == 10000030
        assert tax_id.check_symbol == "K"

    def test_wrong_digit(self) -> None:
        with pytest.raises(InvalidRutError, match="should be 5"):
            parse_rut("12345678-9")

    def test_bad_format_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_rut("not-a-rut")

    def test_error_keeps_input(self) -> None:
        with pytest.raises(InvalidRutError) as excinfo:
            parse_rut("123")
        assert excinfo.value.value == "123"


class TestFormatRut:
    def test_compact(self) -> None:
        assert format_rut(12345678) == "12345678-5"

    def test_grouped(self) -> None:
        assert format_rut(12345678, dots=True) == "12.345.678-5"
        assert format_rut(1000000, dots=True) == "1.000.000-9"

    def test_grouped_output_passes_format_check(self) -> None:
        assert validate_rut_format(format_rut(76123456, dots=True))

    @pytest.mark.parametrize("number", [0, 999_999, 100_000_000, -12345678])
    def test_out_of_range(self, number: int) -> None:
        with pytest.raises(ValueError):
            format_rut(number)
