from __future__ import annotations

import pytest

from core.domain.checksum import compute_check_digit


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (12345678, "5"),
        (76123456, "0"),
        (76789012, "5"),
        (77456789, "5"),
        (77012345, "3"),
        (18765432, "7"),
        (10000030, "K"),
        (1000000, "9"),
        (11111111, "1"),
    ],
)
def test_known_vectors(number: int, expected: str) -> None:
    assert compute_check_digit(number) == expected


def test_weights_wrap_after_seven() -> None:
    # Only the 7th digit from the right is set: weight 2 after the wrap.
    assert compute_check_digit(1000000) == str(11 - 2)
    # 6th and 7th digits from the right: weights 7 and 2.
    assert compute_check_digit(1100000) == str(11 - (7 + 2))


def test_remainder_zero_maps_to_zero_and_one_maps_to_k() -> None:
    # 76123456 sums to 110 (remainder 0); 10000030 sums to 12 (remainder 1).
    assert compute_check_digit(76123456) == "0"
    assert compute_check_digit(10000030) == "K"


def test_is_deterministic() -> None:
    for number in (1000000, 9999999, 10000000, 25999999, 76000000, 99999999):
        assert compute_check_digit(number) == compute_check_digit(number)


def test_output_alphabet() -> None:
    symbols = {compute_check_digit(n) for n in range(10_000_000, 10_002_000)}
    assert symbols <= set("0123456789K")
    assert "K" in symbols
    assert "0" in symbols
