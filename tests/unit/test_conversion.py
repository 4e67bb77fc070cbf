"""Tests for rate derivation and conversion."""
import pytest

from currency_converter.catalog import Currency, CurrencyCatalog
from currency_converter.conversion import (
    ConversionRequest,
    convert,
    convert_to_target,
    derive_rate,
)
from currency_converter.utils.errors import InvalidSelectionIndex


def test_direct_rate_from_reference(default_catalog):
    for k in range(1, len(default_catalog) + 1):
        assert derive_rate(default_catalog, 1, k) == default_catalog.rate_at(k)


def test_reverse_rate_to_reference(default_catalog):
    for k in range(2, len(default_catalog) + 1):
        assert derive_rate(default_catalog, k, 1) == 1 / default_catalog.rate_at(k)


def test_cross_rate(default_catalog):
    # EUR -> JPY
    assert derive_rate(default_catalog, 2, 4) == 142.38 / 0.88


def test_same_currency_rate_is_one(default_catalog):
    for k in range(1, len(default_catalog) + 1):
        assert derive_rate(default_catalog, k, k) == 1.0


def test_round_trip_rates(default_catalog):
    size = len(default_catalog)
    for i in range(1, size + 1):
        for j in range(1, size + 1):
            there = derive_rate(default_catalog, i, j)
            back = derive_rate(default_catalog, j, i)
            assert there * back == pytest.approx(1.0)


def test_converted_amount_is_not_rounded():
    assert convert_to_target(10.0, 1 / 3) == 10.0 * (1 / 3)


def test_reference_to_other(two_currency_catalog):
    result = convert(two_currency_catalog, ConversionRequest(1, 2, 10.0))
    assert result.rate == 0.88
    assert result.converted_amount == pytest.approx(8.80)
    assert (result.source_name, result.target_name) == ("REF", "A")


def test_other_to_reference(two_currency_catalog):
    result = convert(two_currency_catalog, ConversionRequest(2, 1, 8.80))
    assert result.rate == pytest.approx(1.136364, rel=1e-6)
    assert result.converted_amount == pytest.approx(10.00)
    assert result.converted_amount == 8.80 * result.rate


def test_zero_amount(default_catalog):
    assert convert(default_catalog, ConversionRequest(3, 5, 0.0)).converted_amount == 0.0


def test_out_of_range_selection_fails(default_catalog):
    with pytest.raises(InvalidSelectionIndex):
        convert(default_catalog, ConversionRequest(99, 2, 1.0))
    with pytest.raises(InvalidSelectionIndex):
        convert(default_catalog, ConversionRequest(1, 0, 1.0))


def test_reference_detection_follows_catalog():
    catalog = CurrencyCatalog([Currency("EUR", 1.0), Currency("USD", 1.25)])
    assert derive_rate(catalog, 1, 2) == 1.25
    assert derive_rate(catalog, 2, 1) == 1 / 1.25
