"""Rate derivation and amount conversion through the reference currency."""

from __future__ import annotations

from dataclasses import dataclass

from currency_converter.catalog import CurrencyCatalog
from currency_converter.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionRequest:
    """One source/target/amount triple as entered at the prompts."""

    source_index: int
    target_index: int
    amount: float


@dataclass(frozen=True)
class ConversionResult:
    """Derived rate and converted amount, plus what is needed to print them."""

    source_name: str
    target_name: str
    amount: float
    rate: float
    converted_amount: float


def derive_rate(catalog: CurrencyCatalog, source_index: int, target_index: int) -> float:
    """Return how many target units one source unit buys.

    Direct (from the reference), reverse (to the reference) and cross
    conversions are kept as separate branches.
    """
    source_rate = catalog.rate_at(source_index)
    target_rate = catalog.rate_at(target_index)

    if catalog.is_reference(source_index):
        return target_rate
    elif catalog.is_reference(target_index):
        return 1 / source_rate
    else:
        return target_rate / source_rate


def convert_to_target(amount: float, rate: float) -> float:
    return amount * rate


def convert(catalog: CurrencyCatalog, request: ConversionRequest) -> ConversionResult:
    """Resolve a request against the catalog and compute the converted amount.

    Raises:
        InvalidSelectionIndex: If either index is outside the catalog
    """
    rate = derive_rate(catalog, request.source_index, request.target_index)
    result = ConversionResult(
        source_name=catalog.name_at(request.source_index),
        target_name=catalog.name_at(request.target_index),
        amount=request.amount,
        rate=rate,
        converted_amount=convert_to_target(request.amount, rate),
    )
    logger.debug(
        "Converted %s %s to %s %s",
        result.amount,
        result.source_name,
        result.converted_amount,
        result.target_name,
        extra={"source": result.source_name, "target": result.target_name, "rate": rate},
    )
    return result
