"""Currency catalog: the fixed, ordered menu of supported currencies.

Every rate is expressed relative to a single reference currency (rate 1.0),
which is always listed first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from currency_converter.utils.errors import ConfigurationError, InvalidSelectionIndex


REFERENCE_RATE = 1.0


@dataclass(frozen=True)
class Currency:
    """A catalog entry: how many units of ``name`` buy one reference unit."""

    name: str
    rate_to_reference: float

    @property
    def is_reference(self) -> bool:
        return self.rate_to_reference == REFERENCE_RATE


DEFAULT_CURRENCIES: Tuple[Currency, ...] = (
    Currency("USD", 1.0),
    Currency("EUR", 0.88),
    Currency("GBP", 0.75),
    Currency("JPY", 142.38),
    Currency("INR", 85.38),
    Currency("TKM", 3.49),
)


class CurrencyCatalog:
    """Read-only, 1-based view over an ordered sequence of currencies."""

    def __init__(self, currencies: Iterable[Currency]):
        self._currencies: Tuple[Currency, ...] = tuple(currencies)
        self._validate()

    def _validate(self) -> None:
        if not self._currencies:
            raise ConfigurationError("Currency catalog is empty")

        names = [c.name for c in self._currencies]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate currency names in catalog: {duplicates}")

        for c in self._currencies:
            if not c.name or not c.name.strip():
                raise ConfigurationError("Currency name must not be blank")
            if not math.isfinite(c.rate_to_reference) or c.rate_to_reference <= 0:
                raise ConfigurationError(
                    f"Rate for {c.name} must be positive and finite, got {c.rate_to_reference}"
                )

        references = [c.name for c in self._currencies if c.is_reference]
        if len(references) != 1:
            raise ConfigurationError(
                f"Catalog must contain exactly one reference currency (rate 1.0), found {references}"
            )
        if not self._currencies[0].is_reference:
            raise ConfigurationError(
                f"Reference currency {references[0]} must be the first catalog entry"
            )

    @classmethod
    def default(cls) -> "CurrencyCatalog":
        return cls(DEFAULT_CURRENCIES)

    @classmethod
    def from_entries(cls, entries: Sequence[dict]) -> "CurrencyCatalog":
        """Build a catalog from ``[{"name": ..., "rate": ...}, ...]`` mappings."""
        currencies: List[Currency] = []
        for position, entry in enumerate(entries, start=1):
            if not isinstance(entry, dict) or "name" not in entry or "rate" not in entry:
                raise ConfigurationError(
                    f"Catalog entry {position} must define 'name' and 'rate', got {entry!r}"
                )
            try:
                rate = float(entry["rate"])
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"Catalog entry {position} has a non-numeric rate: {entry['rate']!r}"
                ) from None
            currencies.append(Currency(str(entry["name"]).strip(), rate))
        return cls(currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def entries(self) -> Iterator[Tuple[int, Currency]]:
        """Yield ``(display_index, currency)`` pairs in menu order."""
        return enumerate(self._currencies, start=1)

    @property
    def reference_index(self) -> int:
        return 1

    def is_reference(self, index: int) -> bool:
        return self.validate_index(index) == self.reference_index

    def validate_index(self, index: int) -> int:
        if not 1 <= index <= len(self._currencies):
            raise InvalidSelectionIndex(index, len(self._currencies))
        return index

    def currency_at(self, index: int) -> Currency:
        return self._currencies[self.validate_index(index) - 1]

    def name_at(self, index: int) -> str:
        return self.currency_at(index).name

    def rate_at(self, index: int) -> float:
        return self.currency_at(index).rate_to_reference
