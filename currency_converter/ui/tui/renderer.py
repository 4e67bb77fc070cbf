from __future__ import annotations

"""Formatting helpers for the TUI."""

from typing import List

from currency_converter.catalog import CurrencyCatalog
from currency_converter.conversion import ConversionResult

from .config import NAME_COLUMN_WIDTH, SUMMARY_DIVIDER, SUMMARY_TITLE


def format_amount(amount: float) -> str:
    # Two decimals, no grouping: output must not depend on locale
    return f"{amount:.2f}"


def format_catalog_row(name: str, index: object) -> str:
    return f"{name:<{NAME_COLUMN_WIDTH}} | {index}"


def catalog_lines(catalog: CurrencyCatalog) -> List[str]:
    return [format_catalog_row(c.name, i) for i, c in catalog.entries()]


def summary_lines(result: ConversionResult) -> List[str]:
    src, tgt = result.source_name, result.target_name
    return [
        SUMMARY_DIVIDER,
        SUMMARY_TITLE,
        SUMMARY_DIVIDER,
        f"Currency: {src} to {tgt}",
        f"Exchange Rate: 1 {src} = {format_amount(result.rate)} {tgt}",
        f"Amount in {src}: {format_amount(result.amount)}",
        f"Converted Amount in {tgt}: {format_amount(result.converted_amount)}",
        SUMMARY_DIVIDER,
    ]
