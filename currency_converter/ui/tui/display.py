from __future__ import annotations

"""Rich display components for the TUI."""

from rich.console import Console
from rich.text import Text

from currency_converter.catalog import CurrencyCatalog
from currency_converter.conversion import ConversionResult

from .config import THEME, WELCOME_TEXT, CATALOG_RULE, GOODBYE_TEXT
from .renderer import catalog_lines, format_catalog_row, summary_lines


def show_catalog(console: Console, catalog: CurrencyCatalog) -> None:
    console.print(Text(WELCOME_TEXT, style=f"bold {THEME.primary}"))
    console.print(Text(format_catalog_row("Currency", "Button"), style="bold"))
    console.print(Text(CATALOG_RULE))
    for line in catalog_lines(catalog):
        console.print(Text(line, style=THEME.neutral))


def show_summary(console: Console, result: ConversionResult) -> None:
    lines = summary_lines(result)
    converted_row = len(lines) - 2
    for i, line in enumerate(lines):
        console.print(Text(line, style=THEME.success if i == converted_row else ""))


def show_goodbye(console: Console) -> None:
    console.print(Text(GOODBYE_TEXT, style=THEME.primary))
