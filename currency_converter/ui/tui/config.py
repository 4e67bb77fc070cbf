from __future__ import annotations

"""TUI styles and fixed session wording."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    success: str = "green"
    neutral: str = "white"


THEME = Theme()

WELCOME_TEXT = "----- Welcome to Currency Conversion app -----"
CATALOG_RULE = "-" * 24
NAME_COLUMN_WIDTH = 10

SUMMARY_DIVIDER = "=" * 41
SUMMARY_TITLE = "   Currency Conversion Details"

SOURCE_HINT = "Please select the Source Currency by pressing the button"
SOURCE_PROMPT = "Source Currency Selection: "
TARGET_HINT = "Please select the Target Currency by pressing the button"
TARGET_PROMPT = "Target Currency Selection: "
AMOUNT_PROMPT = "Amount to Convert from {source} to {target}: "

CONTINUE_QUESTION = "Would you like to do more conversions? press 'y' for yes 'n' for no"
STOP_ANSWER = "n"
GOODBYE_TEXT = "Bye"
