"""Input validation utilities."""
import math
import re

from currency_converter.utils.errors import MalformedNumericInput

# Plain decimal forms only: int()/float() would also take "1_0" or "nan"
INTEGER_PATTERN = re.compile(r"[+-]?\d+")
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_selection(text: str) -> int:
    """
    Parse a catalog selection typed by the user.

    Args:
        text: Raw input line (e.g. "3", " 2 ")

    Returns:
        The selection as an integer; range checking is left to the catalog

    Raises:
        MalformedNumericInput: If the text is not an integer
    """
    stripped = text.strip()
    if not INTEGER_PATTERN.fullmatch(stripped):
        raise MalformedNumericInput(text, "an integer selection")
    return int(stripped)


def parse_amount(text: str) -> float:
    """
    Parse and validate an amount to convert.

    Args:
        text: Raw input line (e.g. "10", "8.80")

    Returns:
        Validated amount

    Raises:
        MalformedNumericInput: If the text is not a finite, non-negative number
    """
    stripped = text.strip()
    if not DECIMAL_PATTERN.fullmatch(stripped):
        raise MalformedNumericInput(text, "a numeric amount")

    amount = float(stripped)
    if not math.isfinite(amount):
        raise MalformedNumericInput(text, "a finite amount")

    if amount < 0:
        raise MalformedNumericInput(text, "a non-negative amount")

    return amount
