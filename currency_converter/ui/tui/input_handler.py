from __future__ import annotations

"""Prompt helpers for the TUI.

Every prompt consumes one whole line, so no stray newline is left behind
between the numeric prompts and the continue prompt.
"""

from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from currency_converter.utils.errors import InputExhaustedError
from currency_converter.utils.validation import parse_amount, parse_selection

from .config import THEME, CONTINUE_QUESTION, STOP_ANSWER


def read_line(console: Console, prompt: str, stream: Optional[TextIO] = None) -> str:
    """Show ``prompt`` and return the next input line without its terminator."""
    try:
        line = console.input(Text(prompt, style=THEME.primary), stream=stream)
    except EOFError:
        raise InputExhaustedError(f"Input ended while waiting for: {prompt.strip()}") from None

    if stream is not None:
        # readline() signals EOF with an empty string instead of raising
        if line == "":
            raise InputExhaustedError(f"Input ended while waiting for: {prompt.strip()}")
        line = line.rstrip("\r\n")
    return line


def ask_selection(console: Console, prompt: str, stream: Optional[TextIO] = None) -> int:
    return parse_selection(read_line(console, prompt, stream))


def ask_amount(console: Console, prompt: str, stream: Optional[TextIO] = None) -> float:
    return parse_amount(read_line(console, prompt, stream))


def wants_to_stop(answer: str) -> bool:
    # Only the exact token stops; "no", "N", " n" and "" all continue
    return answer == STOP_ANSWER


def ask_continue(console: Console, stream: Optional[TextIO] = None) -> bool:
    console.print(Text(CONTINUE_QUESTION))
    return not wants_to_stop(read_line(console, "", stream))
