from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from currency_converter.catalog import CurrencyCatalog
from currency_converter.conversion import ConversionRequest, ConversionResult, convert

from .config import SOURCE_HINT, SOURCE_PROMPT, TARGET_HINT, TARGET_PROMPT, AMOUNT_PROMPT
from .display import show_catalog, show_summary, show_goodbye
from .input_handler import ask_selection, ask_amount, ask_continue

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Where the session is between prompts."""

    AWAITING_SOURCE = "awaiting_source"
    AWAITING_TARGET = "awaiting_target"
    AWAITING_AMOUNT = "awaiting_amount"
    DISPLAYING = "displaying"
    AWAITING_CONTINUE = "awaiting_continue"
    TERMINATED = "terminated"


class ConverterLoop:
    """Interactive read-convert-print loop over a currency catalog.

    Input errors are not recovered here: InvalidSelectionIndex,
    MalformedNumericInput and InputExhaustedError propagate to the caller
    and end the session.
    """

    def __init__(
        self,
        catalog: CurrencyCatalog,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.catalog = catalog
        self.console = console or Console(highlight=False)
        self.stream = stream
        self.state = LoopState.AWAITING_SOURCE
        self.iterations = 0

    def run(self) -> int:
        """Run until the user answers "n"; returns the number of conversions shown."""
        keep_going = True
        while keep_going:
            self.run_once()
            self.state = LoopState.AWAITING_CONTINUE
            keep_going = ask_continue(self.console, self.stream)
            if keep_going:
                self.state = LoopState.AWAITING_SOURCE

        self.state = LoopState.TERMINATED
        show_goodbye(self.console)
        logger.info("Session finished after %d conversion(s)", self.iterations)
        return self.iterations

    def run_once(self) -> ConversionResult:
        """One pass: menu, three prompts, summary."""
        show_catalog(self.console, self.catalog)

        self.state = LoopState.AWAITING_SOURCE
        self.console.print(Text(SOURCE_HINT))
        source = self.catalog.validate_index(ask_selection(self.console, SOURCE_PROMPT, self.stream))

        self.state = LoopState.AWAITING_TARGET
        self.console.print(Text(TARGET_HINT))
        target = self.catalog.validate_index(ask_selection(self.console, TARGET_PROMPT, self.stream))

        self.state = LoopState.AWAITING_AMOUNT
        prompt = AMOUNT_PROMPT.format(
            source=self.catalog.name_at(source), target=self.catalog.name_at(target)
        )
        amount = ask_amount(self.console, prompt, self.stream)

        result = convert(self.catalog, ConversionRequest(source, target, amount))

        self.state = LoopState.DISPLAYING
        show_summary(self.console, result)
        self.iterations += 1
        logger.debug(
            "Displayed conversion %d",
            self.iterations,
            extra={"iteration": self.iterations, "source": result.source_name, "target": result.target_name},
        )
        return result
