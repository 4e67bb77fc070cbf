from __future__ import annotations

import logging

import typer
from rich.console import Console

from currency_converter.config import load_config
from currency_converter.ui.tui import ConverterLoop
from currency_converter.utils.errors import ConfigurationError, CurrencyConverterError

logger = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 1
EXIT_INTERRUPTED = 130


app = typer.Typer(add_completion=False, help="Interactive currency converter")


@app.command()
def main() -> None:
    """Convert amounts between the catalog currencies until you answer 'n'."""

    try:
        cfg = load_config()
    except ConfigurationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_INPUT_ERROR)

    loop = ConverterLoop(cfg.catalog, console=Console(highlight=False))
    try:
        loop.run()
    except KeyboardInterrupt:
        typer.secho("\nInterrupted.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=EXIT_INTERRUPTED)
    except CurrencyConverterError as e:
        logger.info("Session aborted in state %s: %s", loop.state.value, e)
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_INPUT_ERROR)


if __name__ == "__main__":
    app()
