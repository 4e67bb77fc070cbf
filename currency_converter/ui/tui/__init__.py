"""Rich-based terminal UI for the Currency Converter.

Modules:
- app.py: The interactive conversion loop
- display.py: Rich renderables for the menu and summary
- renderer.py: Formatting utilities
- input_handler.py: Prompt helpers
- config.py: TUI styles and session wording
"""

from .app import ConverterLoop, LoopState

__all__ = [
    "ConverterLoop",
    "LoopState",
]
