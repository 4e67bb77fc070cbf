"""Custom exception classes for the Currency Converter."""


class CurrencyConverterError(Exception):
    """Base exception for all Currency Converter errors."""
    pass


class ConfigurationError(CurrencyConverterError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(CurrencyConverterError):
    """Raised when user input fails validation."""
    pass


class InvalidSelectionIndex(ValidationError):
    """Raised when a currency selection is outside the catalog bounds."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid currency selection: {index} (expected 1-{size})")


class MalformedNumericInput(ValidationError):
    """Raised when a selection or amount cannot be read as a number."""

    def __init__(self, text: str, expected: str):
        self.text = text
        self.expected = expected
        super().__init__(f"Expected {expected}, got: {text!r}")


class InputExhaustedError(CurrencyConverterError):
    """Raised when input ends while a prompt is waiting for an answer."""
    pass
