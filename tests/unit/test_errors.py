"""Tests for custom errors."""
from currency_converter.utils.errors import (
    CurrencyConverterError,
    ConfigurationError,
    ValidationError,
    InvalidSelectionIndex,
    MalformedNumericInput,
    InputExhaustedError,
)


def test_error_hierarchy():
    """Test error inheritance."""
    assert issubclass(ConfigurationError, CurrencyConverterError)
    assert issubclass(ValidationError, CurrencyConverterError)
    assert issubclass(InvalidSelectionIndex, ValidationError)
    assert issubclass(MalformedNumericInput, ValidationError)
    assert issubclass(InputExhaustedError, CurrencyConverterError)


def test_error_messages():
    """Test error messages."""
    error = ConfigurationError("Test message")
    assert str(error) == "Test message"


def test_invalid_selection_carries_bounds():
    error = InvalidSelectionIndex(99, 6)
    assert error.index == 99
    assert error.size == 6
    assert "99" in str(error)
    assert "1-6" in str(error)


def test_malformed_input_keeps_raw_text():
    error = MalformedNumericInput("abc", "an integer selection")
    assert error.text == "abc"
    assert "'abc'" in str(error)
