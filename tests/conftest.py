"""Pytest configuration and fixtures."""
import io
import logging

import pytest
from pathlib import Path
import tempfile
import yaml
from rich.console import Console

from currency_converter.catalog import Currency, CurrencyCatalog
from currency_converter.config import reset_config


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test Converter',
            'version': '9.9.9',
        },
        'logging': {
            'enabled': True,
            'level': 'DEBUG',
            'format': 'text'
        },
        'catalog': [
            {'name': 'REF', 'rate': 1.0},
            {'name': 'A', 'rate': 0.88},
        ],
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    # Cleanup
    Path(config_path).unlink()


@pytest.fixture
def two_currency_catalog():
    return CurrencyCatalog([Currency("REF", 1.0), Currency("A", 0.88)])


@pytest.fixture
def default_catalog():
    return CurrencyCatalog.default()


@pytest.fixture
def console_output():
    """An uncoloured console writing into a buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, highlight=False, width=120)
    return console, buffer


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the global config and any local .env."""
    monkeypatch.delenv("CURRENCY_CONVERTER_CONFIG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr("currency_converter.config.load_dotenv", lambda *a, **k: False)
    reset_config()
    yield
    reset_config()
    logging.disable(logging.NOTSET)
