"""Configuration management for the Currency Converter."""
import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv
from currency_converter.catalog import CurrencyCatalog
from currency_converter.utils.errors import ConfigurationError
from currency_converter.utils.logging import setup_logging
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_PATH_ENV = "CURRENCY_CONVERTER_CONFIG"


class Config:
    """Application configuration.

    The YAML file is optional when the default path is used; every setting
    has a built-in default.
    """

    def __init__(self, config_path: Optional[str] = None, configure_logging: bool = True):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. When omitted, the
                CURRENCY_CONVERTER_CONFIG environment variable is consulted,
                then ``config.yaml`` in the working directory.
            configure_logging: Whether to apply the logging section
        """
        # .env may supply CURRENCY_CONVERTER_CONFIG and LOG_LEVEL
        load_dotenv()

        explicit = config_path or os.getenv(CONFIG_PATH_ENV) or None
        self.config_path = Path(explicit or DEFAULT_CONFIG_PATH).expanduser()
        self._required = explicit is not None
        self._config: Dict[str, Any] = {}
        self._catalog: Optional[CurrencyCatalog] = None
        self._load(configure_logging)

    def _load(self, configure_logging: bool) -> None:
        """Load configuration from YAML and environment."""
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigurationError(f"Configuration root must be a mapping: {self.config_path}")
            self._config = loaded
        elif self._required:
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        self._validate()

        if configure_logging:
            log_config = self._config.get('logging') or {}
            setup_logging(
                level=os.getenv('LOG_LEVEL', log_config.get('level', 'WARNING')),
                log_file=log_config.get('file'),
                format_type=log_config.get('format', 'text'),
                enabled=log_config.get('enabled', True)
            )

        logger.info("Configuration loaded from %s", self.config_path if self._config else "defaults")

    def _validate(self) -> None:
        """Validate optional configuration sections."""
        for section in ('app', 'logging'):
            value = self._config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigurationError(f"Config section '{section}' must be a mapping")

        log_format = self.get('logging.format', 'text')
        if log_format not in ('json', 'text'):
            raise ConfigurationError(f"Unsupported logging.format: {log_format}")

        entries = self._config.get('catalog')
        if entries is not None:
            if not isinstance(entries, list):
                raise ConfigurationError("Config section 'catalog' must be a list of {name, rate} entries")
            self._catalog = CurrencyCatalog.from_entries(entries)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def app_name(self) -> str:
        """Get application name."""
        return self.get('app.name', 'Currency Converter')

    @property
    def app_version(self) -> str:
        """Get application version."""
        return self.get('app.version', '0.1.0')

    @property
    def catalog(self) -> CurrencyCatalog:
        """Configured catalog, or the built-in one."""
        if self._catalog is None:
            self._catalog = CurrencyCatalog.default()
        return self._catalog


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(config_path)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Drop the global instance so the next load_config() re-reads the file."""
    global _config
    _config = None
