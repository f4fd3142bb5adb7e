"""
Configuration Service - Centralized configuration management.
Settings come from dataclass defaults, an optional JSON file and environment variables, in that order.
"""

import codecs
import os
import json
import logging
from dataclasses import dataclass, asdict, fields, field
from pathlib import Path
from typing import Dict, Any, Optional, Type, TypeVar

from ..exceptions import ConfigurationError
from ..store import UserStore

T = TypeVar('T')

DEFAULT_STORE_FILENAME = "users.txt"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StoreConfig:
    """User store configuration."""
    store_path: str = DEFAULT_STORE_FILENAME
    encoding: str = "utf-8"


@dataclass
class LedgerConfig:
    """Master configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.store.store_path, str) or not self.store.store_path.strip():
            raise ConfigurationError("store_path must be a non-empty string")
        if not isinstance(self.store.encoding, str) or not self.store.encoding:
            raise ConfigurationError("encoding must be a non-empty string")
        try:
            codecs.lookup(self.store.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {self.store.encoding}") from e
        if not isinstance(self.log_level, str):
            raise ConfigurationError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log_level: {self.log_level}")


def create_store(config: StoreConfig) -> UserStore:
    """Build a UserStore from store configuration."""
    return UserStore(config.store_path, encoding=config.encoding)


class ConfigurationService:
    """
    Centralized configuration management service.

    Environment variables:
        USERLEDGER_STORE_STORE_PATH: path of the user store file
        USERLEDGER_STORE_ENCODING: text encoding of the user store file
        USERLEDGER_LOG_LEVEL: logging level name
    """

    def __init__(self, config_path: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[LedgerConfig] = None

    def get_config(self) -> LedgerConfig:
        """Get the current configuration, loading from file if needed."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self, config_path: Optional[str] = None) -> LedgerConfig:
        """
        Load configuration from file or environment variables.

        Args:
            config_path: Optional path to configuration file

        Returns:
            LedgerConfig instance
        """
        config_file = Path(config_path) if config_path else self.config_path

        store_config = StoreConfig()
        log_level = "WARNING"

        if config_file and config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigurationError(f"Failed to load config from {config_file}: {e}") from e

            if not isinstance(data, dict):
                raise ConfigurationError(f"Config file {config_file} must contain a JSON object")
            store_data = data.get('store', {})
            if not isinstance(store_data, dict):
                raise ConfigurationError(f"'store' in {config_file} must be a JSON object")

            store_config = self._dict_to_dataclass(store_data, StoreConfig)
            log_level = data.get('log_level', log_level)
            self.logger.info(f"Loaded configuration from {config_file}")

        store_config = self._apply_env_overrides(store_config, 'USERLEDGER_STORE_')
        log_level = os.getenv('USERLEDGER_LOG_LEVEL', log_level)

        return LedgerConfig(store=store_config, log_level=log_level)

    def save_config(self, config: LedgerConfig, config_path: Optional[str] = None) -> None:
        """
        Save configuration to file.

        Args:
            config: Configuration to save
            config_path: Optional path to save to
        """
        config_file = Path(config_path) if config_path else self.config_path

        if not config_file:
            raise ConfigurationError("No config path specified")

        data = {
            'store': asdict(config.store),
            'log_level': config.log_level,
        }

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigurationError(f"Failed to save config to {config_file}: {e}") from e

        self.logger.info(f"Saved configuration to {config_file}")

    def _dict_to_dataclass(self, data: Dict[str, Any], dataclass_type: Type[T]) -> T:
        """Convert dictionary to dataclass, dropping unknown keys."""
        field_names = {f.name for f in fields(dataclass_type)}

        unknown = set(data) - field_names
        if unknown:
            self.logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        filtered_data = {k: v for k, v in data.items() if k in field_names}
        return dataclass_type(**filtered_data)

    def _apply_env_overrides(self, config: T, prefix: str) -> T:
        """Apply environment variable overrides to configuration."""
        config_dict = asdict(config)

        for config_field in fields(config):
            env_key = f"{prefix}{config_field.name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                config_dict[config_field.name] = env_value
                self.logger.debug(f"Applied env override: {env_key}={env_value}")

        return type(config)(**config_dict)

    def get_store_config(self) -> StoreConfig:
        """Get store configuration."""
        return self.get_config().store

    def create_store(self) -> UserStore:
        """Build a UserStore from the current configuration."""
        return create_store(self.get_store_config())
