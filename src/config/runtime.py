"""Runtime configuration loader for the evaluator service."""

import os
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, str] = {
    "SERVICE_NAME": "calc-evaluator",
    "SERVICE_VERSION": "1.0.0",
    "HOST": "0.0.0.0",
    "PORT": "8080",
    "LOG_LEVEL": "INFO",
    "MAX_EXPRESSION_LENGTH": "1000",
}


class RuntimeConfig:
    """Loads configuration from environment variables, a .env file, or defaults."""

    def __init__(self, env_file: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            env_file: Optional path to a .env file. Values already present in
                the environment take precedence over the file.
        """
        self._env_file = env_file
        self._env_loaded = False

    def load_env_file(self) -> bool:
        """
        Load the .env file into the process environment once.

        Returns:
            True if a file was found and loaded
        """
        if self._env_loaded:
            return True

        if self._env_file is not None:
            if not self._env_file.exists():
                logger.debug(f"No .env file at {self._env_file}")
                return False
            loaded = load_dotenv(self._env_file, override=False)
        else:
            loaded = load_dotenv(override=False)

        self._env_loaded = loaded
        return loaded

    def get_config_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get configuration value with fallback chain.

        Fallback order:
        1. Environment variable (including values loaded from .env)
        2. Explicit default
        3. Built-in default from DEFAULTS

        Args:
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        value = os.getenv(key)
        if value:
            return value

        if default is not None:
            return default

        return DEFAULTS.get(key)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Get configuration value as an integer, falling back on parse errors."""
        value = self.get_config_value(key, None if default is None else str(default))
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid integer for {key}: {value!r}")
            fallback = DEFAULTS.get(key)
            return int(fallback) if fallback is not None else default

    def get_service_config(self) -> Dict[str, Any]:
        """Get HTTP service configuration."""
        return {
            "service_name": self.get_config_value("SERVICE_NAME"),
            "version": self.get_config_value("SERVICE_VERSION"),
            "host": self.get_config_value("HOST"),
            "port": self.get_int("PORT"),
            "log_level": self.get_config_value("LOG_LEVEL").upper(),
            "max_expression_length": self.get_int("MAX_EXPRESSION_LENGTH"),
        }


# Global config instance
_config = RuntimeConfig()


def get_config() -> RuntimeConfig:
    """Get global configuration instance."""
    return _config
