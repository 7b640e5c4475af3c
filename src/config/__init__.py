"""Configuration module for the evaluator service."""

from .runtime import RuntimeConfig, get_config

__all__ = ["RuntimeConfig", "get_config"]
