"""Configuration module."""

from .schemas import Config, LoggingConfig, CallbackListConfig
from .loader import ConfigLoader, load_config

__all__ = ["Config", "LoggingConfig", "CallbackListConfig", "ConfigLoader", "load_config"]
