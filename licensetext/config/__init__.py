"""Configuration management for license normalization."""

from .exceptions import ConfigurationError, RegistryError, UnknownRuleError
from .loader import format_validation_errors, load_settings
from .models import LogFormat, LoggingConfig, LogLevel, NormalizerSettings

__all__ = [
    # Loader functions
    "load_settings",
    "format_validation_errors",
    # Configuration models
    "NormalizerSettings",
    "LoggingConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
    "UnknownRuleError",
    "RegistryError",
]
