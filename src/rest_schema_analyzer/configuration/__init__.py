"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_default_configuration,
    write_default_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import AnalyzerSettings, ApiSettings

__all__ = [
    "AnalyzerSettings",
    "ApiSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_default_configuration",
    "write_default_configuration",
]
