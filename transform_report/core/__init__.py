"""
Core module: Configuration, logging, and exception handling.
"""

from .config import Config, ObserverConfig, config
from .exceptions import (
    ConfigurationError,
    ReportWriteError,
    TransformReportError,
)
from .logging_config import setup_logging

__all__ = [
    "Config",
    "ObserverConfig",
    "config",
    "setup_logging",
    "TransformReportError",
    "ReportWriteError",
    "ConfigurationError",
]
