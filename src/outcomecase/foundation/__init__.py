"""Foundation layer: error capability and configuration."""

from .config import CaptureSettings, LoggingSettings, OutcomeSettings, clear_settings_cache, get_settings
from .errors import DescribedError, Describable, ErrorCode, ErrorReport, classify_exception, describe

__all__ = [
    # Config
    "OutcomeSettings", "LoggingSettings", "CaptureSettings", "get_settings", "clear_settings_cache",
    # Errors
    "Describable", "describe", "DescribedError", "ErrorCode", "ErrorReport", "classify_exception",
]
