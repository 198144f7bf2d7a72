"""
Configuration module
"""

from fiskaly_sdk.config.settings import (
    FiskalySettings,
    ENV_VAR_MAPPING,
    ConfigDefaults,
    DEFAULT_BASE_URL,
)
from fiskaly_sdk.config.config_loader import ConfigLoader
from fiskaly_sdk.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "FiskalySettings",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "DEFAULT_BASE_URL",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
