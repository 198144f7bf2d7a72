"""
Configuration Validator
Validates fiskaly settings with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fiskaly_sdk.exceptions import ConfigError


REQUIRED_FIELDS = [
    "fiskaly_service",
    "api_key",
    "api_secret",
]

URL_FIELDS = [
    "fiskaly_service",
    "base_url",
]


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Collects every problem in a settings dictionary instead of stopping at the first
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire settings dictionary

        Args:
            config: Settings dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_required(config)
        self._validate_urls(config)
        self._validate_timeout(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Raises:
            ConfigError: If the settings are invalid
        """
        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ConfigError(
                f"Configuration validation failed: {error_messages}",
                code="CONFIG_INVALID",
                details={"fields": [e.field for e in result.errors]},
            )

    def _validate_required(self, config: Dict[str, Any]) -> None:
        """Validate required fields are present and non-empty"""
        for field_name in REQUIRED_FIELDS:
            value = config.get(field_name)
            if value is None:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} is required"
                ))
            elif isinstance(value, str) and value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                    value=value
                ))

    def _validate_urls(self, config: Dict[str, Any]) -> None:
        for field_name in URL_FIELDS:
            value = config.get(field_name)
            if value is None or (isinstance(value, str) and value.strip() == ""):
                continue
            if not isinstance(value, str) or not value.strip().startswith(("http://", "https://")):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be a valid HTTP/HTTPS URL",
                    value=value
                ))

    def _validate_timeout(self, config: Dict[str, Any]) -> None:
        timeout = config.get("timeout")
        if timeout is None:
            return

        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout must be a positive integer (milliseconds)",
                value=timeout
            ))
        elif timeout < 1000:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout should be at least 1000ms for reliable operation",
                value=timeout
            ))
        elif timeout > 300000:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout should not exceed 300000ms (5 minutes)",
                value=timeout
            ))
