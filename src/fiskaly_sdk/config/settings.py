"""
fiskaly SDK Settings
Type-safe settings for bootstrapping a client
"""

from pydantic import BaseModel, Field, field_validator


DEFAULT_BASE_URL = "https://kassensichv.io/api/v1"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = DEFAULT_BASE_URL
    TIMEOUT = 30000


# Environment variable mapping
ENV_VAR_MAPPING = {
    "FISKALY_SERVICE_URL": "fiskaly_service",
    "FISKALY_API_KEY": "api_key",
    "FISKALY_API_SECRET": "api_secret",
    "FISKALY_BASE_URL": "base_url",
    "FISKALY_TIMEOUT": "timeout",
}


def _validate_url(field_name: str, v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError(f"{field_name} must be a valid HTTP/HTTPS URL")
    return v


class FiskalySettings(BaseModel):
    """
    Settings for creating a client using credentials
    """

    fiskaly_service: str = Field(
        ...,
        description="URL of the fiskaly service",
        min_length=1
    )
    api_key: str = Field(
        ...,
        description="API key",
        min_length=1
    )
    api_secret: str = Field(
        ...,
        description="API secret",
        min_length=1
    )
    base_url: str = Field(
        default=ConfigDefaults.BASE_URL,
        description="Base URL of the API behind the fiskaly service"
    )
    timeout: int = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Transport timeout in milliseconds",
        ge=1000,
        le=300000
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @field_validator("fiskaly_service")
    @classmethod
    def validate_fiskaly_service(cls, v: str) -> str:
        return _validate_url("fiskaly_service", v)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _validate_url("base_url", v)

    def __repr__(self) -> str:
        return (
            f"FiskalySettings(fiskaly_service={self.fiskaly_service!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout}, "
            "api_key='[REDACTED]', api_secret='[REDACTED]')"
        )

    __str__ = __repr__
