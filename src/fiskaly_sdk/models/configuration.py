"""Client configuration models"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ClientConfiguration(BaseModel):
    """Configuration snapshot reported by the fiskaly service"""

    debug_level: int = Field(..., description="Debug level of the client")
    debug_file: str = Field(..., description="Path of the client debug log")
    client_timeout: int = Field(..., description="Client timeout in milliseconds")
    smaers_timeout: int = Field(..., description="SMAERS timeout in milliseconds")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class ConfigParams(BaseModel):
    """
    Parameters for reconfiguring the fiskaly service

    Every field is optional; only the ones that are set are sent.
    """

    debug_level: Optional[int] = Field(
        default=None,
        description="-1 (disabled) up to 4 (most verbose)",
        ge=-1,
        le=4,
    )
    debug_file: Optional[str] = Field(default=None, description="Path of the debug log")
    client_timeout: Optional[int] = Field(
        default=None, description="Client timeout in milliseconds", gt=0
    )
    smaers_timeout: Optional[int] = Field(
        default=None, description="SMAERS timeout in milliseconds", gt=0
    )

    model_config = {
        "extra": "forbid",
    }

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
