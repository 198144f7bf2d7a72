"""Request proxy models"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator


class RequestDescriptor(BaseModel):
    """
    HTTP-shaped request forwarded through the ``request`` RPC

    ``method`` and ``path`` are always sent. ``query``, ``headers``, ``body``
    and ``destination_file`` are left out of the envelope entirely when empty.
    """

    method: str = Field(default="GET", description="HTTP method", min_length=1)
    path: str = Field(default="/", description="Path relative to the base URL", min_length=1)
    query: Optional[Dict[str, Any]] = Field(default=None, description="Query parameters")
    headers: Optional[Dict[str, Any]] = Field(default=None, description="Request headers")
    body: Optional[str] = Field(default=None, description="Base64 encoded JSON body")
    destination_file: Optional[str] = Field(
        default=None, description="Store the response body in this file"
    )

    @field_validator("query", "headers", "body", "destination_file", mode="before")
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """Treat empty values as absent"""
        if not v:
            return None
        return v

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class RequestResponse(BaseModel):
    """Result of a proxied request together with the rotated context"""

    response: Dict[str, Any] = Field(default_factory=dict, description="Raw response payload")
    context: str = Field(..., description="Context after the call")

    model_config = {
        "frozen": True,
    }

    @property
    def status(self) -> Optional[int]:
        return self.response.get("status")

    @property
    def headers(self) -> Dict[str, Any]:
        return self.response.get("header") or self.response.get("headers") or {}

    @property
    def body(self) -> Optional[str]:
        """Response body, still base64 encoded"""
        return self.response.get("body")
