"""Version model"""

from pydantic import BaseModel, Field


class VersionInfo(BaseModel):
    """Version information of the fiskaly client and SMAERS"""

    client_version: str = Field(..., description="Version of the fiskaly client")
    client_source_hash: str = Field(..., description="Source hash of the fiskaly client")
    client_commit_hash: str = Field(..., description="Commit hash of the fiskaly client")
    smaers_version: str = Field(..., description="Version of SMAERS")

    model_config = {
        "frozen": True,
    }

    def __str__(self) -> str:
        return f"client {self.client_version} ({self.client_commit_hash}), SMAERS {self.smaers_version}"
