# appresync Configuration Schema
# Pydantic models for YAML configuration validation

from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ApiConfig(BaseModel):
    """GraphQL API settings."""

    endpoint: str = Field(default="https://api.inngest.com/gql", description="GraphQL endpoint URL")
    token: str | None = Field(default=None, description="Bearer token for the API")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    @field_validator("endpoint")
    @classmethod
    def check_endpoint(cls, v: str) -> str:
        """Require an http(s) endpoint."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must start with http:// or https://")
        return v


class EnvironmentConfig(BaseModel):
    """Environment the apps are registered in."""

    id: UUID | None = Field(default=None, description="Environment ID")
    slug: str = Field(default="production", description="Environment slug")


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")
    log_file: str | None = Field(default=None, description="Path to resync log file")

    @field_validator("log_file")
    @classmethod
    def expand_optional_paths(cls, v: str | None) -> str | None:
        """Expand ~ in optional paths."""
        if v is None:
            return None
        return str(Path(v).expanduser())


class AppresyncConfig(BaseModel):
    """Root configuration model for appresync."""

    api: ApiConfig = Field(default_factory=ApiConfig, description="API settings")
    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig, description="Environment settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
