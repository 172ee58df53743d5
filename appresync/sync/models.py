# appresync Sync Models
# Request, response and outcome types for the resync operation

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

UNKNOWN_ERROR_CODE = "unknown"

# Cache tag for the function listing of an app
FUNCTION_LISTING_TAG = "Workflow"


class AppMethod(str, Enum):
    """How an app is connected to the platform."""

    SERVE = "serve"  # Pull-based HTTP
    CONNECT = "connect"  # Persistent/streaming

    @classmethod
    def parse(cls, value: Optional[str]) -> "AppMethod":
        """Parse a method name, falling back to SERVE for unknown values."""
        if value is None:
            return cls.SERVE
        try:
            return cls(value.lower())
        except ValueError:
            return cls.SERVE


class OutcomeKind(str, Enum):
    """Discriminator for resync outcomes."""

    SUCCESS = "success"
    APPLICATION_ERROR = "application_error"
    TRANSPORT_FAILURE = "transport_failure"


class CodedError(BaseModel):
    """Structured error reported by the resync operation."""

    model_config = ConfigDict(frozen=True)

    code: str
    data: Any = None
    message: Optional[str] = None


class AppRef(BaseModel):
    """Reference to the synced app."""

    id: str


class ResyncResponse(BaseModel):
    """Logical response body of the resync mutation."""

    app: Optional[AppRef] = None
    error: Optional[CodedError] = None


@dataclass(frozen=True)
class ResyncRequest:
    """Value passed to the remote resync operation."""

    app_external_id: str
    app_url: Optional[str]
    env_id: UUID

    def to_variables(self) -> dict[str, Any]:
        """Convert to mutation variables."""
        return {
            "appExternalID": self.app_external_id,
            "appURL": self.app_url,
            "envID": str(self.env_id),
        }


@dataclass(frozen=True)
class Success:
    """The remote side accepted the resync."""

    app_id: str

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.SUCCESS


@dataclass(frozen=True)
class ApplicationError:
    """The remote side understood the request but rejected it."""

    error: CodedError

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.APPLICATION_ERROR


@dataclass(frozen=True)
class TransportFailure:
    """The request could not complete or returned an unusable shape."""

    error: CodedError = field(default_factory=lambda: CodedError(code=UNKNOWN_ERROR_CODE))
    cause: Optional[str] = None

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.TRANSPORT_FAILURE


ResyncOutcome = Union[Success, ApplicationError, TransportFailure]


@dataclass(frozen=True)
class Environment:
    """Environment the app is registered in."""

    id: UUID
    slug: str = "production"
