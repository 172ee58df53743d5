# appresync Resync Controller
# Drives a single user-confirmed resync and tracks its state

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from appresync.sync.models import (
    FUNCTION_LISTING_TAG,
    UNKNOWN_ERROR_CODE,
    AppMethod,
    ApplicationError,
    CodedError,
    Environment,
    ResyncOutcome,
    ResyncRequest,
    Success,
    TransportFailure,
)
from appresync.sync.override import UrlOverride

if TYPE_CHECKING:
    from appresync.client.base import ResyncOperation
    from appresync.output.notify import Notifier

SUCCESS_MESSAGE = "Synced app"


@dataclass(frozen=True)
class ControllerState:
    """Snapshot of the controller state."""

    effective_url: str
    is_overridden: bool
    last_failure: Optional[CodedError]
    is_syncing: bool


class ResyncController:
    """
    Resync controller for one open modal.

    Holds the URL override, the in-flight flag and the last failure.
    A new controller is created each time the modal opens and disposed
    when it closes.
    """

    def __init__(
        self,
        app_external_id: str,
        url: str,
        environment: Environment,
        operation: "ResyncOperation",
        *,
        notifier: Optional["Notifier"] = None,
        on_close: Optional[Callable[[], None]] = None,
        app_method: Union[AppMethod, str, None] = None,
        platform: Optional[str] = None,
    ):
        """
        Initialize controller.

        Args:
            app_external_id: External identifier of the app.
            url: URL the app is currently served from.
            environment: Environment the app belongs to.
            operation: Remote resync operation.
            notifier: Optional success notification channel.
            on_close: Optional callback invoked after a successful resync.
            app_method: Connection method of the app (serve or connect).
            platform: Hosting platform name, if known (e.g. "vercel").
        """
        self.app_external_id = app_external_id
        self.environment = environment
        self.override = UrlOverride(url)
        self.app_method = app_method if isinstance(app_method, AppMethod) else AppMethod.parse(app_method)
        self.platform = platform
        self._operation = operation
        self._notifier = notifier
        self._on_close = on_close
        self._last_failure: Optional[CodedError] = None
        self._is_syncing = False
        self._disposed = False

    @property
    def effective_url(self) -> str:
        return self.override.effective_url

    @property
    def is_overridden(self) -> bool:
        return self.override.enabled

    @property
    def is_syncing(self) -> bool:
        return self._is_syncing

    @property
    def last_failure(self) -> Optional[CodedError]:
        return self._last_failure

    @property
    def is_migration(self) -> bool:
        """Connect apps can only be migrated to serve with an explicit URL."""
        return self.app_method == AppMethod.CONNECT

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def can_submit(self) -> bool:
        if self._is_syncing:
            return False
        return self.is_overridden or not self.is_migration

    @property
    def state(self) -> ControllerState:
        return ControllerState(
            effective_url=self.effective_url,
            is_overridden=self.is_overridden,
            last_failure=self._last_failure,
            is_syncing=self._is_syncing,
        )

    def set_override_enabled(self, enabled: bool) -> None:
        self.override.set_override_enabled(enabled)

    def set_override_value(self, text: str) -> None:
        self.override.set_override_value(text)

    def toggle_override(self) -> bool:
        return self.override.toggle()

    def dispose(self) -> None:
        """Detach from the host; later results no longer notify or close."""
        self._disposed = True

    def build_request(self) -> ResyncRequest:
        # An app without a known URL and no override sends no URL at all;
        # an explicitly entered override is forwarded as-is, even if empty.
        app_url: Optional[str] = self.effective_url
        if not self.is_overridden and not app_url:
            app_url = None

        return ResyncRequest(
            app_external_id=self.app_external_id,
            app_url=app_url,
            env_id=self.environment.id,
        )

    async def trigger_resync(self) -> Optional[ResyncOutcome]:
        """
        Issue the resync and record its outcome.

        Returns:
            The outcome, or None if submission is not currently allowed
            (already syncing, or a migration without an override URL).
        """
        if not self.can_submit:
            return None

        self._is_syncing = True
        try:
            outcome = await self._invoke(self.build_request())

            if isinstance(outcome, Success):
                self._last_failure = None
                if not self._disposed:
                    if self._notifier is not None:
                        self._notifier.success(SUCCESS_MESSAGE)
                    if self._on_close is not None:
                        self._on_close()
            else:
                self._last_failure = outcome.error

            return outcome
        finally:
            self._is_syncing = False

    async def _invoke(self, request: ResyncRequest) -> ResyncOutcome:
        """Run the operation and classify its result."""
        try:
            response = await self._operation(request, invalidate_tags=(FUNCTION_LISTING_TAG,))
        except Exception as e:
            return TransportFailure(error=CodedError(code=UNKNOWN_ERROR_CODE), cause=str(e) or type(e).__name__)

        if response is None:
            return TransportFailure(cause="No API response data")

        if response.error is not None:
            return ApplicationError(error=response.error)

        if response.app is None:
            return TransportFailure(cause="Response has neither app nor error")

        return Success(app_id=response.app.id)
