# appresync Resync Modal
# Open/close lifecycle around a resync controller

from typing import TYPE_CHECKING, Optional, Union

from appresync.sync.controller import ResyncController
from appresync.sync.models import AppMethod, Environment, ResyncOutcome
from appresync.sync.view import ModalView, build_view

if TYPE_CHECKING:
    from appresync.client.base import ResyncOperation
    from appresync.output.notify import Notifier


class ResyncModal:
    """
    Host for the resync controller.

    Every open() starts from a fresh controller seeded with the app's
    current URL; close() disposes it so that a resync still in flight
    cannot change what the user sees.
    """

    def __init__(
        self,
        app_external_id: str,
        url: str,
        environment: Environment,
        operation: "ResyncOperation",
        *,
        notifier: Optional["Notifier"] = None,
        app_method: Union[AppMethod, str, None] = None,
        platform: Optional[str] = None,
    ):
        self.app_external_id = app_external_id
        self.url = url
        self.environment = environment
        self.app_method = app_method
        self.platform = platform
        self._operation = operation
        self._notifier = notifier
        self._controller: Optional[ResyncController] = None

    @property
    def is_open(self) -> bool:
        return self._controller is not None

    @property
    def controller(self) -> ResyncController:
        if self._controller is None:
            raise RuntimeError("Resync modal is not open")
        return self._controller

    def open(self) -> ResyncController:
        """Open the modal with fresh state."""
        if self._controller is not None:
            self._controller.dispose()

        self._controller = ResyncController(
            self.app_external_id,
            self.url,
            self.environment,
            self._operation,
            notifier=self._notifier,
            on_close=self.close,
            app_method=self.app_method,
            platform=self.platform,
        )
        return self._controller

    def close(self) -> None:
        """Close the modal, discarding its state."""
        if self._controller is not None:
            self._controller.dispose()
            self._controller = None

    def view(self) -> ModalView:
        return build_view(self.controller)

    async def confirm(self) -> Optional[ResyncOutcome]:
        """Confirm action of the modal."""
        return await self.controller.trigger_resync()
