# appresync Notifications
# Fire-and-forget success notifications

from typing import Protocol


class Notifier(Protocol):
    """Notification side-channel, e.g. appresync.logger.ResyncLogger."""

    def success(self, message: str) -> None: ...
