# appresync URL Override
# Resolves the URL submitted with a resync

from typing import Optional


class UrlOverride:
    """
    Effective URL resolution for a resync.

    The override buffer is seeded with the original URL. While overriding
    is disabled the original URL is used and edits to the buffer are kept
    for when overriding is switched back on.
    """

    def __init__(self, original_url: str, override_value: Optional[str] = None):
        """
        Initialize override state.

        Args:
            original_url: URL the app is currently served from.
            override_value: Optional initial buffer (defaults to original_url).
        """
        self.original_url = original_url
        self._buffer = original_url if override_value is None else override_value
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def value(self) -> str:
        """Current override buffer, whether or not it is in effect."""
        return self._buffer

    @property
    def read_only(self) -> bool:
        """The URL input only accepts edits while overriding."""
        return not self._enabled

    @property
    def effective_url(self) -> str:
        if self._enabled:
            return self._buffer
        return self.original_url

    def set_override_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def toggle(self) -> bool:
        """Flip overriding on or off and return the new state."""
        self._enabled = not self._enabled
        return self._enabled

    def set_override_value(self, text: str) -> None:
        self._buffer = text
