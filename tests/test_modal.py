# appresync Modal Tests
# Tests for the modal open/close lifecycle

import pytest

from conftest import ORIGINAL_URL, FakeOperation, RecordingNotifier
from appresync.sync.modal import ResyncModal
from appresync.sync.models import AppRef, CodedError, ResyncResponse


def _modal(environment, operation, notifier=None, **kwargs) -> ResyncModal:
    return ResyncModal("my-app", ORIGINAL_URL, environment, operation, notifier=notifier, **kwargs)


class TestLifecycle:
    """Tests for open and close."""

    def test_closed_by_default(self, environment):
        modal = _modal(environment, FakeOperation())
        assert modal.is_open is False
        with pytest.raises(RuntimeError):
            modal.view()

    def test_open_seeds_from_url(self, environment):
        modal = _modal(environment, FakeOperation())
        controller = modal.open()
        assert modal.is_open is True
        assert controller.effective_url == ORIGINAL_URL
        assert modal.view().input_value == ORIGINAL_URL

    def test_reopen_resets_state(self, environment):
        modal = _modal(environment, FakeOperation())
        first = modal.open()
        first.set_override_enabled(True)
        first.set_override_value("https://b.com/x")
        modal.close()

        second = modal.open()
        assert second is not first
        assert first.is_disposed is True
        assert second.is_overridden is False
        assert second.override.value == ORIGINAL_URL

    def test_close_is_idempotent(self, environment):
        modal = _modal(environment, FakeOperation())
        modal.close()
        modal.open()
        modal.close()
        modal.close()
        assert modal.is_open is False


class TestConfirm:
    """Tests for the confirm action."""

    @pytest.mark.anyio
    async def test_success_closes_modal(self, environment):
        notifier = RecordingNotifier()
        modal = _modal(environment, FakeOperation(ResyncResponse(app=AppRef(id="1"))), notifier)
        modal.open()

        await modal.confirm()

        assert modal.is_open is False
        assert notifier.messages == ["Synced app"]

    @pytest.mark.anyio
    async def test_failure_keeps_modal_open(self, environment):
        error = CodedError(code="invalid_url")
        modal = _modal(environment, FakeOperation(ResyncResponse(error=error)))
        modal.open()

        await modal.confirm()

        assert modal.is_open is True
        assert modal.view().failure == error

    @pytest.mark.anyio
    async def test_failure_cleared_on_reopen(self, environment):
        modal = _modal(environment, FakeOperation(exc=OSError("down")))
        modal.open()
        await modal.confirm()
        assert modal.view().failure is not None

        modal.close()
        modal.open()
        assert modal.view().failure is None
