# appresync Failure Display
# Render coded resync failures

import json
from typing import Any

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from appresync.sync.models import UNKNOWN_ERROR_CODE, CodedError

# Titles for codes the API is known to return
FAILURE_TITLES: dict[str, str] = {
    UNKNOWN_ERROR_CODE: "Something went wrong",
    "invalid_url": "Invalid URL",
    "forbidden": "Permission denied",
    "mismatched_app_id": "App ID does not match",
}

GENERIC_DETAIL = "The sync could not be completed. Check your network connection and try again."


def failure_title(error: CodedError) -> str:
    """Human-readable title for a failure code."""
    return FAILURE_TITLES.get(error.code, error.code.replace("_", " ").capitalize())


def _format_data(data: Any) -> str:
    if isinstance(data, str):
        return data
    try:
        return json.dumps(data, indent=2, sort_keys=True, default=str)
    except (TypeError, ValueError):
        return repr(data)


def render_failure(error: CodedError) -> Panel:
    """
    Build a panel describing a failed resync.

    Args:
        error: The coded error.

    Returns:
        Rich Panel with code, message and data.
    """
    parts: list = []

    header = Text()
    header.append(failure_title(error), style="bold red")
    header.append(f"  ({error.code})", style="dim")
    parts.append(header)

    if error.message:
        parts.append(Text(error.message))
    elif error.code == UNKNOWN_ERROR_CODE:
        parts.append(Text(GENERIC_DETAIL, style="dim"))

    if error.data is not None:
        parts.append(Text())
        parts.append(Text(_format_data(error.data), style="dim"))

    return Panel(Group(*parts), title="Sync failed", border_style="red")
