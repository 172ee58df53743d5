# appresync Output Module
# Rich console output, failure display and notifications

from appresync.output.console import Console, create_console
from appresync.output.failure import FAILURE_TITLES, failure_title, render_failure
from appresync.output.notify import Notifier

__all__ = [
    "Console",
    "create_console",
    "render_failure",
    "failure_title",
    "FAILURE_TITLES",
    "Notifier",
]
