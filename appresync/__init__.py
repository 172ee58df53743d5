"""appresync - Resync apps with the platform.

A controller for user-confirmed app resyncs: resolves the URL to sync
from, sends a single resync request and reports coded failures.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ResyncController",
    "ResyncModal",
    "UrlOverride",
    "CodedError",
    "Environment",
    "GraphQLResyncClient",
    "TaggedCache",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("ResyncController", "ResyncModal", "UrlOverride", "CodedError", "Environment"):
        from appresync import sync

        return getattr(sync, name)
    if name in ("GraphQLResyncClient", "TaggedCache"):
        from appresync import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
