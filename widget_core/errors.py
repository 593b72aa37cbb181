"""
Storage error taxonomy for shared-container reads.

These never leave the resolvers: every lookup catches them and falls back.
"""


class WidgetStorageError(Exception):
    """Base class for shared storage failures."""


class StorageUnavailable(WidgetStorageError):
    """The app group container cannot be opened."""


class NotFound(WidgetStorageError):
    """No file or preference exists at the requested location."""


class DecodeFailure(WidgetStorageError):
    """Stored content exists but is not valid JSON for the expected shape."""
