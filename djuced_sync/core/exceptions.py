"""
Error types raised while syncing Mixed In Key analysis into DJUCED.

Connection errors are fatal for a run. Key and bookmark errors only affect
the track they belong to, and malformed records only affect a single record
inside a bookmark blob.
"""

from typing import Optional


class SyncError(Exception):
    """Base class for all djuced-sync errors."""


class ConnectionFailure(SyncError):
    """A backing database could not be located or opened."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class UnsupportedPlatform(ConnectionFailure):
    """The Mixed In Key library location is unknown on this platform."""

    def __init__(self, platform: str):
        super().__init__(f"unsupported platform {platform}")
        self.platform = platform


class StoreError(SyncError):
    """A statement against an open database failed."""


class InvalidKey(SyncError):
    """A key label (or code) outside the 24-entry Camelot table."""

    def __init__(self, key: object):
        super().__init__(f"invalid camelot key {key!r}")
        self.key = key


class EmptyBookmark(SyncError):
    """No decodable record was found in a bookmark blob."""

    def __init__(self, message: str = "bookmark data is empty"):
        super().__init__(message)


class MalformedRecord(SyncError):
    """A record whose declared length runs past the end of the blob."""

    def __init__(self, offset: int, length: int, available: int):
        super().__init__(
            f"record at offset {offset} declares {length} bytes "
            f"but only {available} remain"
        )
        self.offset = offset
        self.length = length
        self.available = available
