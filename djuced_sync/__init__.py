#!/usr/bin/env python3
"""
djuced-sync - Mixed In Key to DJUCED metadata sync

Copies tempo, key, energy and hot cues analysed by Mixed In Key into the
DJUCED track database.
"""

__version__ = "0.1.0"

from .core.bookmark import BookmarkDecoder
from .core.sync import SyncOrchestrator

__all__ = [
    "BookmarkDecoder",
    "SyncOrchestrator",
]
