"""
Core functionality for djuced-sync
"""

from .bookmark import BookmarkDecoder, decode_records, extract_path
from .key_codec import decode, encode
from .sync import SyncOrchestrator
from .tempo import normalize_tempo

__all__ = [
    "BookmarkDecoder",
    "SyncOrchestrator",
    "decode",
    "decode_records",
    "encode",
    "extract_path",
    "normalize_tempo",
]
