"""
Database access for djuced-sync.

This package contains the SQL used against both libraries, their default
locations, and the reader/writer classes.
"""

from .djuced_library import DjucedLibrary
from .mik_library import MikLibrary
from .paths import djuced_db_path, mik_db_path
from .queries import *

__all__ = [
    "DjucedLibrary",
    "MikLibrary",
    "djuced_db_path",
    "mik_db_path",
    # Queries
    "GET_ANALYSED_SONGS",
    "GET_SONG_CUES",
    "COUNT_ANALYSED_SONGS",
    "DELETE_USER_CUES",
    "INSERT_CUE",
    "UPDATE_TRACK_ANALYSIS",
    "CHECK_TABLE_EXISTS",
]
