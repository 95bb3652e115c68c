"""
Default on-disk locations of the Mixed In Key and DJUCED databases.
"""

import sys
from pathlib import Path
from typing import Optional

from djuced_sync.core.exceptions import UnsupportedPlatform

MIK_DB_FILENAME = "Collection11.mikdb"
DJUCED_DB_RELATIVE = Path("DJUCED") / "DJUCED.db"


def mik_library_dir(platform: Optional[str] = None) -> Path:
    """Directory holding the Mixed In Key collection database."""
    platform = platform or sys.platform
    if platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "Mixedinkey"
    raise UnsupportedPlatform(platform)


def mik_db_path(
    configured: Optional[str] = None,
    filename: str = MIK_DB_FILENAME,
    platform: Optional[str] = None,
) -> Path:
    """
    Resolve the Mixed In Key database path.

    An explicitly configured path always wins; otherwise the platform default
    is used, which only exists on macOS.
    """
    if configured:
        return Path(configured).expanduser()
    return mik_library_dir(platform) / filename


def djuced_db_path(configured: Optional[str] = None) -> Path:
    """Resolve the DJUCED database path (Documents/DJUCED/DJUCED.db by default)."""
    if configured:
        return Path(configured).expanduser()
    return Path.home() / "Documents" / DJUCED_DB_RELATIVE
