#!/usr/bin/env python3
"""
Tests for default database locations.
"""

import unittest
from pathlib import Path
from unittest.mock import patch

from djuced_sync.core.database.paths import djuced_db_path, mik_db_path
from djuced_sync.core.exceptions import ConnectionFailure, UnsupportedPlatform


class TestPaths(unittest.TestCase):
    def test_mik_default_on_macos(self) -> None:
        with patch("djuced_sync.core.database.paths.Path.home", return_value=Path("/Users/dj")):
            path = mik_db_path(platform="darwin")
        self.assertEqual(
            path,
            Path("/Users/dj/Library/Application Support/Mixedinkey/Collection11.mikdb"),
        )

    def test_mik_custom_filename(self) -> None:
        path = mik_db_path(filename="Collection12.mikdb", platform="darwin")
        self.assertEqual(path.name, "Collection12.mikdb")

    def test_mik_unsupported_platform(self) -> None:
        with self.assertRaises(UnsupportedPlatform) as ctx:
            mik_db_path(platform="linux")
        self.assertEqual(ctx.exception.platform, "linux")
        self.assertIsInstance(ctx.exception, ConnectionFailure)

    def test_mik_configured_path_wins(self) -> None:
        self.assertEqual(
            mik_db_path("/data/mik.mikdb", platform="linux"), Path("/data/mik.mikdb")
        )

    def test_djuced_default(self) -> None:
        with patch("djuced_sync.core.database.paths.Path.home", return_value=Path("/home/dj")):
            self.assertEqual(
                djuced_db_path(), Path("/home/dj/Documents/DJUCED/DJUCED.db")
            )

    def test_djuced_configured(self) -> None:
        self.assertEqual(djuced_db_path("/tmp/DJUCED.db"), Path("/tmp/DJUCED.db"))


if __name__ == "__main__":
    unittest.main()
