#!/usr/bin/env python3
"""
Write access to the DJUCED track database.
"""

import sqlite3
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from djuced_sync.core.config import DEFAULT_SYSTEM_CUE_THRESHOLD, SYSTEM_CUE_START
from djuced_sync.core.database.queries import (
    CHECK_TABLE_EXISTS,
    DELETE_USER_CUES,
    INSERT_CUE,
    UPDATE_TRACK_ANALYSIS,
)
from djuced_sync.core.exceptions import ConnectionFailure, StoreError
from djuced_sync.core.models import CueRow, TrackUpdate

REQUIRED_TABLES = ("tracks", "trackCues")


class DjucedLibrary:
    """
    Applies track metadata updates and cue replacements to DJUCED.

    Each track is written in its own transaction. With ``dry_run`` the
    statements still run, so constraint errors surface, but every
    transaction is rolled back.
    """

    def __init__(
        self,
        db_path: Union[str, Path],
        dry_run: bool = False,
        system_cue_threshold: int = DEFAULT_SYSTEM_CUE_THRESHOLD,
    ):
        if system_cue_threshold > SYSTEM_CUE_START:
            raise ValueError(
                f"system_cue_threshold must be at most {SYSTEM_CUE_START}, "
                f"got {system_cue_threshold}"
            )
        self.db_path = Path(db_path)
        self.dry_run = dry_run
        self.system_cue_threshold = system_cue_threshold
        self.conn: Optional[sqlite3.Connection] = None

    def open(self) -> "DjucedLibrary":
        """Open the database read-write. Raises ConnectionFailure."""
        if not self.db_path.is_file():
            raise ConnectionFailure(
                f"DJUCED database not found at {self.db_path}", str(self.db_path)
            )
        uri = f"{self.db_path.resolve().as_uri()}?mode=rw"
        try:
            self.conn = sqlite3.connect(uri, uri=True)
            self._check_tables()
        except sqlite3.Error as e:
            self.close()
            raise ConnectionFailure(
                f"failed to open DJUCED database {self.db_path}", str(self.db_path)
            ) from e
        logger.info(f"📂 Opened DJUCED database: {self.db_path}")
        return self

    def _check_tables(self) -> None:
        conn = self._connection()
        for table in REQUIRED_TABLES:
            if conn.execute(CHECK_TABLE_EXISTS, (table,)).fetchone() is None:
                raise sqlite3.OperationalError(f"missing table {table}")

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> "DjucedLibrary":
        return self.open()

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self.conn is None:
            raise ConnectionFailure("DJUCED database is not open")
        return self.conn

    def update_track(self, update: TrackUpdate) -> int:
        """Update a track's analysis fields. Returns the number of rows matched."""
        cursor = self._connection().execute(
            UPDATE_TRACK_ANALYSIS,
            (
                update.artist,
                update.title,
                update.bpm,
                update.key_code,
                update.comment,
                update.path,
            ),
        )
        return cursor.rowcount

    def replace_cues(self, track_path: str, cues: Sequence[CueRow]) -> None:
        """Delete the track's user cues and insert the given ones."""
        conn = self._connection()
        conn.execute(DELETE_USER_CUES, (track_path, self.system_cue_threshold))
        for cue in cues:
            conn.execute(
                INSERT_CUE,
                (track_path, cue.name, cue.number, cue.position, cue.color),
            )

    def apply(self, update: TrackUpdate, cues: Sequence[CueRow]) -> bool:
        """
        Write a track's metadata and cues in one transaction.

        Returns:
            True if a DJUCED track row matched the path

        Raises:
            StoreError: if any statement fails
        """
        conn = self._connection()
        try:
            matched = self.update_track(update)
            self.replace_cues(update.path, cues)
            if self.dry_run:
                conn.rollback()
            else:
                conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"failed to write track {update.path}") from e

        if not matched:
            logger.warning(f"⚠️  No DJUCED track matches path: {update.path}")
        return matched > 0
