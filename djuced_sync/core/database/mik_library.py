#!/usr/bin/env python3
"""
Read-only access to the Mixed In Key collection database.
"""

import sqlite3
from pathlib import Path
from typing import Iterator, List, Optional, Union

from loguru import logger

from djuced_sync.core.database.queries import (
    COUNT_ANALYSED_SONGS,
    GET_ANALYSED_SONGS,
    GET_SONG_CUES,
)
from djuced_sync.core.exceptions import ConnectionFailure, StoreError
from djuced_sync.core.models import HotCue, SourceRow


class MikLibrary:
    """Reads analysed songs and their cue points from Mixed In Key."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path)
        self.conn: Optional[sqlite3.Connection] = None

    def open(self) -> "MikLibrary":
        """Open the database read-only. Raises ConnectionFailure."""
        if not self.db_path.is_file():
            raise ConnectionFailure(
                f"Mixed In Key database not found at {self.db_path}",
                str(self.db_path),
            )
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        try:
            self.conn = sqlite3.connect(uri, uri=True)
            self.conn.row_factory = sqlite3.Row
            # Touch the schema so a non-database file fails here, not mid-run
            self.conn.execute(COUNT_ANALYSED_SONGS).fetchone()
        except sqlite3.Error as e:
            self.close()
            raise ConnectionFailure(
                f"failed to open Mixed In Key database {self.db_path}",
                str(self.db_path),
            ) from e
        logger.info(f"📂 Opened Mixed In Key database: {self.db_path}")
        return self

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> "MikLibrary":
        return self.open()

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self.conn is None:
            raise ConnectionFailure("Mixed In Key database is not open")
        return self.conn

    def count_songs(self) -> int:
        try:
            row = self._connection().execute(COUNT_ANALYSED_SONGS).fetchone()
        except sqlite3.Error as e:
            raise StoreError("failed to count Mixed In Key songs") from e
        return int(row[0]) if row else 0

    def get_song_cues(self, song_id: int) -> List[HotCue]:
        """
        Get the hot cues stored for a song, in database order.

        Cue points without a time cannot be placed and are dropped.
        """
        try:
            rows = self._connection().execute(GET_SONG_CUES, (song_id,)).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"failed to read cues for song {song_id}") from e

        cues = []
        for row in rows:
            if row["ZTIME"] is None:
                logger.warning(f"⚠️  Skipping cue without a time for song {song_id}")
                continue
            cues.append(HotCue(time=float(row["ZTIME"]), name=row["ZNAME"]))
        return cues

    def iter_songs(self) -> Iterator[SourceRow]:
        """
        Yield every song in the collection as a raw SourceRow.

        Rows are yielded in database order; cues are read per song.
        """
        try:
            cursor = self._connection().execute(GET_ANALYSED_SONGS)
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise StoreError("failed to read Mixed In Key songs") from e

        for row in rows:
            song_id = int(row["Z_PK"])
            yield SourceRow(
                source_id=song_id,
                file_size=int(row["ZFILESIZE"] or 0),
                energy=float(row["ZENERGY"] or 0.0),
                tempo=float(row["ZTEMPO"] or 0.0),
                key=row["ZKEY"] or "",
                artist=row["ZARTIST"] or "",
                title=row["ZNAME"] or "",
                bookmark_data=bytes(row["ZBOOKMARKDATA"] or b""),
                hot_cues=tuple(self.get_song_cues(song_id)),
            )
