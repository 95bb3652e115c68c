#!/usr/bin/env python3
"""
Sync orchestration: Mixed In Key rows in, DJUCED updates out.

Each source row is decoded, normalized and written on its own. A bad key or
an undecodable bookmark only skips that track; connection and write errors
propagate and end the run.
"""

from typing import Callable, Iterable, List, Optional, Protocol, Sequence

from loguru import logger

from djuced_sync.core import key_codec
from djuced_sync.core.bookmark import BookmarkDecoder
from djuced_sync.core.config import DEFAULT_COMMENT_FORMAT, DEFAULT_CUE_NAME_FORMAT
from djuced_sync.core.exceptions import EmptyBookmark, InvalidKey
from djuced_sync.core.models import (
    AnalyzedTrack,
    CueRow,
    SourceRow,
    SyncResult,
    SyncSummary,
    TrackUpdate,
)
from djuced_sync.core.tempo import ROUND_THRESHOLD, normalize_tempo


class TrackSource(Protocol):
    """Anything that yields raw source rows (MikLibrary in production)."""

    def iter_songs(self) -> Iterable[SourceRow]: ...


class TrackSink(Protocol):
    """Anything that applies a track update and cue set (DjucedLibrary)."""

    def apply(self, update: TrackUpdate, cues: Sequence[CueRow]) -> bool: ...


def format_energy(energy: float) -> str:
    """Format an energy level the way it appears in comments (7.0 -> "7")."""
    energy = float(energy)
    if energy.is_integer():
        return str(int(energy))
    return repr(energy)


def build_comment(
    key: str, energy: float, comment_format: str = DEFAULT_COMMENT_FORMAT
) -> str:
    return comment_format.format(key=key, energy=format_energy(energy))


def build_cue_rows(
    track: AnalyzedTrack, name_format: str = DEFAULT_CUE_NAME_FORMAT
) -> List[CueRow]:
    """
    Build DJUCED cue rows from a track's hot cues.

    Cues are ordered by time. The zero-based position in that order is used
    as the name suffix, the cue number and the colour index, which is how
    DJUCED numbers its own cues.
    """
    return [
        CueRow(
            name=name_format.format(index=index),
            number=index,
            position=cue.time,
            color=index,
        )
        for index, cue in enumerate(track.sorted_cues())
    ]


class SyncOrchestrator:
    """Moves analysis results from a track source into a track sink."""

    def __init__(
        self,
        source: TrackSource,
        sink: TrackSink,
        decoder: Optional[BookmarkDecoder] = None,
        tempo_threshold: float = ROUND_THRESHOLD,
        comment_format: str = DEFAULT_COMMENT_FORMAT,
        cue_name_format: str = DEFAULT_CUE_NAME_FORMAT,
    ):
        self.source = source
        self.sink = sink
        self.decoder = decoder or BookmarkDecoder()
        self.tempo_threshold = tempo_threshold
        self.comment_format = comment_format
        self.cue_name_format = cue_name_format

    def prepare_track(self, row: SourceRow) -> AnalyzedTrack:
        """
        Turn a raw source row into an AnalyzedTrack.

        Raises:
            EmptyBookmark: if no path can be recovered from the bookmark data
        """
        return AnalyzedTrack(
            source_id=row.source_id,
            file_size=row.file_size,
            energy=row.energy,
            tempo=normalize_tempo(row.tempo, self.tempo_threshold),
            key=row.key,
            artist=row.artist,
            title=row.title,
            path=self.decoder.extract_path(row.bookmark_data),
            hot_cues=tuple(row.hot_cues),
        )

    def build_update(self, track: AnalyzedTrack) -> TrackUpdate:
        """
        Build the DJUCED metadata update for a track.

        Raises:
            InvalidKey: if the track's key is not a Camelot label
        """
        return TrackUpdate(
            path=track.path,
            artist=track.artist,
            title=track.title,
            bpm=track.tempo,
            key_code=key_codec.encode(track.key),
            comment=build_comment(track.key, track.energy, self.comment_format),
        )

    def sync_row(self, row: SourceRow) -> SyncResult:
        """Sync a single source row, returning a skip result on per-track errors."""
        try:
            track = self.prepare_track(row)
        except EmptyBookmark as e:
            logger.warning(f"⚠️  Skipping song {row.source_id}: {e}")
            return SyncResult.skipped(row.source_id, str(e))

        try:
            update = self.build_update(track)
        except InvalidKey as e:
            logger.warning(f"⚠️  Skipping {track.path}: {e}")
            return SyncResult.skipped(row.source_id, str(e), path=track.path)

        cues = build_cue_rows(track, self.cue_name_format)
        logger.debug(f"Updating {track.path} ({len(cues)} cues)")
        matched = self.sink.apply(update, cues)
        return SyncResult.synced(track, len(cues), matched=matched)

    def run(
        self,
        on_result: Optional[Callable[[SyncResult], None]] = None,
        dry_run: bool = False,
    ) -> SyncSummary:
        """
        Sync every row from the source in read order.

        Args:
            on_result: Optional callback invoked after each row (progress display)
            dry_run: Recorded on the summary; the sink decides whether to commit

        Returns:
            SyncSummary with one result per source row
        """
        summary = SyncSummary(dry_run=dry_run)
        for row in self.source.iter_songs():
            result = self.sync_row(row)
            summary.add(result)
            if on_result is not None:
                on_result(result)

        counts = summary.to_dict()
        logger.info(
            f"✅ Sync complete: {counts['synced']} synced, "
            f"{counts['skipped']} skipped, {counts['cues_written']} cues written"
        )
        return summary
