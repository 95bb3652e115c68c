#!/usr/bin/env python3
"""
Data models for djuced-sync.

This module contains the dataclasses passed between the source reader,
the orchestrator and the destination writer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

SYNCED = "synced"
SKIPPED = "skipped"


@dataclass(frozen=True)
class HotCue:
    """A hot cue as stored by Mixed In Key."""

    time: float  # seconds
    name: Optional[str] = None


@dataclass(frozen=True)
class SourceRow:
    """One raw ZSONG row, before bookmark decoding and tempo rounding."""

    source_id: int
    file_size: int
    energy: float
    tempo: float
    key: str
    artist: str
    title: str
    bookmark_data: bytes
    hot_cues: Tuple[HotCue, ...] = ()


@dataclass(frozen=True)
class AnalyzedTrack:
    """A fully decoded and normalized track, ready to be written."""

    source_id: int
    file_size: int
    energy: float
    tempo: float
    key: str
    artist: str
    title: str
    path: str
    hot_cues: Tuple[HotCue, ...] = ()

    def sorted_cues(self) -> List[HotCue]:
        """Hot cues in ascending time order."""
        return sorted(self.hot_cues, key=lambda cue: cue.time)


@dataclass(frozen=True)
class TrackUpdate:
    """Metadata update for one row of the DJUCED tracks table."""

    path: str
    artist: str
    title: str
    bpm: float
    key_code: int
    comment: str


@dataclass(frozen=True)
class CueRow:
    """One row for the DJUCED trackCues table."""

    name: str
    number: int
    position: float
    color: int


@dataclass
class SyncResult:
    """Outcome of syncing a single source row."""

    status: str
    source_id: int
    path: Optional[str] = None
    reason: Optional[str] = None
    cue_count: int = 0
    matched: bool = True

    @property
    def ok(self) -> bool:
        return self.status == SYNCED

    @classmethod
    def synced(
        cls, track: AnalyzedTrack, cue_count: int, matched: bool = True
    ) -> "SyncResult":
        return cls(
            status=SYNCED,
            source_id=track.source_id,
            path=track.path,
            cue_count=cue_count,
            matched=matched,
        )

    @classmethod
    def skipped(
        cls, source_id: int, reason: str, path: Optional[str] = None
    ) -> "SyncResult":
        return cls(status=SKIPPED, source_id=source_id, path=path, reason=reason)


@dataclass
class SyncSummary:
    """Aggregated results of a sync run."""

    results: List[SyncResult] = field(default_factory=list)
    dry_run: bool = False

    def add(self, result: SyncResult) -> None:
        self.results.append(result)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def synced(self) -> List[SyncResult]:
        return [r for r in self.results if r.ok]

    @property
    def skipped(self) -> List[SyncResult]:
        return [r for r in self.results if not r.ok]

    def to_dict(self) -> Dict[str, Any]:
        """Summary counts, used for logging and the CLI table."""
        return {
            "total": self.total,
            "synced": len(self.synced),
            "skipped": len(self.skipped),
            "cues_written": sum(r.cue_count for r in self.synced),
            "unmatched": sum(1 for r in self.synced if not r.matched),
            "dry_run": self.dry_run,
        }
