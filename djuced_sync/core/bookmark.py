#!/usr/bin/env python3
"""
Decoder for the bookmark blobs stored in Mixed In Key's ZBOOKMARKDATA column.

The blob has no published layout. The only structure relied on here is a
run of embedded text records, each laid out as:

    <1-byte length L> 00 00 00 01 01 00 00 <L bytes of UTF-8>

Records sit at arbitrary offsets with no overall count or length prefix, so
the blob is scanned with an overlapping 8-byte window at every offset.

The file path is taken to be the *last* record found. That is a convention
observed on captured libraries, not a documented guarantee.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from loguru import logger

from djuced_sync.core.exceptions import EmptyBookmark, MalformedRecord

RECORD_MARKER = bytes([0x00, 0x00, 0x00, 0x01, 0x01, 0x00, 0x00])
WINDOW_SIZE = 1 + len(RECORD_MARKER)


@dataclass(frozen=True)
class BookmarkRecord:
    """A text record found inside a bookmark blob."""

    offset: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.offset + WINDOW_SIZE + self.length


class BookmarkDecoder:
    """Scans bookmark blobs for marker-delimited text records."""

    def _read_record(self, blob: bytes, offset: int) -> BookmarkRecord:
        """Read the record whose header starts at ``offset``."""
        length = blob[offset]
        start = offset + WINDOW_SIZE
        end = start + length
        if end > len(blob):
            raise MalformedRecord(offset, length, len(blob) - start)
        text = blob[start:end].decode("utf-8", errors="replace")
        return BookmarkRecord(offset=offset, length=length, text=text)

    def iter_records(self, blob: bytes) -> Iterator[BookmarkRecord]:
        """
        Yield every record in the blob in ascending offset order.

        Candidates whose declared length runs past the end of the blob are
        skipped; overlapping windows occasionally match marker bytes that
        happen to sit inside another record's payload.
        """
        blob = bytes(blob or b"")
        for offset in range(len(blob) - WINDOW_SIZE + 1):
            if blob[offset + 1 : offset + WINDOW_SIZE] != RECORD_MARKER:
                continue
            try:
                yield self._read_record(blob, offset)
            except MalformedRecord as e:
                logger.debug(f"Skipping bookmark record: {e}")

    def decode_records(self, blob: bytes) -> List[str]:
        """Decode all records in the blob to strings."""
        return [record.text for record in self.iter_records(blob)]

    def last_record(self, blob: bytes) -> Optional[BookmarkRecord]:
        last = None
        for record in self.iter_records(blob):
            last = record
        return last

    def extract_path(self, blob: bytes) -> str:
        """
        Recover the track's file path from a bookmark blob.

        Raises:
            EmptyBookmark: if the blob contains no decodable record
        """
        record = self.last_record(blob)
        if record is None:
            raise EmptyBookmark()
        return record.text


_default_decoder = BookmarkDecoder()


def iter_records(blob: bytes) -> Iterator[BookmarkRecord]:
    return _default_decoder.iter_records(blob)


def decode_records(blob: bytes) -> List[str]:
    """Decode all records in a bookmark blob."""
    return _default_decoder.decode_records(blob)


def extract_path(blob: bytes) -> str:
    """Recover the file path from a bookmark blob."""
    return _default_decoder.extract_path(blob)
