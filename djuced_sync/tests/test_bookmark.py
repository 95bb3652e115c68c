#!/usr/bin/env python3
"""
Unit tests for the bookmark blob decoder.
"""

import unittest

from djuced_sync.core.bookmark import (
    RECORD_MARKER,
    BookmarkDecoder,
    decode_records,
    extract_path,
    iter_records,
)
from djuced_sync.core.exceptions import EmptyBookmark


def record(text: str) -> bytes:
    """Encode one bookmark record."""
    payload = text.encode("utf-8")
    return bytes([len(payload)]) + RECORD_MARKER + payload


class TestBookmarkDecoder(unittest.TestCase):
    """Test cases for decoding bookmark blobs."""

    def test_single_record(self) -> None:
        blob = bytes([0x03, 0, 0, 0, 1, 1, 0, 0]) + b"abc"
        self.assertEqual(decode_records(blob), ["abc"])
        self.assertEqual(extract_path(blob), "abc")

    def test_two_records_in_offset_order(self) -> None:
        blob = record("Macintosh HD") + record("/music/t.mp3")
        self.assertEqual(decode_records(blob), ["Macintosh HD", "/music/t.mp3"])
        self.assertEqual(extract_path(blob), "/music/t.mp3")

    def test_records_surrounded_by_other_bytes(self) -> None:
        blob = (
            b"book\x00\x00\x00\x00"
            + record("Users")
            + b"\x10\x20\x00\x00"
            + record("/Users/dj/Music/track.flac")
            + b"\xff\xff\x00"
        )
        records = list(iter_records(blob))
        self.assertEqual([r.text for r in records], ["Users", "/Users/dj/Music/track.flac"])
        self.assertEqual(records[0].offset, 8)
        self.assertEqual(records[0].length, 5)
        self.assertEqual(records[0].end, 8 + 8 + 5)
        self.assertEqual(extract_path(blob), "/Users/dj/Music/track.flac")

    def test_empty_blob(self) -> None:
        self.assertEqual(decode_records(b""), [])
        with self.assertRaises(EmptyBookmark):
            extract_path(b"")

    def test_none_blob(self) -> None:
        with self.assertRaises(EmptyBookmark):
            extract_path(None)  # type: ignore[arg-type]

    def test_blob_without_marker(self) -> None:
        with self.assertRaises(EmptyBookmark):
            extract_path(b"no records in here at all")

    def test_blob_shorter_than_window(self) -> None:
        self.assertEqual(decode_records(bytes([3, 0, 0, 0, 1, 1, 0])), [])

    def test_record_running_past_end_is_skipped(self) -> None:
        blob = bytes([0x10]) + RECORD_MARKER + b"ab"
        self.assertEqual(decode_records(blob), [])
        with self.assertRaises(EmptyBookmark):
            extract_path(blob)

    def test_truncated_record_after_valid_one(self) -> None:
        blob = record("/music/a.mp3") + bytes([0x50]) + RECORD_MARKER + b"/mus"
        self.assertEqual(decode_records(blob), ["/music/a.mp3"])
        self.assertEqual(extract_path(blob), "/music/a.mp3")

    def test_spurious_marker_inside_payload(self) -> None:
        # The payload itself contains the marker; the window starting at "x"
        # declares 120 bytes, which overruns and is dropped.
        payload = b"x" + RECORD_MARKER + b"y"
        blob = bytes([len(payload)]) + RECORD_MARKER + payload
        self.assertEqual(decode_records(blob), [payload.decode("utf-8")])

    def test_invalid_utf8_is_replaced(self) -> None:
        blob = bytes([2]) + RECORD_MARKER + b"\xff\xfe"
        self.assertEqual(decode_records(blob), ["\ufffd\ufffd"])

    def test_multibyte_utf8(self) -> None:
        blob = record("/music/Björk - Jóga.mp3")
        self.assertEqual(extract_path(blob), "/music/Björk - Jóga.mp3")

    def test_zero_length_record(self) -> None:
        self.assertEqual(decode_records(bytes([0]) + RECORD_MARKER), [""])

    def test_bytearray_input(self) -> None:
        self.assertEqual(decode_records(bytearray(record("abc"))), ["abc"])

    def test_decoding_is_deterministic(self) -> None:
        blob = record("one") + record("two")
        decoder = BookmarkDecoder()
        self.assertEqual(decoder.decode_records(blob), decoder.decode_records(blob))


if __name__ == "__main__":
    unittest.main()
