"""Tests for the generic chunk tree."""

import io
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from e4bank.formats.e4b.binary import read_exact, read_value, skip
from e4bank.formats.e4b.chunk import Chunk
from e4bank.utils.validation import E4BFormatError


class TestChunkWrite:
    """Serializing chunks."""

    def test_header_and_payload(self):
        chunk = Chunk("TEST")
        chunk.pack(">H", 1)
        chunk.pad(2)

        assert chunk.to_bytes() == b"TEST\x00\x00\x00\x04\x00\x01\x00\x00"

    def test_children_follow_payload(self):
        form = Chunk("FORM")
        form.append(b"E4B0")
        child = Chunk("ABCD")
        child.append(b"xy")
        form.children.append(child)

        assert form.full_size(True) == 22
        assert form.full_size(False) == 6

        data = form.to_bytes()
        assert len(data) == 22
        assert data[:8] == b"FORM\x00\x00\x00\x0e"
        assert data[8:12] == b"E4B0"
        assert data[12:22] == b"ABCD\x00\x00\x00\x02xy"

    def test_nested_sizes(self):
        outer = Chunk("OUTR")
        middle = Chunk("MIDL")
        inner = Chunk("INNR")
        inner.pad(5)
        middle.children.append(inner)
        outer.children.append(middle)

        # outer header + middle header + inner header + 5
        assert outer.full_size(True) == 29
        assert outer.to_bytes()[4:8] == (21).to_bytes(4, "big")

    def test_size_override(self):
        chunk = Chunk("E4P1", 10)
        chunk.append(b"abcd")

        data = chunk.to_bytes()
        assert data[4:8] == (10).to_bytes(4, "big")
        assert data[8:] == b"abcd"
        assert chunk.full_size(True) == 12

    def test_invalid_tag_is_skipped(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert Chunk("BAD").to_bytes() == b""
        assert "invalid tag" in caplog.text

    def test_empty_chunk(self):
        assert Chunk("EMPT").to_bytes() == b"EMPT\x00\x00\x00\x00"


class TestChunkAppend:
    """Payload accumulation."""

    def test_zero_fill(self):
        chunk = Chunk("TEST")
        chunk.append(None, 3)
        assert chunk.data == b"\x00\x00\x00"

    def test_partial_append(self):
        chunk = Chunk("TEST")
        chunk.append(b"abcdef", 2)
        assert chunk.data == b"ab"

    def test_oversized_append_ignored(self, caplog):
        chunk = Chunk("TEST")
        with caplog.at_level(logging.WARNING):
            chunk.append(b"abc", 5)
        assert chunk.payload_size == 0
        assert "ignoring append" in caplog.text

    def test_empty_append_ignored(self):
        chunk = Chunk("TEST")
        chunk.append(b"")
        chunk.pad(0)
        assert chunk.payload_size == 0


class TestChunkRead:
    """Reading chunk headers."""

    def test_read_header_only(self):
        stream = io.BytesIO(b"TOC1\x00\x00\x00\x40rest")
        chunk = Chunk.read(stream)

        assert chunk.name == "TOC1"
        assert chunk.read_size == 64
        assert stream.tell() == 8

    def test_truncated_header(self):
        with pytest.raises(E4BFormatError, match="Truncated chunk header"):
            Chunk.read(io.BytesIO(b"TOC1\x00"))

    def test_write_then_read(self):
        chunk = Chunk("E3S1")
        chunk.pad(100)

        read = Chunk.read(io.BytesIO(chunk.to_bytes()))
        assert read.name == "E3S1"
        assert read.read_size == 100


class TestStreamHelpers:
    """Bounds-checked stream reads."""

    def test_read_exact(self):
        stream = io.BytesIO(b"\x01\x02\x03")
        assert read_exact(stream, 2) == b"\x01\x02"
        with pytest.raises(E4BFormatError, match="Unexpected end of data"):
            read_exact(stream, 2)

    def test_read_value_and_skip(self):
        stream = io.BytesIO(b"\xff\xff\x00\x2a")
        skip(stream, 2)
        assert read_value(stream, ">H") == 42
