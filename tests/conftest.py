"""Shared fixtures."""

from __future__ import annotations

import struct
import zlib

import pytest


def _chunk(tag: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(tag + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)


@pytest.fixture
def bomb_png() -> bytes:
    """Tiny PNG whose header claims 20000x20000 RGB pixels."""

    header = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", b"")
        + _chunk(b"IEND", b"")
    )
