"""Small helpers: hashing, float comparison, ordering, time and file size."""

from __future__ import annotations

import io
import os
import time
from typing import IO

PRECISE = 0.000001

_MURMUR_M = 0x5BD1E995
_MURMUR_SEED = 0
_MURMUR_R = 24
_MASK32 = 0xFFFFFFFF


def murmur_hash(data: bytes | bytearray | memoryview) -> int:
    """32-bit MurmurHash2 of ``data`` with seed 0, as a non-negative integer."""
    if isinstance(data, str):
        raise TypeError("murmur_hash expects bytes, not str")
    buf = bytes(data)
    length = len(buf)
    h = (_MURMUR_SEED ^ length) & _MASK32

    body_end = length - length % 4
    for start in range(0, body_end, 4):
        k = int.from_bytes(buf[start:start + 4], "little")
        k = (k * _MURMUR_M) & _MASK32
        k ^= k >> _MURMUR_R
        k = (k * _MURMUR_M) & _MASK32
        h = (h * _MURMUR_M) & _MASK32
        h ^= k

    tail = buf[body_end:]
    if len(tail) >= 3:
        h ^= tail[2] << 16
    if len(tail) >= 2:
        h ^= tail[1] << 8
    if tail:
        h ^= tail[0]
        h = (h * _MURMUR_M) & _MASK32

    h ^= h >> 13
    h = (h * _MURMUR_M) & _MASK32
    h ^= h >> 15
    return h


def double_is_equal(first: float, second: float) -> bool:
    """Whether two floats differ by less than ``PRECISE``."""
    return abs(first - second) < PRECISE


def int_compare(first: int, second: int) -> int:
    """Three-way comparison usable with ``functools.cmp_to_key``."""
    return first - second


def time_string() -> str:
    """The current local time in ``ctime`` form, ending with a newline."""
    return time.ctime(time.time()) + "\n"


def file_size(file: IO) -> int:
    """Size of a seekable file in bytes; the position is rewound to the start."""
    if not file.seekable():
        raise io.UnsupportedOperation("file is not seekable")
    file.seek(0, os.SEEK_END)
    size = file.tell()
    file.seek(0)
    return size