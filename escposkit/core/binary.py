from __future__ import annotations

from typing import Iterable, Union

ByteLike = Union[bytes, bytearray, memoryview]


def sequence(values: Iterable[int] | ByteLike) -> bytes:
    """Encode a sequence of byte values (0-255) as raw bytes."""
    try:
        return bytes(values)
    except ValueError as exc:
        raise ValueError("byte values must be in range 0-255") from exc


def content(data: ByteLike) -> bytes:
    """Return caller content as bytes; anything not bytes-like is rejected."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"content must be bytes-like, got {type(data).__name__}")


def join(*parts: Iterable[int] | ByteLike) -> bytes:
    """Concatenate encoded fragments into one command sequence."""
    return b"".join(sequence(part) for part in parts)


def low_high(value: int) -> tuple[int, int]:
    """Split a 16-bit value into its (low, high) byte pair."""
    if value < 0 or value > 0xFFFF:
        raise ValueError("value must be between 0 and 65535")
    return value % 256, value // 256
