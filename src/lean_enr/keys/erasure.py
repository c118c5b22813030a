"""
Erasure of transient secret buffers.

Python `bytes` are immutable and cannot be wiped, so every buffer that holds
secret material on its way into or out of a key is a `bytearray` (or a
writable `memoryview`) and is zero-filled as soon as it is no longer needed.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

SecretBuffer = bytearray | memoryview
"""A mutable buffer that can be zero-filled in place."""


def zeroize(buf: SecretBuffer) -> None:
    """
    Overwrite every byte of `buf` with zero, in place.

    Raises:
        TypeError: If `buf` is not writable.
    """
    if isinstance(buf, memoryview):
        if buf.readonly:
            raise TypeError("Cannot erase a read-only memoryview")
        buf = buf.cast("B")
    elif not isinstance(buf, bytearray):
        raise TypeError(f"Cannot erase immutable buffer of type {type(buf).__name__}")

    buf[:] = bytes(len(buf))


@contextmanager
def erasing(buf: SecretBuffer) -> Iterator[SecretBuffer]:
    """
    Yield `buf` and zero-fill it on exit, whether the block returns or raises.

    The writability check runs before the block so that an immutable buffer
    is rejected before any secret is derived from it.
    """
    if not isinstance(buf, (bytearray, memoryview)) or (
        isinstance(buf, memoryview) and buf.readonly
    ):
        raise TypeError(f"Cannot erase immutable buffer of type {type(buf).__name__}")
    try:
        yield buf
    finally:
        zeroize(buf)
