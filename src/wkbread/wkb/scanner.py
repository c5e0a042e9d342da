"""Bounded primitive reads over an in-memory WKB buffer.

The Scanner owns the buffer and a forward-only cursor. Multi-byte reads
honor the byte order selected by the most recent select_byte_order() call,
so every geometry header can switch between XDR and NDR independently.
"""

from __future__ import annotations

import struct

from wkbread.wkb.exceptions import (
    InsufficientDataError,
    InvalidByteOrderError,
    InvalidHexError,
)
from wkbread.wkb.types import ByteOrder

WKBInput = str | bytes | bytearray | memoryview

HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def normalize_input(data: WKBInput) -> bytes:
    """Convert hex text or raw binary input into raw bytes.

    Only the first character decides the format: raw WKB always starts with
    a 0x00 or 0x01 byte-order marker, which is never an ASCII hex digit.

    Raises:
        InvalidHexError: If the input looks like hex text but cannot be decoded.
    """
    raw = data.encode("latin-1") if isinstance(data, str) else bytes(data)
    if not raw or raw[0] not in HEX_DIGITS:
        return raw

    try:
        return bytes.fromhex(raw.decode("ascii"))
    except ValueError as e:
        raise InvalidHexError(f"Invalid hex input: {e}") from e


class Scanner:
    """Forward-only reader of WKB primitives.

    Example:
        >>> scanner = Scanner("0101000000000000000000f03f0000000000000040")
        >>> scanner.select_byte_order()
        <ByteOrder.NDR: 1>
        >>> scanner.integer()
        1
        >>> scanner.double(), scanner.double()
        (1.0, 2.0)
    """

    def __init__(self, data: WKBInput) -> None:
        self._data = normalize_input(data)
        self._pos = 0
        self._byte_order = ByteOrder.XDR

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    def byte(self) -> int:
        """Read one unsigned byte."""
        self._ensure(1, "byte")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def select_byte_order(self) -> ByteOrder:
        """Consume a byte-order marker and use it for subsequent reads.

        Raises:
            InvalidByteOrderError: If the marker is neither 0 nor 1.
        """
        marker = self.byte()
        try:
            self._byte_order = ByteOrder(marker)
        except ValueError:
            raise InvalidByteOrderError(marker) from None
        return self._byte_order

    def integer(self) -> int:
        """Read an unsigned 32-bit integer."""
        return int(self._unpack("I", "integer"))

    def double(self) -> float:
        """Read an IEEE-754 binary64 value."""
        return float(self._unpack("d", "double"))

    def _unpack(self, code: str, kind: str) -> int | float:
        fmt = self._byte_order.struct_prefix + code
        size = struct.calcsize(fmt)
        self._ensure(size, kind)
        (value,) = struct.unpack_from(fmt, self._data, self._pos)
        self._pos += size
        return value

    def _ensure(self, size: int, kind: str) -> None:
        if self._pos + size > len(self._data):
            raise InsufficientDataError(size, kind)
