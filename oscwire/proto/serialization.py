"""Byte-level serialization primitives for OSC packets."""

import struct
from collections.abc import Iterable
from typing import Any

from .types import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, Int64


class SerializationError(RuntimeError):
    """Raised when a packet cannot be serialized."""


class UnsupportedArgumentType(SerializationError):
    """Raised when an argument has no OSC type tag or encoding."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        message = f"Unsupported OSC argument type: {type(value).__name__}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def pad_length(size: int) -> int:
    """Number of null bytes needed to bring size up to a multiple of 4."""
    return (-size) % 4


class ByteEmitter:
    """Accumulates OSC fields into a byte buffer.

    Every string-like field is null terminated and padded to a 4-byte
    boundary. Numeric fields are big-endian.

    Example:
        emitter = ByteEmitter()
        emitter.write_string("/mixer/fader")
        emitter.write_types([0.5])
        emitter.write(0.5)
        data = emitter.to_bytes()
    """

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def to_bytes(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buf)

    def write_raw(self, data: bytes) -> None:
        """Append bytes unchanged."""
        self._buf.extend(data)

    def write_char(self, char: str) -> None:
        """Append a single ASCII character without padding."""
        self._buf.extend(char.encode("ascii"))

    def write_string(self, text: str) -> None:
        """Append a null-terminated string padded to a multiple of 4."""
        encoded = text.encode("utf-8")
        self._buf.extend(encoded)
        self._buf.extend(b"\x00" * (1 + pad_length(len(encoded) + 1)))

    def write_blob(self, data: bytes | bytearray) -> None:
        """Append a size-prefixed blob padded to a multiple of 4."""
        self._buf.extend(struct.pack(">i", len(data)))
        self._buf.extend(data)
        self._buf.extend(b"\x00" * pad_length(len(data)))

    def write_int32(self, value: int) -> None:
        self._buf.extend(struct.pack(">i", value))

    def write_int64(self, value: int) -> None:
        self._buf.extend(struct.pack(">q", value))

    def write_float32(self, value: float) -> None:
        try:
            self._buf.extend(struct.pack(">f", value))
        except OverflowError as exc:
            raise SerializationError(f"{value!r} does not fit in a 32-bit float") from exc

    def write_uint64(self, value: int) -> None:
        self._buf.extend(struct.pack(">Q", value))

    def resolve_tag(self, value: Any) -> str:
        """Return the type tag for a single argument.

        Arrays resolve to their bracketed element tags.
        """
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return "T" if value else "F"
        if value is None:
            return "N"
        if isinstance(value, Int64):
            if not INT64_MIN <= value <= INT64_MAX:
                raise UnsupportedArgumentType(value, "integer exceeds 64 bits")
            return "h"
        if isinstance(value, int):
            if INT32_MIN <= value <= INT32_MAX:
                return "i"
            if INT64_MIN <= value <= INT64_MAX:
                return "h"
            raise UnsupportedArgumentType(value, "integer exceeds 64 bits")
        if isinstance(value, float):
            return "f"
        if isinstance(value, str):
            return "s"
        if isinstance(value, (bytes, bytearray)):
            return "b"
        if isinstance(value, (list, tuple)):
            return "[" + "".join(self.resolve_tag(item) for item in value) + "]"
        raise UnsupportedArgumentType(value)

    def write_types(self, arguments: Iterable[Any]) -> None:
        """Append the type-tag field for an ordered argument list."""
        tags = "".join(self.resolve_tag(argument) for argument in arguments)
        self.write_string("," + tags)

    def write(self, value: Any) -> None:
        """Append the payload of one argument according to its type tag."""
        tag = self.resolve_tag(value)

        if tag in ("T", "F", "N"):
            return
        if tag == "i":
            self.write_int32(value)
        elif tag == "h":
            self.write_int64(value)
        elif tag == "f":
            self.write_float32(value)
        elif tag == "s":
            self.write_string(value)
        elif tag == "b":
            self.write_blob(value)
        else:
            for item in value:
                self.write(item)
