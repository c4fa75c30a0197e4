"""OSC packets: messages and bundles."""

from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Any

from .serialization import ByteEmitter, SerializationError
from .types import BUNDLE_PREFIX, OscArgument, to_ntp


def _freeze(argument: OscArgument) -> OscArgument:
    """Copy mutable containers so later changes by the caller cannot reach the message."""
    if isinstance(argument, (list, tuple)):
        return tuple(_freeze(item) for item in argument)
    if isinstance(argument, bytearray):
        return bytes(argument)
    return argument


class Packet:
    """Base class for encodable OSC packets.

    Subclasses implement _compute_bytes() and call _invalidate() whenever
    their content changes. The encoded form is cached until then.
    """

    def __init__(self) -> None:
        self._byte_array: bytes | None = None
        self._revision = 0
        self._encoded_revision = -1

    @property
    def revision(self) -> Any:
        """A value that changes whenever the packet content changes."""
        return self._revision

    @property
    def byte_array(self) -> bytes:
        """The encoded packet, computed on first access and after mutation."""
        if self._byte_array is None or self._encoded_revision != self.revision:
            return self.encode()
        return self._byte_array

    def encode(self) -> bytes:
        """Encode the packet from its current content and cache the result."""
        revision = self.revision
        data = self._compute_bytes(ByteEmitter())
        self._byte_array = data
        self._encoded_revision = revision
        return data

    def _invalidate(self) -> None:
        self._byte_array = None
        self._revision += 1

    def _compute_bytes(self, emitter: ByteEmitter) -> bytes:
        raise NotImplementedError("_compute_bytes() must be implemented by packet types")


class Message(Packet):
    """A single OSC message: an address and an ordered list of arguments.

    Example:
        msg = Message("/mixer/channel/1/gain")
        msg.add_argument(0.75)
        sock.sendto(msg.byte_array, (host, port))
    """

    def __init__(
        self,
        address: str | None = None,
        arguments: Iterable[OscArgument] | None = None,
    ) -> None:
        super().__init__()
        self._address = address
        self._arguments: list[OscArgument] = [_freeze(argument) for argument in arguments or ()]

    def __repr__(self) -> str:
        return f"Message({self._address!r}, {self._arguments!r})"

    @property
    def address(self) -> str | None:
        return self._address

    @address.setter
    def address(self, address: str | None) -> None:
        self.set_address(address)

    def set_address(self, address: str | None) -> None:
        """Replace the address. No format check is made."""
        self._address = address
        self._invalidate()

    def add_argument(self, argument: OscArgument) -> None:
        """Append an argument. Its type is checked when the message is encoded.

        Lists and bytearrays are copied, so changing them afterwards does not
        change the message.
        """
        self._arguments.append(_freeze(argument))
        self._invalidate()

    @property
    def arguments(self) -> tuple[OscArgument, ...]:
        """The arguments, as a read-only snapshot."""
        return tuple(self._arguments)

    def write_fields(self, emitter: ByteEmitter) -> Iterator[tuple[str, int | None]]:
        """Write the message one field at a time.

        Yields (field name, argument index) after each field is written; the
        index is None for the address and type-tag fields.
        """
        if self._address is None:
            raise SerializationError("Message has no address")

        emitter.write_string(self._address)
        yield "address", None
        emitter.write_types(self._arguments)
        yield "type_tags", None
        for index, argument in enumerate(self._arguments):
            emitter.write(argument)
            yield f"argument[{index}]", index

    def _compute_bytes(self, emitter: ByteEmitter) -> bytes:
        for _field in self.write_fields(emitter):
            pass
        return emitter.to_bytes()


class Bundle(Packet):
    """A time-tagged group of packets delivered together.

    A timestamp of None means the receiver should act immediately.
    """

    def __init__(
        self,
        timestamp: datetime | None = None,
        packets: Iterable[Packet] | None = None,
    ) -> None:
        super().__init__()
        self._timestamp = timestamp
        self._packets: list[Packet] = list(packets) if packets is not None else []

    def __repr__(self) -> str:
        return f"Bundle({self._timestamp!r}, {self._packets!r})"

    @property
    def revision(self) -> Any:
        return (self._revision, tuple(packet.revision for packet in self._packets))

    @property
    def timestamp(self) -> datetime | None:
        return self._timestamp

    @timestamp.setter
    def timestamp(self, timestamp: datetime | None) -> None:
        self._timestamp = timestamp
        self._invalidate()

    def add_packet(self, packet: Packet) -> None:
        self._packets.append(packet)
        self._invalidate()

    @property
    def packets(self) -> tuple[Packet, ...]:
        return tuple(self._packets)

    def _compute_bytes(self, emitter: ByteEmitter) -> bytes:
        emitter.write_string(BUNDLE_PREFIX)
        emitter.write_uint64(to_ntp(self._timestamp))
        for packet in self._packets:
            data = packet.byte_array
            emitter.write_int32(len(data))
            emitter.write_raw(data)
        return emitter.to_bytes()
