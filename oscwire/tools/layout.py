"""Wire layout of encoded OSC messages."""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin

from oscwire.proto.packet import Message
from oscwire.proto.serialization import ByteEmitter


@dataclass
class FieldInfo(DataClassJsonMixin):
    """One field of an encoded message.

    For arguments, index is the argument position and tag its type tag.
    Address and type-tag fields have no index.
    """

    name: str
    offset: int
    size: int
    tag: str | None
    index: int | None
    value: str


@dataclass
class MessageLayout(DataClassJsonMixin):
    """Field-by-field breakdown of an encoded message."""

    address: str
    type_tags: str
    size: int
    fields: list[FieldInfo]


def message_layout(message: Message) -> MessageLayout:
    """Encode a message field by field, recording where each field lands."""
    arguments = message.arguments
    emitter = ByteEmitter()
    fields: list[FieldInfo] = []
    tags = ""

    start = 0
    for name, index in message.write_fields(emitter):
        size = len(emitter) - start
        if index is not None:
            argument = arguments[index]
            tag = emitter.resolve_tag(argument)
            fields.append(FieldInfo(name, start, size, tag, index, repr(argument)))
        elif name == "address":
            fields.append(FieldInfo(name, start, size, None, None, message.address))
        else:
            tags = "," + "".join(emitter.resolve_tag(argument) for argument in arguments)
            fields.append(FieldInfo(name, start, size, None, None, tags))
        start = len(emitter)

    return MessageLayout(
        address=message.address,
        type_tags=tags,
        size=len(emitter),
        fields=fields,
    )
