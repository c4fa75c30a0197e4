"""Tests for message layout"""

from pytest import raises

from oscwire.proto.packet import Message
from oscwire.proto.serialization import SerializationError, UnsupportedArgumentType
from oscwire.tools.layout import message_layout


def describe_message_layout():
    def records_offsets_and_tags(expect):
        layout = message_layout(Message("/x", [1, "ab", True]))

        expect(layout.address) == "/x"
        expect(layout.type_tags) == ",isT"
        expect(layout.size) == 20
        expect([f.name for f in layout.fields]) == [
            "address",
            "type_tags",
            "argument[0]",
            "argument[1]",
            "argument[2]",
        ]
        expect([(f.offset, f.size) for f in layout.fields]) == [
            (0, 4),
            (4, 8),
            (12, 4),
            (16, 4),
            (20, 0),
        ]
        expect([f.tag for f in layout.fields]) == [None, None, "i", "s", "T"]

    def matches_encoding(expect):
        msg = Message("/mixer/gain", [0.5, [1, "two"], b"\x01\x02"])
        layout = message_layout(msg)
        expect(layout.size) == len(msg.encode())
        expect(layout.fields[-1].offset + layout.fields[-1].size) == layout.size
        expect(layout.fields[3].tag) == "[is]"

    def to_json(expect):
        data = message_layout(Message("/x", [1])).to_dict()
        expect(data["address"]) == "/x"
        expect(data["fields"][2]) == {
            "name": "argument[0]",
            "offset": 8,
            "size": 4,
            "tag": "i",
            "index": 0,
            "value": "1",
        }


def describe_errors():
    def rejects_missing_address(expect):
        with raises(SerializationError):
            message_layout(Message())

    def rejects_unsupported_argument(expect):
        with raises(UnsupportedArgumentType):
            message_layout(Message("/x", [object()]))
