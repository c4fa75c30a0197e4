"""Argument literal parser using Lark."""

import ast
import os
from typing import Any

from lark import Lark, Token
from lark.exceptions import LarkError
from lark.visitors import Transformer

from oscwire.proto.types import Int64, OscArgument

_g_parser: Lark | None = None


class ArgumentSyntaxError(RuntimeError):
    """Raised when an argument literal cannot be parsed."""


class ArgumentTransformer(Transformer):
    """Transform the parse tree into Python argument values."""

    def start(self, args: list[Any]) -> list[OscArgument]:
        return list(args)

    def array(self, args: list[Any]) -> list[OscArgument]:
        return list(args)

    def int32(self, args: list[Token]) -> int:
        return int(args[0])

    def int64(self, args: list[Token]) -> Int64:
        return Int64(int(args[0][:-1]))

    def float32(self, args: list[Token]) -> float:
        return float(args[0])

    def string(self, args: list[Token]) -> str:
        return ast.literal_eval(args[0])

    def word(self, args: list[Token]) -> str:
        return str(args[0])

    def blob(self, args: list[Token]) -> bytes:
        return bytes.fromhex(args[0][1:])

    def true(self, _args: list[Token]) -> bool:
        return True

    def false(self, _args: list[Token]) -> bool:
        return False

    def nil(self, _args: list[Token]) -> None:
        return None


def parse_arguments(text: str) -> list[OscArgument]:
    """Parse whitespace-separated argument literals.

    Example:
        >>> parse_arguments('1 2.5 "two words" true [3 4h] #beef')
        [1, 2.5, 'two words', True, [3, Int64(4)], b'\\xbe\\xef']
    """
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/arguments.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, parser="lalr")

    try:
        tree = _g_parser.parse(text)
        return ArgumentTransformer().transform(tree)
    except LarkError as exc:
        raise ArgumentSyntaxError(f"Invalid argument literal: {exc}") from exc
