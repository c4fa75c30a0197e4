"""Command-line tooling for building and inspecting OSC packets."""

from .arguments import ArgumentSyntaxError as ArgumentSyntaxError
from .arguments import parse_arguments as parse_arguments
from .layout import FieldInfo as FieldInfo
from .layout import MessageLayout as MessageLayout
from .layout import message_layout as message_layout
