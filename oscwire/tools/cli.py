"""Command-line interface for building OSC messages."""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from oscwire.proto.packet import Message
from oscwire.proto.serialization import SerializationError
from oscwire.tools.arguments import ArgumentSyntaxError, parse_arguments
from oscwire.tools.layout import MessageLayout, message_layout

_ARGS_SETTINGS = {"ignore_unknown_options": True}


@click.group()
def cli() -> None:
    """OSC message encoder."""


def _build_message(address: str, args: tuple[str, ...]) -> Message:
    """Parse argument literals and build a message, exiting on bad input."""
    try:
        return Message(address, parse_arguments(" ".join(args)))
    except ArgumentSyntaxError as exc:
        _fail(str(exc))


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _format_words(data: bytes) -> str:
    """Format bytes as hex, grouped into 4-byte words."""
    return " ".join(data[i : i + 4].hex() for i in range(0, len(data), 4))


@cli.command(context_settings=_ARGS_SETTINGS)
@click.argument("address")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--output", "-o", "output_file", default=None, help="Write raw bytes to this file")
def encode(address: str, args: tuple[str, ...], output_file: str | None) -> None:
    """Encode a message and print it as hex."""
    message = _build_message(address, args)

    try:
        data = message.encode()
    except SerializationError as exc:
        _fail(str(exc))

    if output_file:
        with open(output_file, "wb") as f:
            f.write(data)
        click.echo(f"Wrote {len(data)} bytes to {output_file}")
    else:
        click.echo(_format_words(data))


@cli.command(context_settings=_ARGS_SETTINGS)
@click.argument("address")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(address: str, args: tuple[str, ...], output_json: bool) -> None:
    """Display the wire layout of a message."""
    message = _build_message(address, args)

    try:
        layout = message_layout(message)
    except SerializationError as exc:
        _fail(str(exc))

    if output_json:
        print(json.dumps(layout.to_dict(), indent=2))
    else:
        _output_plain(layout, message.encode())


def _output_plain(layout: MessageLayout, data: bytes) -> None:
    """Output the layout using rich text formatting."""
    console = Console()

    console.print("[bold cyan]Message[/bold cyan]")
    summary = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    summary.add_column("Label", style="dim")
    summary.add_column("Value", style="white")
    summary.add_row("Address", escape(layout.address))
    summary.add_row("Type tags", escape(layout.type_tags))
    summary.add_row("Size", f"{layout.size} bytes")
    console.print(summary)
    console.print()

    console.print("[bold cyan]Fields[/bold cyan]")
    field_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    field_table.add_column("Field", style="white")
    field_table.add_column("Offset", style="yellow", justify="right")
    field_table.add_column("Size", style="yellow", justify="right")
    field_table.add_column("Tag", style="green")
    field_table.add_column("Bytes", style="dim")

    for field in layout.fields:
        chunk = data[field.offset : field.offset + field.size]
        field_table.add_row(
            field.name,
            str(field.offset),
            str(field.size),
            escape(field.tag or ""),
            _format_words(chunk),
        )

    console.print(field_table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
