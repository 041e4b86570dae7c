"""``help`` — lists commands and describes a command's options.

Renders Rich tables when Rich is importable and plain aligned text
otherwise.
"""

from __future__ import annotations

import sys

from nuget_cmdline.cli import exit_codes
from nuget_cmdline.cli.console import console, rich_available
from nuget_cmdline.core.command import Command, CommandMetadata
from nuget_cmdline.core.options import OptionKind, OptionTableBuilder
from nuget_cmdline.core.registry import CommandManager
from nuget_cmdline.exceptions import UnknownCommandError
from nuget_cmdline.version import __version__


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def _command_rows(manager: CommandManager) -> list[tuple[str, str]]:
    """Return (name, description) for every registered command."""
    return [
        (command_type.metadata.name, command_type.metadata.description)
        for command_type in manager.get_commands()
    ]


def _option_rows(command_type: type[Command]) -> list[tuple[str, str, str]]:
    """Return (names, value, description) for each declared option."""
    rows: list[tuple[str, str, str]] = []
    for descriptor in command_type.options:
        names = " | ".join(f"-{name}" for name in descriptor.names())
        value = "" if descriptor.kind is OptionKind.BOOL else f"<{descriptor.kind.value}>"
        if descriptor.kind is OptionKind.MULTI:
            value += " (repeatable)"
        rows.append((names, value, descriptor.description))
    return rows


def _usage_line(metadata: CommandMetadata) -> str:
    return f"usage: nuget-cmdline {metadata.name} {metadata.usage_summary}".rstrip()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_rows(rows: list[tuple[str, ...]]) -> None:
    if not rows:
        return
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        print("  " + "  ".join(cells).rstrip(), file=sys.stderr)


def _render_table(title: str, columns: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
    if not rich_available():
        print(title, file=sys.stderr)
        _print_plain_rows(rows)
        print(file=sys.stderr)
        return

    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    console.print(table)


def render_command_list(manager: CommandManager) -> None:
    console.print(f"nuget-cmdline {__version__}", markup=False)
    console.print("usage: nuget-cmdline <command> [args] [options]", markup=False)
    _render_table("Available commands", ("Command", "Description"), _command_rows(manager))
    console.print("Type 'nuget-cmdline help <command>' for help on a specific command.", markup=False)


def render_command_help(command_type: type[Command]) -> None:
    metadata = command_type.metadata
    console.print(_usage_line(metadata), markup=False)
    if metadata.description:
        console.print(metadata.description, markup=False)
    if metadata.alt_name:
        console.print(f"alias: {metadata.alt_name}", markup=False)
    rows = _option_rows(command_type)
    if rows:
        _render_table(
            f"{metadata.name} options",
            ("Option", "Value", "Description"),
            rows,
        )


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class HelpCommand(Command):
    """Built-in command describing the registered command set."""

    metadata = CommandMetadata(
        name="help",
        alt_name="?",
        description="Displays general help or help for a specific command.",
        usage_summary="[command]",
        max_args=1,
    )
    options = (
        OptionTableBuilder()
        .flag("All", "Print detailed help for every available command.")
        .build()
    )

    def __init__(self, manager: CommandManager) -> None:
        super().__init__()
        self.all: bool = False
        self._manager: CommandManager = manager

    def execute(self) -> int:
        if self.all:
            for command_type in self._manager.get_commands():
                render_command_help(command_type)
                console.print()
            return exit_codes.SUCCESS

        if self.arguments:
            name = self.arguments[0]
            command_type = self._manager.get_command_type(name)
            if command_type is None:
                raise UnknownCommandError(name)
            render_command_help(command_type)
            return exit_codes.SUCCESS

        render_command_list(self._manager)
        return exit_codes.SUCCESS
