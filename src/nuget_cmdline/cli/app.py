"""CLI application entry point and error boundary for nuget-cmdline.

This module is the **sole error boundary** for the application.  It
catches :class:`~nuget_cmdline.exceptions.NuGetCmdlineError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
user-facing message and returns a well-defined exit code.

Parsing is delegated to :class:`~nuget_cmdline.core.parser.CommandLineParser`;
this module only wires the registry, configures logging and runs the
resolved command.
"""

from __future__ import annotations

import logging
import os
import sys

from nuget_cmdline.cli import exit_codes
from nuget_cmdline.cli.console import console
from nuget_cmdline.core.parser import CommandLineParser
from nuget_cmdline.core.registry import CommandManager
from nuget_cmdline.exceptions import NuGetCmdlineError

LOG_LEVEL_ENV: str = "NUGET_CMDLINE_LOG_LEVEL"
"""Environment variable holding the logging level name."""


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def configure_logging() -> None:
    """Configure root logging once from :data:`LOG_LEVEL_ENV`.

    Unknown level names fall back to ``WARNING``.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_default_manager() -> CommandManager:
    """Return a registry holding the built-in commands."""
    from nuget_cmdline.cli.help import HelpCommand

    manager = CommandManager()
    manager.register(HelpCommand, factory=lambda: HelpCommand(manager))
    return manager


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    manager: CommandManager | None = None,
) -> int:
    """Parse *argv*, run the resolved command and return its exit code.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None``, ``sys.argv[1:]`` is used.
    manager:
        Registry of available commands.  Defaults to the built-in set.
        When it has no ``help`` command, empty input returns
        :data:`exit_codes.SUCCESS` without output.

    Raises
    ------
    CommandLineError
        For malformed input; :func:`cli` turns it into an exit code.
    """
    configure_logging()
    if argv is None:
        argv = sys.argv[1:]
    if manager is None:
        manager = build_default_manager()

    parser = CommandLineParser(manager)
    command = parser.parse_command_line(argv)
    if command is None:
        command = manager.resolve("help")
        if command is None:
            return exit_codes.SUCCESS

    return command.execute()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except NuGetCmdlineError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            "Unexpected error. Please report this issue.",
            f"{type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
