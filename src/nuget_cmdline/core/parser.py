"""Command-line parser — turns raw arguments into a populated command.

Guarantees
----------
* Tokens are consumed once, left to right.
* Positional arguments keep their encounter order, duplicates included.
* Only :class:`~nuget_cmdline.exceptions.CommandLineError` subclasses
  escape for malformed input; no partially parsed command is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nuget_cmdline.core.binder import OptionBinder
from nuget_cmdline.core.classifier import classify_token
from nuget_cmdline.core.command import Command
from nuget_cmdline.core.protocols import CommandRegistry
from nuget_cmdline.core.tokenizer import (
    ArgumentCursor,
    as_cursor,
    get_next_command_line_item,
)
from nuget_cmdline.exceptions import UnknownCommandError

logger = logging.getLogger(__name__)


class CommandLineParser:
    """Resolve a command and bind its options from raw arguments.

    Parameters
    ----------
    registry:
        Any object satisfying the :class:`CommandRegistry` protocol.
    binder:
        Optional binder override.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        binder: OptionBinder | None = None,
    ) -> None:
        self._registry: CommandRegistry = registry
        self._binder: OptionBinder = binder or OptionBinder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse_command_line(
        self, args: ArgumentCursor | Iterable[str] | None
    ) -> Command | None:
        """Resolve the command named by the first token and bind the rest.

        Returns ``None`` when *args* holds no tokens at all.

        Raises
        ------
        UnknownCommandError
            If the registry does not know the command name.
        CommandLineError
            For any option binding failure.
        """
        cursor = as_cursor(args)
        name = get_next_command_line_item(cursor)
        if name is None:
            return None

        command = self._registry.resolve(name)
        if command is None:
            raise UnknownCommandError(name)

        logger.debug("Resolved command %r to %s", name, type(command).__name__)
        return self.extract_options(command, cursor)

    def extract_options(
        self,
        command: Command,
        args: ArgumentCursor | Iterable[str] | None,
    ) -> Command:
        """Bind options and collect positional arguments onto *command*.

        Positional arguments are appended to ``command.arguments`` only
        after the whole sequence has been consumed.
        """
        cursor = as_cursor(args)
        options = self._registry.get_option_descriptors(command)
        arguments: list[str] = []

        while True:
            token = get_next_command_line_item(cursor)
            if token is None:
                break

            reference = classify_token(token)
            if reference is None:
                arguments.append(token)
                continue

            self._binder.bind(command, options, reference, cursor)

        command.arguments.extend(arguments)
        logger.debug(
            "Extracted %d positional argument(s) for %s",
            len(arguments),
            type(command).__name__,
        )
        return command
