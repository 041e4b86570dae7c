"""Concrete command registry.

:class:`CommandManager` satisfies
:class:`~nuget_cmdline.core.protocols.CommandRegistry` and is what the
CLI layer hands to the parser.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from nuget_cmdline.core.command import Command, CommandMetadata
from nuget_cmdline.core.options import OptionTable
from nuget_cmdline.exceptions import CommandRegistrationError

logger = logging.getLogger(__name__)

CommandFactory = Callable[[], Command]


class CommandManager:
    """Registry of command types keyed by case-insensitive name."""

    def __init__(self) -> None:
        self._factories: dict[str, CommandFactory] = {}
        self._types: dict[str, type[Command]] = {}

    def register(
        self,
        command_type: type[Command],
        factory: CommandFactory | None = None,
    ) -> None:
        """Register *command_type* under its metadata name and alt name.

        Raises
        ------
        CommandRegistrationError
            If the type has no metadata or a name is already taken.
        """
        metadata = getattr(command_type, "metadata", None)
        if not isinstance(metadata, CommandMetadata):
            raise CommandRegistrationError(
                f"{command_type.__name__} does not declare CommandMetadata.",
            )

        keys = [name.casefold() for name in metadata.names()]
        for name, key in zip(metadata.names(), keys):
            if key in self._types:
                raise CommandRegistrationError(
                    f"Duplicate command name: '{name}'",
                )

        for key in keys:
            self._types[key] = command_type
            self._factories[key] = factory or command_type
        logger.debug("Registered command %s as %s", command_type.__name__, keys)

    # ------------------------------------------------------------------
    # CommandRegistry protocol
    # ------------------------------------------------------------------

    def resolve(self, name: str) -> Command | None:
        factory = self._factories.get(name.casefold())
        if factory is None:
            return None
        return factory()

    def get_option_descriptors(self, command: Command) -> OptionTable:
        return type(command).options

    def get_command_metadata(self, command: Command) -> CommandMetadata:
        return type(command).metadata

    # ------------------------------------------------------------------
    # Introspection for help output
    # ------------------------------------------------------------------

    def get_command_type(self, name: str) -> type[Command] | None:
        return self._types.get(name.casefold())

    def get_commands(self) -> list[type[Command]]:
        """Return each registered command type once, sorted by name."""
        unique = {id(t): t for t in self._types.values()}
        return sorted(unique.values(), key=lambda t: t.metadata.name.casefold())
