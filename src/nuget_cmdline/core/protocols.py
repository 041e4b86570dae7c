"""Protocols (interfaces) consumed by the core layer.

The parser depends only on :class:`CommandRegistry`; any object with
these three methods can supply commands, including test doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from nuget_cmdline.core.command import Command, CommandMetadata
    from nuget_cmdline.core.options import OptionTable


class CommandRegistry(Protocol):
    """Contract for the component that knows every available command."""

    def resolve(self, name: str) -> Command | None:
        """Return a fresh command instance for *name*, or ``None``.

        Implementations must create a new instance on every call; the
        parser mutates the returned object.
        """
        ...  # pragma: no cover

    def get_option_descriptors(self, command: Command) -> OptionTable:
        """Return the option table declared for *command*'s type."""
        ...  # pragma: no cover

    def get_command_metadata(self, command: Command) -> CommandMetadata:
        """Return name and help text for *command*'s type.

        Used for diagnostics only; the parser never alters it.
        """
        ...  # pragma: no cover
