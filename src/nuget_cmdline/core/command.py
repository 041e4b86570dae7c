"""Command base class and command metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from nuget_cmdline.core.options import OptionTable


@dataclass(frozen=True, slots=True)
class CommandMetadata:
    """Name and help text of a command type.

    ``min_args`` and ``max_args`` describe the expected positional
    arguments for help output; the parser does not enforce them.
    """

    name: str
    description: str = ""
    usage_summary: str = ""
    alt_name: str | None = None
    min_args: int = 0
    max_args: int | None = None

    def names(self) -> tuple[str, ...]:
        if self.alt_name:
            return (self.name, self.alt_name)
        return (self.name,)


class Command:
    """Base class for every executable command.

    Subclasses declare :attr:`metadata` and :attr:`options` at class
    level and initialise their option attributes to defaults in
    ``__init__``.  One instance serves exactly one invocation.
    """

    metadata: ClassVar[CommandMetadata]
    options: ClassVar[OptionTable] = OptionTable()

    def __init__(self) -> None:
        self.arguments: list[str] = []

    def execute(self) -> int:
        """Run the command and return a process exit code."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(arguments={self.arguments!r})"
