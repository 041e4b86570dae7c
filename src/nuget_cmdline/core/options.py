"""Declarative option tables.

Each command type carries one :class:`OptionTable` built with
:class:`OptionTableBuilder`.  A descriptor pairs the option name with
its value kind and a setter closure, so binding never needs runtime
attribute introspection::

    options = (
        OptionTableBuilder()
        .string("Message", "Text to print.")
        .flag("IsWorking", "Marks the job as running.")
        .integer("Count", "Number of repetitions.")
        .build()
    )
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from nuget_cmdline.exceptions import CommandRegistrationError

Setter = Callable[[Any, Any], None]
"""``setter(command, value)`` assigns a converted value to *command*."""


class OptionKind(enum.Enum):
    """Value kind an option expects on the command line."""

    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    MULTI = "multi"

    @property
    def takes_value(self) -> bool:
        """Whether the option consumes the following token."""
        return self is not OptionKind.BOOL


@dataclass(frozen=True, slots=True)
class OptionDescriptor:
    """Metadata for one declared option of a command."""

    name: str
    """Option name as written after the prefix (matched case-insensitively)."""

    kind: OptionKind
    setter: Setter
    description: str = ""
    alt_name: str | None = None
    """Optional second name, e.g. a short form."""

    def names(self) -> tuple[str, ...]:
        if self.alt_name:
            return (self.name, self.alt_name)
        return (self.name,)

    def assign(self, command: Any, value: Any) -> None:
        self.setter(command, value)


class OptionTable:
    """Read-only, case-insensitive lookup over a command's descriptors.

    Raises
    ------
    CommandRegistrationError
        If two descriptors share a name or alternate name.
    """

    __slots__ = ("_descriptors", "_index")

    def __init__(self, descriptors: tuple[OptionDescriptor, ...] = ()) -> None:
        self._descriptors: tuple[OptionDescriptor, ...] = tuple(descriptors)
        self._index: dict[str, OptionDescriptor] = {}
        for descriptor in self._descriptors:
            for name in descriptor.names():
                key = name.casefold()
                if key in self._index:
                    raise CommandRegistrationError(
                        f"Duplicate option name: '{name}'",
                    )
                self._index[key] = descriptor

    def find(self, name: str) -> OptionDescriptor | None:
        """Return the descriptor declared as *name*, ignoring case."""
        return self._index.get(name.casefold())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        names = ", ".join(d.name for d in self._descriptors)
        return f"OptionTable([{names}])"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_attr_name(option_name: str) -> str:
    """Map a CamelCase option name to a snake_case attribute name.

    ``IsWorking`` becomes ``is_working``; ``APIKey`` becomes ``api_key``.
    """
    return _CAMEL_BOUNDARY.sub("_", option_name).lower()


def _assign_attr(attr: str) -> Setter:
    def setter(command: Any, value: Any) -> None:
        setattr(command, attr, value)

    return setter


def _append_attr(attr: str) -> Setter:
    def setter(command: Any, value: Any) -> None:
        values = getattr(command, attr, None)
        if values is None:
            values = []
            setattr(command, attr, values)
        values.append(value)

    return setter


class OptionTableBuilder:
    """Fluent builder producing an immutable :class:`OptionTable`."""

    def __init__(self) -> None:
        self._descriptors: list[OptionDescriptor] = []

    def add(
        self,
        name: str,
        kind: OptionKind,
        description: str = "",
        *,
        attr: str | None = None,
        alt_name: str | None = None,
        setter: Setter | None = None,
    ) -> OptionTableBuilder:
        """Declare an option of any kind.

        A custom *setter* overrides the attribute-based default.
        """
        if not name:
            raise CommandRegistrationError("Option name must not be empty.")
        if setter is None:
            target = attr or to_attr_name(name)
            if kind is OptionKind.MULTI:
                setter = _append_attr(target)
            else:
                setter = _assign_attr(target)
        self._descriptors.append(
            OptionDescriptor(
                name=name,
                kind=kind,
                setter=setter,
                description=description,
                alt_name=alt_name,
            )
        )
        return self

    def flag(self, name: str, description: str = "", **kwargs: Any) -> OptionTableBuilder:
        return self.add(name, OptionKind.BOOL, description, **kwargs)

    def string(self, name: str, description: str = "", **kwargs: Any) -> OptionTableBuilder:
        return self.add(name, OptionKind.STRING, description, **kwargs)

    def integer(self, name: str, description: str = "", **kwargs: Any) -> OptionTableBuilder:
        return self.add(name, OptionKind.INT, description, **kwargs)

    def number(self, name: str, description: str = "", **kwargs: Any) -> OptionTableBuilder:
        return self.add(name, OptionKind.FLOAT, description, **kwargs)

    def multi(self, name: str, description: str = "", **kwargs: Any) -> OptionTableBuilder:
        return self.add(name, OptionKind.MULTI, description, **kwargs)

    def build(self) -> OptionTable:
        return OptionTable(tuple(self._descriptors))
