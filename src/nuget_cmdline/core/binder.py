"""Option binder — converts raw option values and assigns them.

The binder is the only component that writes option values onto a
command.  It consumes at most one extra token from the cursor, and only
for options whose kind takes a value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from nuget_cmdline.core.classifier import OptionReference
from nuget_cmdline.core.options import OptionDescriptor, OptionKind, OptionTable
from nuget_cmdline.core.tokenizer import ArgumentCursor, get_next_command_line_item
from nuget_cmdline.exceptions import (
    InvalidOptionValueError,
    MissingOptionValueError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------

def _to_int(raw: str) -> int:
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {raw!r}")
    return int(text)


def _identity(raw: str) -> str:
    return raw


_CONVERTERS: dict[OptionKind, Callable[[str], Any]] = {
    OptionKind.STRING: _identity,
    OptionKind.MULTI: _identity,
    OptionKind.INT: _to_int,
    OptionKind.FLOAT: float,
}


def convert_value(kind: OptionKind, raw: str) -> Any:
    """Convert *raw* to the Python value for *kind*.

    Raises
    ------
    ValueError
        If *raw* is not valid text for *kind*.
    """
    if kind is OptionKind.BOOL:
        raise ValueError("boolean options do not take a value")
    return _CONVERTERS[kind](raw)


# ---------------------------------------------------------------------------
# Binder
# ---------------------------------------------------------------------------

class OptionBinder:
    """Resolve an option reference against a table and assign its value."""

    def bind(
        self,
        command: Any,
        options: OptionTable,
        reference: OptionReference,
        cursor: ArgumentCursor | None,
    ) -> OptionDescriptor:
        """Bind *reference* onto *command* and return the matched descriptor.

        Raises
        ------
        UnknownOptionError
            If no descriptor matches the reference name.
        MissingOptionValueError
            If a value-taking option is not followed by a token.
        InvalidOptionValueError
            If the value cannot be converted to the option's kind.
        """
        descriptor = options.find(reference.name)
        if descriptor is None:
            raise UnknownOptionError(reference.token)

        if descriptor.kind is OptionKind.BOOL:
            value: Any = not reference.negated
        else:
            raw = get_next_command_line_item(cursor)
            if raw is None:
                raise MissingOptionValueError(reference.token)
            try:
                value = convert_value(descriptor.kind, raw)
            except ValueError as exc:
                raise InvalidOptionValueError(reference.token, raw) from exc

        descriptor.assign(command, value)
        logger.debug("Bound option %s = %r", descriptor.name, value)
        return descriptor
