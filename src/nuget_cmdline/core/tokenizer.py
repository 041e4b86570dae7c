"""Forward-only token source over a raw argument sequence.

The cursor is an explicit index over an immutable copy of the input, so
a parse never depends on the caller's iterator protocol and never
observes later mutation of the caller's list.
"""

from __future__ import annotations

from collections.abc import Iterable


class ArgumentCursor:
    """Ordered, forward-only view of command-line tokens.

    Parameters
    ----------
    args:
        Any iterable of strings.  ``None`` is treated as an empty
        sequence.
    """

    __slots__ = ("_args", "_index")

    def __init__(self, args: Iterable[str] | None = None) -> None:
        self._args: tuple[str, ...] = tuple(args) if args is not None else ()
        self._index: int = 0

    @property
    def position(self) -> int:
        """Number of tokens consumed so far."""
        return self._index

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._args)

    def peek(self) -> str | None:
        """Return the next token without consuming it."""
        if self.exhausted:
            return None
        return self._args[self._index]

    def advance(self) -> str | None:
        """Consume and return the next token, or ``None`` at the end."""
        token = self.peek()
        if token is not None:
            self._index += 1
        return token

    def __len__(self) -> int:
        return len(self._args) - self._index

    def __repr__(self) -> str:
        return f"ArgumentCursor(position={self._index}, total={len(self._args)})"


def get_next_command_line_item(cursor: ArgumentCursor | None) -> str | None:
    """Return the next token from *cursor*, or ``None`` when there is none.

    A missing cursor is a normal terminal condition, not an error.
    """
    if cursor is None:
        return None
    return cursor.advance()


def as_cursor(args: ArgumentCursor | Iterable[str] | None) -> ArgumentCursor:
    """Wrap *args* in a cursor unless it already is one."""
    if isinstance(args, ArgumentCursor):
        return args
    return ArgumentCursor(args)
