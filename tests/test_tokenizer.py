"""Tests for the argument cursor and token source (core/tokenizer.py)."""

from __future__ import annotations

from nuget_cmdline.core.tokenizer import (
    ArgumentCursor,
    as_cursor,
    get_next_command_line_item,
)


# ---------------------------------------------------------------------------
# get_next_command_line_item
# ---------------------------------------------------------------------------

class TestGetNextCommandLineItem:
    def test_returns_none_with_none_input(self) -> None:
        assert get_next_command_line_item(None) is None

    def test_returns_none_with_empty_input(self) -> None:
        assert get_next_command_line_item(ArgumentCursor([])) is None

    def test_returns_tokens_in_order(self) -> None:
        cursor = ArgumentCursor(["pack", "-Verbose"])
        assert get_next_command_line_item(cursor) == "pack"
        assert get_next_command_line_item(cursor) == "-Verbose"
        assert get_next_command_line_item(cursor) is None

    def test_stays_exhausted(self) -> None:
        cursor = ArgumentCursor(["only"])
        get_next_command_line_item(cursor)
        assert get_next_command_line_item(cursor) is None
        assert get_next_command_line_item(cursor) is None

    def test_empty_string_is_a_token(self) -> None:
        cursor = ArgumentCursor([""])
        assert get_next_command_line_item(cursor) == ""
        assert cursor.exhausted


# ---------------------------------------------------------------------------
# ArgumentCursor
# ---------------------------------------------------------------------------

class TestArgumentCursor:
    def test_none_is_empty(self) -> None:
        cursor = ArgumentCursor(None)
        assert cursor.exhausted
        assert len(cursor) == 0

    def test_peek_does_not_advance(self) -> None:
        cursor = ArgumentCursor(["a", "b"])
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.position == 0

    def test_advance_moves_one_position(self) -> None:
        cursor = ArgumentCursor(["a", "b"])
        assert cursor.advance() == "a"
        assert cursor.position == 1
        assert len(cursor) == 1
        assert cursor.peek() == "b"

    def test_copies_input(self) -> None:
        args = ["a"]
        cursor = ArgumentCursor(args)
        args.append("b")
        assert cursor.advance() == "a"
        assert cursor.advance() is None

    def test_accepts_generator(self) -> None:
        cursor = ArgumentCursor(token for token in ("x", "y"))
        assert cursor.advance() == "x"
        assert cursor.advance() == "y"


class TestAsCursor:
    def test_returns_existing_cursor(self) -> None:
        cursor = ArgumentCursor(["a"])
        assert as_cursor(cursor) is cursor

    def test_wraps_list(self) -> None:
        cursor = as_cursor(["a"])
        assert isinstance(cursor, ArgumentCursor)
        assert cursor.peek() == "a"

    def test_wraps_none(self) -> None:
        assert as_cursor(None).exhausted
