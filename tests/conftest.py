"""Shared pytest fixtures and configuration for the nuget-cmdline test suite.

Guidelines
----------
* Core tests are pure: no I/O, no global state.
* Parser tests replace the registry with ``MagicMock`` where only the
  parser is under test.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from nuget_cmdline.cli import exit_codes
from nuget_cmdline.core.command import Command, CommandMetadata
from nuget_cmdline.core.options import OptionTable, OptionTableBuilder
from nuget_cmdline.core.registry import CommandManager


class MockCommand(Command):
    """Command with one option of each kind."""

    metadata = CommandMetadata(
        name="Mock",
        description="Mock Command Attribute",
        usage_summary="<target> [options]",
    )
    options = (
        OptionTableBuilder()
        .string("Message", "Text to carry.")
        .flag("IsWorking", "Whether the mock is working.")
        .integer("Count", "A counter.")
        .number("Ratio", "A ratio.")
        .multi("Source", "A repeatable source.", attr="sources", alt_name="Src")
        .build()
    )

    def __init__(self) -> None:
        super().__init__()
        self.message: str | None = None
        self.is_working: bool = False
        self.count: int = 0
        self.ratio: float = 0.0
        self.sources: list[str] = []

    def execute(self) -> int:
        return exit_codes.SUCCESS


def single_option_table(name: str) -> OptionTable:
    """Return a table holding only the MockCommand option *name*."""
    descriptor = MockCommand.options.find(name)
    assert descriptor is not None
    return OptionTable((descriptor,))


@pytest.fixture
def mock_command() -> MockCommand:
    return MockCommand()


@pytest.fixture
def mock_registry() -> MagicMock:
    """Registry double exposing every MockCommand option."""
    registry = MagicMock()
    registry.get_option_descriptors.return_value = MockCommand.options
    registry.get_command_metadata.return_value = MockCommand.metadata
    registry.resolve.side_effect = lambda name: (
        MockCommand() if name.lower() == "mock" else None
    )
    return registry


@pytest.fixture
def manager() -> CommandManager:
    mgr = CommandManager()
    mgr.register(MockCommand)
    return mgr
