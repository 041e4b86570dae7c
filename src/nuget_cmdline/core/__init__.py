"""Core layer — tokenizing, classifying and binding command-line input.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from nuget_cmdline.core.binder import OptionBinder, convert_value
from nuget_cmdline.core.classifier import OptionReference, classify_token
from nuget_cmdline.core.command import Command, CommandMetadata
from nuget_cmdline.core.options import (
    OptionDescriptor,
    OptionKind,
    OptionTable,
    OptionTableBuilder,
)
from nuget_cmdline.core.parser import CommandLineParser
from nuget_cmdline.core.protocols import CommandRegistry
from nuget_cmdline.core.registry import CommandManager
from nuget_cmdline.core.tokenizer import ArgumentCursor, get_next_command_line_item

__all__: list[str] = [
    "ArgumentCursor",
    "Command",
    "CommandLineParser",
    "CommandManager",
    "CommandMetadata",
    "CommandRegistry",
    "OptionBinder",
    "OptionDescriptor",
    "OptionKind",
    "OptionReference",
    "OptionTable",
    "OptionTableBuilder",
    "classify_token",
    "convert_value",
    "get_next_command_line_item",
]
