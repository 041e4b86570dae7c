"""Custom exception hierarchy for nuget-cmdline.

Every failure the parser reports is attributable to malformed user
input and is surfaced as a :class:`CommandLineError`.  The message text
of each subclass is part of the CLI contract and must stay bit-exact.

Hierarchy
---------
NuGetCmdlineError
├── CommandLineError
│   ├── UnknownCommandError
│   ├── UnknownOptionError
│   ├── MissingOptionValueError
│   └── InvalidOptionValueError
└── CommandRegistrationError
"""

from __future__ import annotations


class NuGetCmdlineError(Exception):
    """Base exception for all nuget-cmdline errors.

    The CLI error boundary renders any subclass as a clean one-line
    message instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing / binding -----------------------------------------------------

class CommandLineError(NuGetCmdlineError):
    """Raised when the raw argument sequence cannot be parsed or bound."""


class UnknownCommandError(CommandLineError):
    """Raised when the first token names no registered command."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown command: '{name}'",
            hint="Run 'help' to list the available commands.",
        )
        self.name: str = name


class UnknownOptionError(CommandLineError):
    """Raised when an option token names no declared option."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option: '{token}'")
        self.token: str = token


class MissingOptionValueError(CommandLineError):
    """Raised when a value-taking option is the last token."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Missing option value for: '{token}'")
        self.token: str = token


class InvalidOptionValueError(CommandLineError):
    """Raised when an option value cannot be converted to the option type."""

    def __init__(self, token: str, value: str) -> None:
        super().__init__(f"Invalid option value: '{token} {value}'")
        self.token: str = token
        self.value: str = value


# --- Command declaration ---------------------------------------------------

class CommandRegistrationError(NuGetCmdlineError):
    """Raised when a command or option table is declared inconsistently.

    This signals a programming error in a command definition, not bad
    user input.
    """
