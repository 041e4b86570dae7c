"""Token classification: positional argument or option reference."""

from __future__ import annotations

from dataclasses import dataclass

OPTION_PREFIXES: tuple[str, ...] = ("/", "-")
"""Lead characters that mark a token as an option reference."""

NEGATION_MARKER: str = "-"
"""Trailing marker that sets a boolean option to ``False``."""


@dataclass(frozen=True, slots=True)
class OptionReference:
    """An option token split into its lookup name and negation flag."""

    token: str
    """The original token, prefix and marker included (used in errors)."""

    name: str
    """Candidate option name used for descriptor lookup."""

    negated: bool = False
    """``True`` when the name carried a trailing negation marker."""


def is_option_token(token: str) -> bool:
    return token.startswith(OPTION_PREFIXES)


def classify_token(token: str) -> OptionReference | None:
    """Classify *token*.

    Returns ``None`` for a positional argument (the caller keeps the
    token verbatim), otherwise the parsed :class:`OptionReference`.
    """
    if not is_option_token(token):
        return None

    name = token[1:]
    negated = False
    if name.endswith(NEGATION_MARKER):
        name = name.rstrip(NEGATION_MARKER)
        negated = True
    return OptionReference(token=token, name=name, negated=negated)
