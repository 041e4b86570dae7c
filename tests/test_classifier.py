"""Tests for token classification (core/classifier.py)."""

from __future__ import annotations

import pytest

from nuget_cmdline.core.classifier import OptionReference, classify_token, is_option_token


class TestPositionalTokens:
    @pytest.mark.parametrize("token", ["optionOne", "foo bar", " -padded", "", "a/b", "x-"])
    def test_non_prefixed_tokens_are_positional(self, token: str) -> None:
        assert classify_token(token) is None
        assert not is_option_token(token)


class TestOptionTokens:
    @pytest.mark.parametrize("token", ["/Message", "-Message"])
    def test_both_prefixes_yield_same_name(self, token: str) -> None:
        ref = classify_token(token)
        assert ref == OptionReference(token=token, name="Message", negated=False)

    def test_trailing_dash_marks_negation(self) -> None:
        ref = classify_token("-IsWorking-")
        assert ref is not None
        assert ref.name == "IsWorking"
        assert ref.negated is True
        assert ref.token == "-IsWorking-"

    def test_slash_with_trailing_dash(self) -> None:
        ref = classify_token("/IsWorking-")
        assert ref is not None
        assert ref.name == "IsWorking"
        assert ref.negated is True

    def test_run_of_trailing_dashes_is_stripped(self) -> None:
        ref = classify_token("-Flag--")
        assert ref is not None
        assert ref.name == "Flag"
        assert ref.negated is True

    def test_double_dash_keeps_inner_dash(self) -> None:
        ref = classify_token("--Flag")
        assert ref is not None
        assert ref.name == "-Flag"
        assert ref.negated is False

    def test_lone_prefix_has_empty_name(self) -> None:
        ref = classify_token("/")
        assert ref is not None
        assert ref.name == ""

    def test_reference_is_frozen(self) -> None:
        ref = classify_token("-Message")
        assert ref is not None
        with pytest.raises(AttributeError):
            ref.name = "Other"  # type: ignore[misc]
