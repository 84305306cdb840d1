"""Tests for the line classifier — directive vs payload, malformed directives."""

from __future__ import annotations

import pytest

from ftee.core.classifier import classify
from ftee.core.errors import (
    MalformedDirectiveError,
    MissingTargetsError,
    MultipleDelimitersError,
    UnboundedDelimiterError,
)


class TestPayloadLines:
    @pytest.mark.parametrize(
        "line",
        [
            "lorem ipsum sit amet ...\n",
            "\n",
            "",
            "ftee in lower case is not the delimiter\n",
        ],
    )
    def test_line_without_delimiter_is_payload(self, line: str):
        result = classify("FTEE", line)
        assert result.is_directive is False
        assert result.names == []


class TestDirectiveLines:
    def test_names_after_delimiter(self):
        result = classify("FTEE", "// FTEE foo.bar baz.txt")
        assert result.is_directive is True
        assert result.names == ["foo.bar", "baz.txt"]

    @pytest.mark.parametrize(
        "line",
        [
            "FTEE somefile\n",
            "// FTEE somefile\n",
            "\t# FTEE somefile\n",
            "What do you get when you cross a gopher and an elephant? An FTEE somefile\n",
        ],
    )
    def test_leading_commentary_is_ignored(self, line: str):
        assert classify("FTEE", line).names == ["somefile"]

    def test_duplicate_names_preserved(self):
        assert classify("FTEE", "FTEE a b a\n").names == ["a", "b", "a"]

    def test_tabs_and_crlf_are_whitespace(self):
        assert classify("FTEE", "FTEE\tout1\t out2\r\n").names == ["out1", "out2"]

    def test_custom_delimiter(self):
        result = classify("@@split", "-- @@split one.sql")
        assert result.names == ["one.sql"]

    def test_default_delimiter_is_plain_text_for_custom_delimiter(self):
        assert classify("@@split", "FTEE one.sql").is_directive is False


class TestMalformedDirectives:
    @pytest.mark.parametrize("line", ["//FTEE somefile", "FTEEsomefile", "x FTEE:y"])
    def test_delimiter_without_whitespace_boundaries(self, line: str):
        with pytest.raises(UnboundedDelimiterError) as info:
            classify("FTEE", line)
        assert str(info.value) == "Delimiter FTEE must be surrounded by whitespace"

    def test_second_delimiter_rejected(self):
        with pytest.raises(MultipleDelimitersError) as info:
            classify("FTEE", "// FTEE foo.bar FTEE baz.txt")
        assert str(info.value) == "Found more than one delimiter FTEE in line."

    def test_adjacent_delimiters_rejected(self):
        with pytest.raises(MultipleDelimitersError):
            classify("FTEE", "FTEE FTEE")

    def test_no_names_after_delimiter(self):
        with pytest.raises(MissingTargetsError) as info:
            classify("FTEE", "// FTEE")
        assert str(info.value) == "No file names found after delimiter FTEE"

    def test_block_comment_close_is_taken_as_a_name(self):
        # "*/" is just another field; only the delimiter is special
        assert classify("FTEE", "/* FTEE somefile */").names == ["somefile", "*/"]

    def test_all_malformed_errors_share_a_base(self):
        for line in ("//FTEE x", "FTEE a FTEE b", "FTEE"):
            with pytest.raises(MalformedDirectiveError):
                classify("FTEE", line)


class TestResultIndependence:
    def test_payload_results_are_not_shared(self):
        first = classify("FTEE", "plain text\n")
        first.names.append("leaked")
        assert classify("FTEE", "other text\n").names == []
