"""Tests for counter text parsing and formatting."""

import pytest

from odometer_app.counter.parser import format_groups, parse_groups
from odometer_app.digits import CompositeDigit
from odometer_app.errors import (
    CounterParseError,
    EmptyInputError,
    InvalidGroupError,
    MalformedGroupError,
    SeparatorError,
    TooManyGroupsError,
)


class TestParseGroups:
    """Test parsing of XY-XY-...-XY text."""

    def test_single_group(self):
        """Test one group parses to one composite digit."""
        groups = parse_groups("B7")
        assert [g.identifier() for g in groups] == ["B7"]

    def test_groups_in_text_order(self):
        """Test groups come back most significant first."""
        groups = parse_groups("Z9-A1-K5")
        assert [g.identifier() for g in groups] == ["Z9", "A1", "K5"]

    def test_ten_groups_accepted(self, full_maximum):
        """Test the maximum group count parses."""
        assert len(parse_groups(full_maximum)) == 10

    def test_custom_separator(self):
        """Test a different separator character."""
        groups = parse_groups("A1.B2", separator=".")
        assert [g.identifier() for g in groups] == ["A1", "B2"]

    def test_empty_input(self):
        """Test empty text is rejected."""
        with pytest.raises(EmptyInputError):
            parse_groups("")

    @pytest.mark.parametrize("text,position", [
        ("A", 0),
        ("A1-B", 3),
    ])
    def test_truncated_group(self, text, position):
        """Test text ending inside a group."""
        with pytest.raises(MalformedGroupError) as exc_info:
            parse_groups(text)
        assert exc_info.value.position == position

    @pytest.mark.parametrize("text,group", [
        ("D1", "D1"),
        ("A0", "A0"),
        ("a1", "a1"),
        ("A1-M3", "M3"),
        ("A1--B2", "-B"),
        (" A1", " A"),
    ])
    def test_invalid_group(self, text, group):
        """Test groups with characters outside the alphabets."""
        with pytest.raises(InvalidGroupError) as exc_info:
            parse_groups(text)
        assert exc_info.value.group == group

    def test_missing_separator(self):
        """Test groups run together without a separator."""
        with pytest.raises(SeparatorError) as exc_info:
            parse_groups("A1B2")
        assert exc_info.value.found == "B"
        assert exc_info.value.position == 2

    def test_trailing_garbage_rejects_whole_input(self):
        """Test a valid prefix does not rescue trailing text."""
        with pytest.raises(SeparatorError):
            parse_groups("A1-B2 ")

    def test_dangling_separator(self):
        """Test separator with nothing after it."""
        with pytest.raises(SeparatorError) as exc_info:
            parse_groups("A1-")
        assert exc_info.value.position == 2

    def test_too_many_groups(self):
        """Test more groups than the limit."""
        with pytest.raises(TooManyGroupsError) as exc_info:
            parse_groups("-".join(["A1"] * 11))
        assert exc_info.value.limit == 10
        assert exc_info.value.count == 11

    def test_custom_limit(self):
        """Test a smaller group limit."""
        with pytest.raises(TooManyGroupsError):
            parse_groups("A1-A1-A1", max_groups=2)

    def test_errors_share_base_class(self):
        """Test every parse failure is a recoverable CounterParseError."""
        with pytest.raises(CounterParseError) as exc_info:
            parse_groups("Q1")
        assert exc_info.value.recoverable is True
        assert exc_info.value.text == "Q1"


class TestFormatGroups:
    """Test joining groups back into text."""

    def test_joins_with_separator(self):
        """Test default separator."""
        groups = [CompositeDigit.from_text(g) for g in ("C3", "A1")]
        assert format_groups(groups) == "C3-A1"

    def test_custom_separator(self):
        """Test alternative separator."""
        groups = [CompositeDigit.from_text(g) for g in ("C3", "A1")]
        assert format_groups(groups, separator="/") == "C3/A1"

    @pytest.mark.parametrize("text", ["A1", "Z9-A1", "B2-C3-E4-H5-I6-K7-L8-N9-O1-P2"])
    def test_round_trip(self, text):
        """Test accepted text formats back identically."""
        assert format_groups(parse_groups(text)) == text
