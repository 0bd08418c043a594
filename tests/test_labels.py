"""Unit tests for ingestkit_ascii.labels -- column-label extraction."""

from __future__ import annotations

import pytest

from ingestkit_ascii.labels import (
    count_sensible_labels,
    get_column_labels,
    is_sensible_label,
)


class TestIsSensibleLabel:
    """Tests for the numeric-token filter."""

    @pytest.mark.parametrize(
        "token", ["1.0", " 2 ", "-3e5", "NaN", "inf", "1.0 2.0", "3 mass", "4,x"]
    )
    def test_numbers_rejected(self, token):
        assert is_sensible_label(token) is False

    @pytest.mark.parametrize("token", ["mass", "x", "1) mass", "rho [g/cm^3]", "", "v_x"])
    def test_text_accepted(self, token):
        assert is_sensible_label(token) is True

    def test_count_sensible_labels(self):
        assert count_sensible_labels(["mass", "1.0", "x", "2", "y"]) == 3


class TestBracketStyle:
    """``# [ label ] [ label ]`` headers."""

    def test_basic(self):
        labels = get_column_labels("# [ mass ] [ x ] [ y ]")
        assert labels.labels == ["mass", "x", "y"]
        assert labels.count == 3

    def test_no_numeric_filtering(self):
        labels = get_column_labels("# [ 1.0 ] [ x ]")
        assert labels.count == 2

    def test_bracket_wins_over_comma(self):
        labels = get_column_labels("# [ a, b ] [ c ]")
        assert labels.labels == ["a b", "c"]

    def test_enumerated_brackets(self):
        labels = get_column_labels("#  [01   x     ]  [02   y     ]  [03   z     ]")
        assert labels.labels == ["x", "y", "z"]

    def test_text_after_equals_sign(self):
        labels = get_column_labels("# columns = [ t ] [ energy ]")
        assert labels.labels == ["t", "energy"]


class TestCommaStyle:
    """``a,b,c`` headers."""

    def test_filters_numbers(self):
        labels = get_column_labels("mass,1.0,x,y")
        assert labels.labels == ["mass", "x", "y"]
        assert labels.count == 3

    def test_comment_prefix(self):
        labels = get_column_labels("# time, energy, momentum")
        assert labels.labels == ["time", "energy", "momentum"]

    def test_enumerated(self):
        labels = get_column_labels("#  1)mass,  2) x,  10) [y]")
        assert labels.labels == ["mass", "x", "y"]

    def test_leading_comma_uses_whitespace_style(self):
        labels = get_column_labels(",a  b")
        assert labels.labels == ["a", "b"]


class TestWhitespaceStyle:
    """``#   label   label`` headers."""

    def test_enumerated(self):
        labels = get_column_labels("#     1) mass     2) x")
        assert labels.labels == ["mass", "x"]

    def test_plain_columns(self):
        labels = get_column_labels("#   time     energy     angular momentum")
        assert labels.labels == ["time", "energy", "angular momentum"]

    def test_numbers_dropped(self):
        labels = get_column_labels("#  time  0.5  energy")
        assert labels.labels == ["time", "energy"]

    def test_single_spaced_numbers_rejected(self):
        assert get_column_labels("#   1.0 2.0   3.0 4.0").count == 0

    def test_single_spaced_numbers_between_labels(self):
        labels = get_column_labels("#  time   1 2   energy")
        assert labels.labels == ["time", "energy"]

    def test_single_spaced_words_form_one_label(self):
        labels = get_column_labels("# x y z")
        assert labels.labels == ["x y z"]


class TestEdgeCases:
    """Empty input and capacity handling."""

    def test_empty_line(self):
        labels = get_column_labels("")
        assert labels.count == 0
        assert labels.labels == []

    def test_comment_only(self):
        assert get_column_labels("#").count == 0

    def test_numeric_line(self):
        assert get_column_labels("1.0  2.0  3.0").count == 0

    def test_capacity_truncates_but_counts(self):
        labels = get_column_labels("a,b,c,d,e", capacity=3)
        assert labels.count == 5
        assert labels.labels == ["a", "b", "c"]
        assert labels.usable == ["a", "b", "c"]
        assert labels.truncated is True

    def test_usable_within_capacity(self):
        labels = get_column_labels("a,b", capacity=10)
        assert labels.usable == ["a", "b"]
        assert labels.truncated is False

    def test_long_line_counts_every_label(self):
        line = "#  " + "  ".join(f"col{i}" for i in range(500))
        labels = get_column_labels(line, capacity=10)
        assert labels.count == 500
        assert labels.labels == [f"col{i}" for i in range(10)]
        assert labels.truncated is True

    def test_zero_capacity(self):
        labels = get_column_labels("a,b,c", capacity=0)
        assert labels.count == 3
        assert labels.labels == []
