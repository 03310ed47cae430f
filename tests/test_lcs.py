"""Tests for the longest common substring.

The scorer multiplies by the length of this substring, so both the length
and which run is picked among equal-length runs matter.
"""

import pytest

import fuzzyrank as fk


class TestLongestCommonSubstring:
    """Tests for longest_common_substring."""

    def test_basic(self):
        assert fk.longest_common_substring("abcdef", "zbcdf") == "bcd"
        assert fk.longest_common_substring_length("abcdef", "zbcdf") == 3

    def test_identical(self):
        assert fk.longest_common_substring("Card", "Card") == "Card"

    def test_substring_of_other(self):
        assert fk.longest_common_substring("xabcx", "abc") == "abc"
        assert fk.longest_common_substring("abc", "xabcx") == "abc"

    def test_query_against_candidate(self):
        assert fk.longest_common_substring("Card", "crd") == "rd"
        assert fk.longest_common_substring("Get-ChildItem", "gci") == "G"


class TestLongestCommonSubstringCase:
    """Case handling and which text the run is taken from."""

    def test_default_ignores_case(self):
        assert fk.longest_common_substring_length("HELLO", "hello") == 5

    def test_result_taken_from_first_string(self):
        assert fk.longest_common_substring("CARD", "crd") == "RD"
        assert fk.longest_common_substring("crd", "CARD") == "rd"

    def test_case_sensitive(self):
        assert fk.longest_common_substring("ABC", "abc", ignore_case=False) == ""
        assert fk.longest_common_substring("ABcd", "abcd", ignore_case=False) == "cd"


class TestLongestCommonSubstringTies:
    """Among runs of equal length, the first one reached in the first string wins."""

    def test_first_run_wins(self):
        # "ab" (offset 0) and "cd" (offset 3) are both length 2
        assert fk.longest_common_substring("abxcd", "cdab") == "ab"
        assert fk.longest_common_substring("cdxab", "abcd") == "cd"

    def test_single_characters(self):
        assert fk.longest_common_substring("abc", "ca") == "a"

    def test_longer_run_replaces_earlier(self):
        assert fk.longest_common_substring("abxbcd", "bcd") == "bcd"

    def test_equal_run_later_does_not_replace(self):
        # Both runs fold to "ab"; the returned slice shows which start was kept
        assert fk.longest_common_substring("ABab", "ab") == "AB"
        assert fk.longest_common_substring("abAB", "ab") == "ab"


class TestLongestCommonSubstringEdgeCases:
    """Tests for edge cases."""

    def test_empty_strings(self):
        assert fk.longest_common_substring("", "") == ""
        assert fk.longest_common_substring("abc", "") == ""
        assert fk.longest_common_substring("", "abc") == ""
        assert fk.longest_common_substring_length("", "") == 0

    def test_no_common(self):
        assert fk.longest_common_substring("abc", "xyz") == ""
        assert fk.longest_common_substring_length("abc", "xyz") == 0

    def test_none_raises(self):
        with pytest.raises(TypeError):
            fk.longest_common_substring(None, "abc")
