"""Tests for the common prefix measure."""

import pytest

import fuzzyrank as fk


class TestCommonPrefix:
    """Tests for common_prefix."""

    def test_basic(self):
        assert fk.common_prefix("abc", "abd") == "ab"
        assert fk.common_prefix("xyz", "abc") == ""

    def test_identical(self):
        assert fk.common_prefix("abc", "abc") == "abc"

    def test_shorter_string_bounds_result(self):
        assert fk.common_prefix("ab", "abc") == "ab"
        assert fk.common_prefix("abc", "ab") == "ab"

    def test_empty(self):
        assert fk.common_prefix("", "abc") == ""
        assert fk.common_prefix("", "") == ""

    def test_case_sensitive(self):
        assert fk.common_prefix("Abc", "abc") == ""
        assert fk.common_prefix("Card", "Ca") == "Ca"


class TestCommonPrefixMaxLength:
    """Tests for the max_length bound."""

    def test_bound(self):
        assert fk.common_prefix("abcdef", "abcdef", max_length=2) == "ab"

    def test_bound_larger_than_strings(self):
        assert fk.common_prefix("abc", "abcdef", max_length=10) == "abc"

    def test_zero_bound(self):
        assert fk.common_prefix("abc", "abc", max_length=0) == ""

    def test_negative_bound_raises(self):
        with pytest.raises(fk.ValidationError):
            fk.common_prefix("abc", "abc", max_length=-1)

    def test_none_raises(self):
        with pytest.raises(TypeError):
            fk.common_prefix(None, "abc")
