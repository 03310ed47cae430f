"""Reference correctness tests comparing fuzzyrank against rapidfuzz.

These tests verify that the edit distance and normalized similarity agree
with a well-known reference implementation.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, given, settings

import fuzzyrank as fk

# Import rapidfuzz as reference implementation
try:
    from rapidfuzz.distance import Levenshtein as rf_levenshtein

    HAS_RAPIDFUZZ = True
except ImportError:
    HAS_RAPIDFUZZ = False


# Strategy for ASCII strings (avoiding unicode case-mapping differences)
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=50
)


@pytest.mark.skipif(not HAS_RAPIDFUZZ, reason="rapidfuzz not installed")
class TestLevenshteinReference:
    """Test Levenshtein distance against the rapidfuzz reference."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_case_sensitive_matches_rapidfuzz(self, a: str, b: str):
        expected = rf_levenshtein.distance(a, b)
        actual = fk.levenshtein(a, b, ignore_case=False)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_case_insensitive_matches_rapidfuzz(self, a: str, b: str):
        expected = rf_levenshtein.distance(a.lower(), b.lower())
        assert fk.levenshtein(a, b) == expected

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_similarity_matches_rapidfuzz(self, a: str, b: str):
        expected = rf_levenshtein.normalized_similarity(a, b)
        actual = fk.levenshtein_similarity(a, b, ignore_case=False)
        assert actual == pytest.approx(expected)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("kitten", "sitting"),
            ("Get-ChildItem", "gci"),
            ("src/scoring/metrics.py", "smetrics"),
            ("", "abc"),
        ],
    )
    def test_known_pairs(self, a, b):
        assert fk.levenshtein(a, b, ignore_case=False) == rf_levenshtein.distance(a, b)
