"""
Concurrency tests for fuzzyrank.

Tests cover:
- Thread safety documentation verification
- A shared FuzzyMatcher gives the same results from many threads
- Threaded batch scoring matches sequential scoring
"""

import concurrent.futures

import fuzzyrank as fk
import fuzzyrank.batch as batch
from fixtures.real_data import COMMAND_NAMES, FILE_PATHS


class TestThreadSafetyDocumentation:
    """Verify thread safety is documented."""

    def test_fuzzy_matcher_docstring(self):
        docstring = fk.FuzzyMatcher.__doc__ or ""
        assert "thread" in docstring.lower(), "Missing thread-safety note in FuzzyMatcher docstring"


class TestSharedMatcher:
    """A single FuzzyMatcher used from several threads."""

    def test_shared_matcher(self):
        matcher = fk.FuzzyMatcher("sc")
        candidates = COMMAND_NAMES + FILE_PATHS
        expected = list(matcher.iter_matches(candidates))

        def worker(_):
            return list(matcher.iter_matches(candidates))

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(worker, range(16)))

        assert all(r == expected for r in results)

    def test_parallel_queries(self):
        queries = ["gci", "sel", "obj", "item", "", "zzz"]
        expected = {q: fk.fuzzy_match(q, COMMAND_NAMES) for q in queries}

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            futures = {q: executor.submit(fk.fuzzy_match, q, COMMAND_NAMES) for q in queries}
            actual = {q: f.result() for q, f in futures.items()}

        assert actual == expected


class TestParallelBatch:
    """batch.score with a thread pool."""

    def test_large_input_order(self):
        candidates = [f"item_{i:05d}" for i in range(2000)]
        sequential = batch.score(candidates, "i1")
        parallel = batch.score(candidates, "i1", workers=8)
        assert parallel == sequential
        assert [r.result for r in parallel] == [c for c in candidates if "1" in c]
