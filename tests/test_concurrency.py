"""
Concurrency tests for asearch.

Tests cover:
- Thread safety documentation
- One compiled matcher shared by many threads
"""

import concurrent.futures

import asearch as asr
from asearch import Asearch, MatchMode


class TestThreadSafetyDocumentation:
    def test_asearch_docstring_mentions_threads(self):
        assert "thread" in (Asearch.__doc__ or "").lower()

    def test_compiled_pattern_docstring_mentions_threads(self):
        assert "thread" in (asr.CompiledPattern.__doc__ or "").lower()


class TestSharedMatcher:
    """A single matcher used from several threads gives consistent answers."""

    def test_shared_exact(self):
        a = Asearch("abcde")
        cases = [("abcde", 0, True), ("abXcde", 0, False), ("abXcde", 1, True), ("abXXde", 1, False), ("abXXde", 2, True)]

        def worker(_):
            return [a.match(query, d) == expected for query, d, expected in cases * 50]

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(worker, range(16)))

        assert all(all(r) for r in results)

    def test_shared_include_distances(self):
        a = Asearch("needle", MatchMode.INCLUDE)
        queries = [f"{'x' * i}needle{'y' * i}" for i in range(50)] + ["hay" * 20]
        expected = [a.distance(q, 3) for q in queries]

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(lambda: [a.distance(q, 3) for q in queries]) for _ in range(8)]
            for future in concurrent.futures.as_completed(futures):
                assert future.result() == expected

    def test_compiled_tables_unchanged(self):
        a = Asearch("abc")
        before = dict(a.compiled.character_masks)

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            list(executor.map(lambda q: a.match(q, 2), ["abc", "xyz", "aXc", "zzzz"] * 100))

        assert dict(a.compiled.character_masks) == before
