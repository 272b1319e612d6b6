"""
Tests for utilsuite.core.text.

Covers:
- levenshtein literal cases and edge cases (empty, None, non-string sequences)
- levenshtein metric properties: identity, symmetry, triangle inequality
- title_case normalisation
"""

import itertools
import random
import string

import pytest

from utilsuite.core.text import levenshtein, title_case


def _naive_distance(a, b) -> int:
    """Full-matrix reference implementation."""
    m, n = len(a), len(b)
    d = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        d[i][0] = i
    for j in range(n + 1):
        d[0][j] = j
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost)
    return d[m][n]


class TestLevenshteinLiterals:
    def test_kitten_sitting(self):
        assert levenshtein("kitten", "sitting") == 3

    def test_both_empty(self):
        assert levenshtein("", "") == 0

    def test_equal(self):
        assert levenshtein("abc", "abc") == 0

    def test_target_empty(self):
        assert levenshtein("abc", "") == 3

    def test_source_empty(self):
        assert levenshtein("", "hello") == 5

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("flaw", "lawn", 2),
            ("intention", "execution", 5),
            ("a", "b", 1),
            ("ab", "ba", 2),
            ("book", "back", 2),
            ("sunday", "saturday", 3),
        ],
    )
    def test_known_pairs(self, a, b, expected):
        assert levenshtein(a, b) == expected

    def test_none_is_empty(self):
        assert levenshtein(None, "abc") == 3
        assert levenshtein("abc", None) == 3
        assert levenshtein(None, None) == 0

    def test_unicode(self):
        assert levenshtein("café", "cafe") == 1

    def test_lists_of_tokens(self):
        assert levenshtein(["the", "cat", "sat"], ["the", "dog", "sat"]) == 1

    def test_tuples_of_ints(self):
        assert levenshtein((1, 2, 3, 4), (2, 3, 4, 5)) == 2


class TestLevenshteinProperties:
    @pytest.fixture
    def words(self) -> list[str]:
        rng = random.Random(1234)
        alphabet = "abcd"
        return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 7))) for _ in range(12)]

    def test_identity(self, words):
        for w in words:
            assert levenshtein(w, w) == 0

    def test_zero_only_when_equal(self, words):
        for a, b in itertools.product(words, repeat=2):
            assert (levenshtein(a, b) == 0) == (a == b)

    def test_symmetry(self, words):
        for a, b in itertools.product(words, repeat=2):
            assert levenshtein(a, b) == levenshtein(b, a)

    def test_triangle_inequality(self, words):
        for a, b, c in itertools.product(words[:8], repeat=3):
            assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)

    def test_empty_gives_length(self, words):
        for w in words:
            assert levenshtein("", w) == len(w)
            assert levenshtein(w, "") == len(w)

    def test_bounded_by_longer_length(self, words):
        for a, b in itertools.product(words, repeat=2):
            assert abs(len(a) - len(b)) <= levenshtein(a, b) <= max(len(a), len(b))

    def test_matches_full_matrix(self):
        rng = random.Random(99)
        for _ in range(50):
            a = "".join(rng.choice(string.ascii_lowercase[:5]) for _ in range(rng.randint(0, 10)))
            b = "".join(rng.choice(string.ascii_lowercase[:5]) for _ in range(rng.randint(0, 10)))
            assert levenshtein(a, b) == _naive_distance(a, b)


class TestTitleCase:
    def test_mixed_case(self):
        assert title_case("java UTILITY suite demo") == "Java Utility Suite Demo"

    def test_collapses_whitespace(self):
        assert title_case("  hello \t  WORLD\n") == "Hello World"

    def test_single_letter_words(self):
        assert title_case("a b c") == "A B C"

    def test_none_passthrough(self):
        assert title_case(None) is None

    def test_blank_passthrough(self):
        assert title_case("   ") == "   "
        assert title_case("") == ""
