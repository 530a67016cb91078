"""
Unit tests for the memoized binomial counter.
"""

import math

import pytest

from src.combinations import Counter, CountOverflowError, InvalidArgumentError


class TestCounterValues:
    """Tests for the counts themselves."""

    @pytest.mark.parametrize("n,m,expected", [
        (16, 4, 1820),
        (5, 5, 1),
        (5, 0, 1),
        (5, 2, 10),
        (0, 0, 1),
        (1, 1, 1),
        (52, 5, 2598960),
    ])
    def test_known_counts(self, n, m, expected):
        """Test counts against known values."""
        assert Counter().count(n, m) == expected

    def test_matches_math_comb(self):
        """Test a grid of counts against math.comb."""
        counter = Counter()
        for n in range(0, 40):
            for m in range(0, n + 1):
                assert counter.count(n, m) == math.comb(n, m)

    def test_symmetry(self):
        """Test C(n, m) == C(n, n - m)."""
        counter = Counter()
        for n in range(0, 30):
            for m in range(0, n + 1):
                assert counter.count(n, m) == counter.count(n, n - m)

    def test_pascal_recurrence(self):
        """Test C(n, m) == C(n-1, m) + C(n-1, m-1) for 1 < m < n."""
        counter = Counter()
        for n in range(2, 30):
            for m in range(2, n):
                assert counter.count(n, m) == counter.count(n - 1, m) + counter.count(n - 1, m - 1)

    def test_boundary_counts(self):
        """Test C(n, 0) == 1, C(n, 1) == n and C(n, n) == 1."""
        counter = Counter()
        for n in range(0, 50):
            assert counter.count(n, 0) == 1
            assert counter.count(n, n) == 1
            if n >= 1:
                assert counter.count(n, 1) == n

    def test_large_n_small_m(self):
        """Test that a deep descent does not hit the recursion limit."""
        assert Counter().count(5000, 3) == math.comb(5000, 3)


class TestCounterMemoization:
    """Tests for cache behaviour."""

    def test_repeated_query_hits_cache(self):
        """Test that a second identical query computes nothing new."""
        counter = Counter()
        first = counter.count(30, 12)
        computations = counter.computations
        cache_size = counter.cache_size

        second = counter.count(30, 12)

        assert first == second
        assert counter.computations == computations
        assert counter.cache_size == cache_size

    def test_symmetric_pairs_share_cache_entry(self):
        """Test that C(n, m) and C(n, n - m) are stored once."""
        counter = Counter()
        counter.count(20, 3)
        computations = counter.computations

        counter.count(20, 17)

        assert counter.computations == computations

    def test_base_cases_are_not_cached(self):
        """Test that m in {0, 1} never grows the cache."""
        counter = Counter()
        counter.count(10, 0)
        counter.count(10, 1)
        counter.count(10, 9)
        assert counter.cache_size == 0

    def test_clear(self):
        """Test that clear drops the cache."""
        counter = Counter()
        counter.count(20, 10)
        assert counter.cache_size > 0

        counter.clear()

        assert counter.cache_size == 0
        assert counter.computations == 0

    def test_instances_do_not_share_cache(self):
        """Test that each counter owns its cache."""
        first = Counter()
        second = Counter()
        first.count(20, 10)
        assert second.cache_size == 0


class TestCounterErrors:
    """Tests for overflow and argument errors."""

    def test_overflow_large_count(self):
        """Test that C(10000, 5000) signals overflow rather than wrapping."""
        with pytest.raises(CountOverflowError, match="overflowed"):
            Counter().count(10000, 5000)

    def test_overflow_boundary_64_bits(self):
        """Test the largest central count that fits and the first that does not."""
        counter = Counter()
        assert counter.count(67, 33) == math.comb(67, 33)
        with pytest.raises(CountOverflowError):
            counter.count(68, 34)

    def test_overflow_is_builtin_overflow_error(self):
        """Test that callers can catch the builtin OverflowError."""
        with pytest.raises(OverflowError):
            Counter().count(200, 100)

    def test_narrow_word(self):
        """Test overflow detection with an 8-bit word."""
        counter = Counter(word_bits=8)
        assert counter.count(10, 5) == 252
        assert counter.count(11, 3) == 165
        with pytest.raises(CountOverflowError):
            counter.count(11, 4)

    def test_base_case_wider_than_word(self):
        """Test that C(n, 1) = n is checked against the word."""
        with pytest.raises(CountOverflowError):
            Counter(word_bits=8).count(300, 1)

    def test_wide_word(self):
        """Test that a wider word admits larger counts."""
        assert Counter(word_bits=128).count(100, 50) == math.comb(100, 50)

    def test_m_greater_than_n(self):
        """Test that m > n is an explicit argument error."""
        with pytest.raises(InvalidArgumentError, match="must not exceed"):
            Counter().count(5, 6)

    @pytest.mark.parametrize("n,m", [(-1, 0), (5, -1)])
    def test_negative_arguments(self, n, m):
        """Test that negative sizes are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            Counter().count(n, m)

    def test_invalid_word_bits(self):
        """Test that the word must have at least one bit."""
        with pytest.raises(InvalidArgumentError):
            Counter(word_bits=0)
