"""Memoized binomial coefficient counter with unsigned overflow detection."""

import logging
from typing import Dict, List, Tuple

from src.combinations.exceptions import CountOverflowError, InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_WORD_BITS = 64


def validate_sizes(n: int, m: int) -> None:
    """
    Check that (n, m) describes a valid m-element subset of an n-element set.

    Raises:
        InvalidArgumentError: if n or m is negative or m > n
    """
    if n < 0 or m < 0:
        raise InvalidArgumentError(f"n and m must be non-negative, got n={n}, m={m}")
    if m > n:
        raise InvalidArgumentError(f"m must not exceed n, got n={n}, m={m}")


class Counter:
    """
    Count the m-element subsets of an n-element set.

    Uses C(n, m) = C(n-1, m) + C(n-1, m-1) so no factorials are computed.
    Results are cached per (n, min(m, n-m)) for the lifetime of the instance.
    Sums are carried out in an unsigned word of ``word_bits`` bits; a sum that
    wraps around raises CountOverflowError instead of returning a bogus value.
    """

    def __init__(self, word_bits: int = DEFAULT_WORD_BITS):
        """
        Initialize an empty counter.

        Args:
            word_bits: Width of the unsigned word counts must fit in
        """
        if word_bits < 1:
            raise InvalidArgumentError(f"word_bits must be positive, got {word_bits}")
        self.word_bits = word_bits
        self._mask = (1 << word_bits) - 1
        self._counts: Dict[Tuple[int, int], int] = {}
        self.computations = 0

    @property
    def max_count(self) -> int:
        """Largest count representable in the word."""
        return self._mask

    @property
    def cache_size(self) -> int:
        return len(self._counts)

    def clear(self) -> None:
        """Drop all memoized counts."""
        self._counts.clear()
        self.computations = 0

    def count(self, n: int, m: int) -> int:
        """
        Return the number of combinations of m elements from an n-element set.

        Args:
            n: Size of the set
            m: Size of the subsets

        Returns:
            C(n, m)

        Raises:
            InvalidArgumentError: if n or m is negative or m > n
            CountOverflowError: if C(n, m) does not fit in the word
        """
        validate_sizes(n, m)
        return self._count(n, m)

    def _base(self, n: int, m: int):
        """Return the count for a base case or cached pair, or None."""
        if m == 0:
            return 1
        if m == 1:
            if n > self._mask:
                raise CountOverflowError(f"Combination size overflowed: C({n}, 1)")
            return n
        return self._counts.get((n, m))

    def _count(self, n: int, m: int) -> int:
        # Post-order evaluation of the recurrence on an explicit stack so deep
        # descents are bounded by memory rather than the recursion limit.
        m = min(m, n - m)
        result = self._base(n, m)
        if result is not None:
            return result

        stack: List[Tuple[int, int]] = [(n, m)]
        while stack:
            cur_n, cur_m = stack[-1]
            if (cur_n, cur_m) in self._counts:
                stack.pop()
                continue

            left = (cur_n - 1, min(cur_m, cur_n - 1 - cur_m))
            right = (cur_n - 1, min(cur_m - 1, cur_n - cur_m))
            cnt0 = self._base(*left)
            cnt1 = self._base(*right)
            if cnt0 is None:
                stack.append(left)
            if cnt1 is None:
                stack.append(right)
            if cnt0 is None or cnt1 is None:
                continue

            cnt = (cnt0 + cnt1) & self._mask
            if cnt < (cnt0 | cnt1):
                raise CountOverflowError(
                    f"Combination size overflowed: C({cur_n}, {cur_m}) exceeds "
                    f"{self.word_bits} bits"
                )
            self._counts[(cur_n, cur_m)] = cnt
            self.computations += 1
            stack.pop()

        logger.debug("C(%d, %d) resolved, %d pairs cached", n, m, len(self._counts))
        return self._counts[(n, m)]
