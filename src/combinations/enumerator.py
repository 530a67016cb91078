"""Lexicographic enumeration of m-element subsets, one combination at a time."""

from typing import Iterator, List, Optional, Sequence, Tuple

from src.combinations.counter import validate_sizes

# Per-position tags of the include/exclude traversal
UNVISITED = 0
INCLUDED = 1
EXHAUSTED = 2

Combination = Tuple


def lexicographic_walk(base_set: Sequence, m: int) -> Iterator[Combination]:
    """
    Yield every m-element combination of base_set in lexicographic order.

    Depth-first include/exclude backtracking over positions. Each position
    first includes its element, then (if the remaining positions can still
    complete a combination) excludes it, so combinations come out ordered by
    their position sequence. Elements keep their relative order in base_set.

    Args:
        base_set: Ordered sequence of elements
        m: Number of elements in each combination

    Yields:
        Combinations as tuples; a single empty tuple when m is 0

    Raises:
        InvalidArgumentError: if m is negative or exceeds len(base_set)
    """
    n = len(base_set)
    validate_sizes(n, m)
    if m == 0:
        yield ()
        return

    prefix: List = []
    positions = [0]
    tags = [UNVISITED] * (n + 1)

    while positions:
        pos = positions[-1]
        tag = tags[pos]
        if tag == UNVISITED:
            if len(prefix) < m:
                prefix.append(base_set[pos])
                positions.append(pos + 1)
                tags[pos] = INCLUDED
            else:
                positions.pop()
                yield tuple(prefix)
        elif tag == INCLUDED:
            prefix.pop()
            if pos + (m - len(prefix)) < n:
                positions.append(pos + 1)
                tags[pos] = EXHAUSTED
            else:
                positions.pop()
                tags[pos] = UNVISITED
        else:
            positions.pop()
            tags[pos] = UNVISITED


class Enumerator:
    """
    Step through the m-element subsets of a set one at a time.

    Intended for loops where random access is unnecessary. The traversal is
    suspended after each combination and resumed by the following next()
    call. An empty tuple signals exhaustion.

    Example:
        enum = Enumerator(range(5))
        comb = enum.start(2)
        while comb:
            ...
            comb = enum.next()
    """

    def __init__(self, base_set: Sequence):
        self.base_set = base_set
        self._m = 0
        self._walk: Optional[Iterator[Combination]] = None

    @property
    def m(self) -> int:
        return self._m

    @property
    def exhausted(self) -> bool:
        """True before start(), right after start(0), and once next() has signalled the end."""
        return self._walk is None

    def start(self, m: int) -> Combination:
        """
        Restart the enumeration for subsets of size m.

        Args:
            m: Number of elements in each combination

        Returns:
            The first combination; the empty tuple if m is 0
        """
        validate_sizes(len(self.base_set), m)
        self._m = m
        if m == 0:
            # The empty combination is the only one
            self._walk = None
            return ()
        self._walk = lexicographic_walk(self.base_set, m)
        return self.next()

    def next(self) -> Combination:
        """Return the next combination, or an empty tuple when exhausted."""
        if self._walk is None:
            return ()
        try:
            return next(self._walk)
        except StopIteration:
            self._walk = None
            return ()
