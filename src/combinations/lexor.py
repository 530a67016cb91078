"""Random access to m-element subsets by lexicographic rank."""

from typing import Optional, Sequence, Tuple

from src.combinations.counter import Counter, validate_sizes


class Lexor:
    """
    Retrieve the i-th m-element subset of a set without generating the others.

    Subsets are ordered lexicographically by the positions of their elements:
    rank 0 is {0, 1, ..., m-1}, rank C(n, m) - 1 is {n-m, ..., n-1}. Each
    lookup walks the positions once and asks the counter how many subsets
    include the current position (combinatorial number system), so a lookup
    costs O(n) memoized counts regardless of the rank.
    """

    def __init__(self, base_set: Sequence, m: int = 0, counter: Optional[Counter] = None):
        """
        Initialize the lexor.

        Args:
            base_set: Ordered sequence of elements
            m: Number of elements in each subset
            counter: Counter to use for subtree sizes; pass a shared instance
                to reuse its cache across lexors
        """
        self.base_set = base_set
        self.counter = counter if counter is not None else Counter()
        self._m = 0
        self.set_m(m)

    @property
    def m(self) -> int:
        return self._m

    def set_m(self, m: int) -> None:
        """Set the subset size for subsequent get() calls."""
        validate_sizes(len(self.base_set), m)
        self._m = m

    def count(self) -> int:
        """Number of subsets of the current size."""
        return self.counter.count(len(self.base_set), self._m)

    def get(self, i: int, m: Optional[int] = None) -> Tuple:
        """
        Get the i-th subset in lexicographic order.

        Args:
            i: Rank of the subset, 0-based
            m: Optional new subset size; kept for subsequent calls

        Returns:
            The subset as a tuple, or an empty tuple if i is out of range
        """
        if m is not None:
            self.set_m(m)
        if i < 0 or i >= self.count():
            return ()

        n = len(self.base_set)
        remaining = self._m
        rank = i
        result = []
        for nel in range(n):
            if remaining == 0:
                break
            # Subsets of the rest that include position nel
            el_cnt = self.counter.count(n - nel - 1, remaining - 1)
            if rank < el_cnt:
                result.append(self.base_set[nel])
                remaining -= 1
            else:
                rank -= el_cnt
        return tuple(result)
