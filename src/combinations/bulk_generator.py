"""Eager generation of all m-element subsets of a set."""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from src.combinations.counter import Counter
from src.combinations.enumerator import lexicographic_walk
from src.combinations.exceptions import ResultLimitError

logger = logging.getLogger(__name__)


class BulkGenerator:
    """
    Generate all m-element subsets of a set and keep them in memory.

    This is memory intensive, holding C(n, m) combinations at once, but allows
    repeated random access. Combinations are stored in the same lexicographic
    order the Enumerator produces.
    """

    def __init__(
        self,
        base_set: Sequence,
        counter: Optional[Counter] = None,
        max_results: Optional[int] = None
    ):
        """
        Initialize the generator.

        Args:
            base_set: Ordered sequence of elements
            counter: Counter used to size the result; a fresh one if None
            max_results: Refuse to generate more combinations than this
        """
        self.base_set = base_set
        self.counter = counter if counter is not None else Counter()
        self.max_results = max_results
        self._m = 0
        self._combinations: List[Tuple] = []

    @property
    def m(self) -> int:
        return self._m

    @property
    def combinations(self) -> List[Tuple]:
        return self._combinations

    @property
    def columns(self) -> List[str]:
        """Column names slot_0..slot_{m-1} used by to_dataframe."""
        return [f"slot_{i}" for i in range(self._m)]

    def generate(self, m: int) -> None:
        """
        Generate all m-element subsets of the set.

        Args:
            m: Number of elements in each combination

        Raises:
            InvalidArgumentError: if m is negative or exceeds the set size
            CountOverflowError: if the number of combinations overflows
            ResultLimitError: if the number of combinations exceeds max_results
        """
        total = self.counter.count(len(self.base_set), m)
        if self.max_results is not None and total > self.max_results:
            logger.warning(
                "Refusing to generate C(%d, %d) = %d combinations (limit %d)",
                len(self.base_set), m, total, self.max_results
            )
            raise ResultLimitError(total, self.max_results)

        # Pre-sized from the count, filled in walk order
        combinations: List[Tuple] = [()] * total
        for index, combination in enumerate(lexicographic_walk(self.base_set, m)):
            combinations[index] = combination

        self._m = m
        self._combinations = combinations
        logger.debug("Generated %d combinations of size %d", total, m)

    def size(self) -> int:
        return len(self._combinations)

    def __len__(self) -> int:
        return len(self._combinations)

    def __iter__(self) -> Iterator[Tuple]:
        return iter(self._combinations)

    def __getitem__(self, index):
        return self._combinations[index]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Return the generated combinations as a DataFrame.

        Returns:
            DataFrame with one row per combination and columns slot_0..slot_{m-1}
        """
        if self._m == 0:
            # Rows of the empty combination have no columns
            return pd.DataFrame(index=range(len(self._combinations)))
        return pd.DataFrame(self._combinations, columns=self.columns)

    def to_array(self) -> np.ndarray:
        """
        Return the generated combinations as a 2-D array of shape (size, m).
        """
        if not self._combinations or self._m == 0:
            return np.empty((len(self._combinations), self._m))
        return np.array(self._combinations)
