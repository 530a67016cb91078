"""Combination engine: counting, enumerating and indexing m-element subsets."""

from src.combinations.bulk_generator import BulkGenerator
from src.combinations.chunking import iter_rank_range, split_into_chunks
from src.combinations.counter import Counter, validate_sizes
from src.combinations.enumerator import Enumerator, lexicographic_walk
from src.combinations.exceptions import (
    CombinationsError,
    CountOverflowError,
    InvalidArgumentError,
    ResultLimitError,
)
from src.combinations.lexor import Lexor

__all__ = [
    "Counter",
    "validate_sizes",
    "Enumerator",
    "lexicographic_walk",
    "Lexor",
    "BulkGenerator",
    "split_into_chunks",
    "iter_rank_range",
    "CombinationsError",
    "CountOverflowError",
    "InvalidArgumentError",
    "ResultLimitError",
]
