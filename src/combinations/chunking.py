"""Split a rank space into contiguous chunks for independent workers."""

from typing import Iterator, List, Tuple

from src.combinations.lexor import Lexor


def split_into_chunks(total: int, chunk_size: int = 10000) -> List[range]:
    """
    Split the ranks [0, total) into contiguous ranges.

    Args:
        total: Number of ranks, usually C(n, m)
        chunk_size: Maximum ranks per chunk

    Returns:
        List of ranges covering [0, total) in order
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if total <= 0:
        return []
    return [range(start, min(start + chunk_size, total)) for start in range(0, total, chunk_size)]


def iter_rank_range(lexor: Lexor, ranks: range) -> Iterator[Tuple]:
    """
    Yield the combinations for a range of ranks using random access.

    Each worker can own its own Lexor and enumerate a disjoint slice without
    generating the combinations that precede it.

    Args:
        lexor: Lexor configured with the subset size
        ranks: Ranks to retrieve

    Yields:
        Combinations in rank order; ranks past the end are skipped
    """
    total = lexor.count()
    for i in ranks:
        if i < 0:
            continue
        if i >= total:
            return
        yield lexor.get(i)
