"""Exceptions raised by the combination engine."""


class CombinationsError(Exception):
    """Base class for all combination engine errors."""


class InvalidArgumentError(CombinationsError, ValueError):
    """Raised when n or m is negative, or m exceeds the size of the set."""


class CountOverflowError(CombinationsError, OverflowError):
    """Raised when a count does not fit in the configured unsigned word."""


class ResultLimitError(CombinationsError):
    """Raised when materializing would exceed the configured result limit."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Refusing to materialize {count} results (limit is {limit})"
        )
