"""Pydantic models for the combinations API."""

from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, Field, model_validator


class BaseSetRequest(BaseModel):
    """A base set given either explicitly or as the integers 0..n-1."""

    n: Optional[int] = Field(
        default=None,
        ge=0,
        description="Size of the set; elements are 0..n-1"
    )
    elements: Optional[List[Any]] = Field(
        default=None,
        description="Explicit ordered elements of the set"
    )
    m: int = Field(..., ge=0, description="Number of elements in each combination")

    @model_validator(mode="after")
    def check_base_set(self):
        if (self.n is None) == (self.elements is None):
            raise ValueError("Exactly one of 'n' or 'elements' must be provided")
        return self

    def base_set(self) -> Sequence[Any]:
        """Return the ordered elements of the set without copying them."""
        if self.elements is not None:
            return self.elements
        return range(self.n)


class CountRequest(BaseModel):
    """Request model for counting combinations."""

    n: int = Field(..., ge=0, description="Size of the set")
    m: int = Field(..., ge=0, description="Number of elements in each combination")


class CountResponse(BaseModel):
    """Response model for a combination count."""

    n: int = Field(..., description="Size of the set")
    m: int = Field(..., description="Number of elements in each combination")
    count: int = Field(..., description="Number of m-element subsets")


class EnumerateRequest(BaseSetRequest):
    """Request model for sequential enumeration."""

    limit: int = Field(
        default=100,
        ge=1,
        description="Maximum number of combinations to return"
    )


class EnumerateResponse(BaseModel):
    """Response model for sequential enumeration."""

    total_combinations: int = Field(..., description="Total number of combinations")
    combinations: List[List[Any]] = Field(..., description="Combinations in lexicographic order")
    truncated: bool = Field(..., description="Whether more combinations exist beyond the limit")


class LexorRequest(BaseSetRequest):
    """Request model for random access by rank."""

    index: int = Field(..., ge=0, description="Lexicographic rank, 0-based")


class LexorResponse(BaseModel):
    """Response model for random access by rank."""

    index: int = Field(..., description="Requested rank")
    total_combinations: int = Field(..., description="Total number of combinations")
    in_range: bool = Field(..., description="Whether the rank addresses a combination")
    combination: List[Any] = Field(..., description="The combination; empty if out of range")


class GenerateRequest(BaseSetRequest):
    """Request model for materializing all combinations."""


class GenerateResponse(BaseModel):
    """Response model for materialized combinations."""

    total_combinations: int = Field(..., description="Number of combinations generated")
    columns: List[str] = Field(..., description="Column names in order")
    rows: List[List[Any]] = Field(..., description="Combinations, one row each")


class ChunkRequest(BaseModel):
    """Request model for splitting the rank space into chunks."""

    n: int = Field(..., ge=0, description="Size of the set")
    m: int = Field(..., ge=0, description="Number of elements in each combination")
    chunk_size: Optional[int] = Field(
        default=None,
        ge=1,
        description="Ranks per chunk; the configured default if omitted"
    )


class RankRange(BaseModel):
    """Half-open range of ranks [start, stop)."""

    start: int
    stop: int


class ChunkResponse(BaseModel):
    """Response model for rank chunks."""

    total_combinations: int = Field(..., description="Total number of combinations")
    chunks: List[RankRange] = Field(..., description="Contiguous rank ranges in order")
