from .combinations import (
    BaseSetRequest,
    ChunkRequest,
    ChunkResponse,
    CountRequest,
    CountResponse,
    EnumerateRequest,
    EnumerateResponse,
    GenerateRequest,
    GenerateResponse,
    LexorRequest,
    LexorResponse,
    RankRange,
)

__all__ = [
    "BaseSetRequest",
    "CountRequest",
    "CountResponse",
    "EnumerateRequest",
    "EnumerateResponse",
    "LexorRequest",
    "LexorResponse",
    "GenerateRequest",
    "GenerateResponse",
    "ChunkRequest",
    "ChunkResponse",
    "RankRange",
]
