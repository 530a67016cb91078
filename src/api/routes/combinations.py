"""API routes for counting, enumerating and indexing combinations."""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator

from fastapi import APIRouter, Depends, HTTPException

from src.combinations import (
    BulkGenerator,
    CombinationsError,
    Counter,
    Enumerator,
    InvalidArgumentError,
    Lexor,
    ResultLimitError,
    split_into_chunks,
)
from src.config import Settings, get_settings
from src.models.combinations import (
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

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/combinations", tags=["combinations"])

# Long-lived counters so repeated requests hit the memoized counts
# Key: word width in bits
_counters: Dict[int, Counter] = {}


def _get_counter(settings: Settings) -> Counter:
    """Return the shared counter for the configured word width."""
    counter = _counters.get(settings.word_bits)
    if counter is None:
        counter = _counters[settings.word_bits] = Counter(settings.word_bits)
    return counter


@contextmanager
def _shared_counter(settings: Settings, n: int) -> Iterator[Counter]:
    """
    Lend the shared counter for a request over an n-element set.

    Sets larger than max_n are rejected before any counting. Once the request
    is done the cache is cleared if it has grown past max_cache_size.

    Raises:
        InvalidArgumentError: if n exceeds max_n
    """
    if n > settings.max_n:
        raise InvalidArgumentError(f"Set size {n} exceeds the limit of {settings.max_n}")
    counter = _get_counter(settings)
    try:
        yield counter
    finally:
        if counter.cache_size > settings.max_cache_size:
            logger.info("Clearing %d memoized counts (limit %d)", counter.cache_size, settings.max_cache_size)
            counter.clear()


@router.post("/count", response_model=CountResponse)
async def count_combinations(request: CountRequest, settings: Settings = Depends(get_settings)):
    """
    Count the m-element subsets of an n-element set without generating them.
    """
    try:
        with _shared_counter(settings, request.n) as counter:
            total = counter.count(request.n, request.m)
        return CountResponse(n=request.n, m=request.m, count=total)
    except (CombinationsError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error counting combinations: {str(e)}")


@router.post("/enumerate", response_model=EnumerateResponse)
async def enumerate_combinations(request: EnumerateRequest, settings: Settings = Depends(get_settings)):
    """
    Return the first combinations in lexicographic order.

    At most min(limit, max_results) combinations are returned.
    """
    try:
        base_set = request.base_set()
        with _shared_counter(settings, len(base_set)) as counter:
            total = counter.count(len(base_set), request.m)
        limit = min(request.limit, settings.max_results)

        enumerator = Enumerator(base_set)
        combinations = []
        combination = enumerator.start(request.m)
        while len(combinations) < min(limit, total):
            combinations.append(list(combination))
            combination = enumerator.next()

        return EnumerateResponse(
            total_combinations=total,
            combinations=combinations,
            truncated=total > len(combinations)
        )
    except (CombinationsError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error enumerating combinations: {str(e)}")


@router.post("/get", response_model=LexorResponse)
async def get_combination(request: LexorRequest, settings: Settings = Depends(get_settings)):
    """
    Return the combination at a lexicographic rank.

    An out-of-range rank is not an error; the response has in_range=false.
    """
    try:
        base_set = request.base_set()
        with _shared_counter(settings, len(base_set)) as counter:
            lexor = Lexor(base_set, request.m, counter=counter)
            total = lexor.count()
            combination = lexor.get(request.index)

        return LexorResponse(
            index=request.index,
            total_combinations=total,
            in_range=request.index < total,
            combination=list(combination)
        )
    except (CombinationsError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error retrieving combination: {str(e)}")


@router.post("/generate", response_model=GenerateResponse)
async def generate_combinations(request: GenerateRequest, settings: Settings = Depends(get_settings)):
    """
    Materialize every combination.

    Refused with 413 when the count exceeds the configured max_results.
    """
    try:
        base_set = request.base_set()
        with _shared_counter(settings, len(base_set)) as counter:
            generator = BulkGenerator(base_set, counter=counter, max_results=settings.max_results)
            generator.generate(request.m)

        return GenerateResponse(
            total_combinations=generator.size(),
            columns=generator.columns,
            rows=[list(combination) for combination in generator]
        )
    except ResultLimitError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except (CombinationsError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating combinations: {str(e)}")


@router.post("/chunks", response_model=ChunkResponse)
async def chunk_ranks(request: ChunkRequest, settings: Settings = Depends(get_settings)):
    """
    Split the rank space into contiguous ranges for independent workers.
    """
    try:
        with _shared_counter(settings, request.n) as counter:
            total = counter.count(request.n, request.m)
        chunk_size = request.chunk_size or settings.chunk_size
        num_chunks = (total + chunk_size - 1) // chunk_size
        if num_chunks > settings.max_results:
            raise ResultLimitError(num_chunks, settings.max_results)
        chunks = split_into_chunks(total, chunk_size)
        logger.info("Split %d ranks into %d chunks of up to %d", total, len(chunks), chunk_size)

        return ChunkResponse(
            total_combinations=total,
            chunks=[RankRange(start=r.start, stop=r.stop) for r in chunks]
        )
    except ResultLimitError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except (CombinationsError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error splitting ranks: {str(e)}")
