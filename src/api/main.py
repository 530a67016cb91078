"""FastAPI application for the Combinations API."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import combinations_router
from src.config import get_settings


def setup_logging(level: str = "INFO"):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the server starts."""
    setup_logging(get_settings().log_level)
    logger.info("Combinations API starting")
    yield


# Create FastAPI app
app = FastAPI(
    title="Combinations API",
    description="""
    Counting, enumeration and random access for m-element subsets of an n-element set.

    ## Features

    - **Count**: C(n, m) without overflow, memoized across requests
    - **Enumerate**: Combinations in lexicographic order, one at a time
    - **Random access**: The i-th combination by lexicographic rank
    - **Generate**: All combinations materialized at once, within a safety limit
    - **Chunks**: Disjoint rank ranges for parallel workers

    A base set is given either as `n` (elements 0..n-1) or as an explicit `elements` list.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(combinations_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
