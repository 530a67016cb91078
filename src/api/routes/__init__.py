from .combinations import router as combinations_router

__all__ = ["combinations_router"]
