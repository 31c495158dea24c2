"""Health check endpoints."""
from fastapi import APIRouter

from models.schemas import HealthResponse
from services.name_search_engine import get_name_search_engine

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Check that the name dictionary is loaded and report cache usage.
    """
    engine = get_name_search_engine()
    return HealthResponse(
        status="ok",
        dictionary_size=engine.dictionary_size,
        cache_size=engine.cache_size
    )
