"""Name transliteration, matching and query expansion endpoints."""
import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from models.options import MatchOptions, TransliterationOptions
from models.schemas import (
    TransliterateRequest,
    TransliterateResponse,
    MatchRequest,
    MatchResponse,
    ExpandRequest,
    ExpandResponse,
    ClearCacheResponse,
)
from services.name_search_engine import get_name_search_engine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Names"])


@router.post("/transliterate", response_model=TransliterateResponse)
async def transliterate_endpoint(request: TransliterateRequest):
    """
    Convert a Latin name to its known Amharic renderings.

    Validation failures are rendered by the global AppError handler.
    """
    options = TransliterationOptions(
        include_partial_matches=request.include_partial_matches,
        enable_cache=request.enable_cache
    )
    engine = get_name_search_engine()
    variants = await run_in_threadpool(engine.transliterate_to_amharic, request.text, options)

    return TransliterateResponse(success=True, text=request.text, variants=variants)


@router.post("/match", response_model=MatchResponse)
async def match_endpoint(request: MatchRequest):
    """
    Check whether a stored name matches a search query across scripts.
    """
    options = MatchOptions(
        case_sensitive=request.case_sensitive,
        whole_word=request.whole_word,
        fuzzy=request.fuzzy,
        max_distance=request.max_distance,
        phonetic=request.phonetic
    )
    engine = get_name_search_engine()
    matched = await run_in_threadpool(engine.matches_name, request.name, request.query, options)

    return MatchResponse(success=True, matches=matched)


@router.post("/expand", response_model=ExpandResponse)
async def expand_endpoint(request: ExpandRequest):
    """
    Expand a search query with its Amharic variants.
    """
    engine = get_name_search_engine()
    terms = await run_in_threadpool(engine.expand_search_query, request.query)

    return ExpandResponse(success=True, terms=terms)


@router.post("/cache/clear", response_model=ClearCacheResponse)
async def clear_cache_endpoint():
    """Empty the transliteration cache."""
    get_name_search_engine().clear_cache()
    logger.info("Transliteration cache cleared via API")
    return ClearCacheResponse(success=True)
