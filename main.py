"""
Ethiopic Name Search API

Bilingual (Amharic / English) personal-name search: transliterate Latin
names to Ethiopic script, match names across scripts, and expand search
queries with their Amharic variants.

Usage:
    uvicorn main:app --reload

Then access the API documentation at http://localhost:8000/docs
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router as api_router
from middleware.api_key import APIKeyMiddleware
from middleware.request_id import RequestIDMiddleware, get_request_id
from services.name_search_engine import get_name_search_engine
from utils.config import API_KEYS, LOG_LEVEL, LOG_JSON_FORMAT
from utils.exceptions import AppError
from utils.logging_config import configure_logging

API_VERSION = "0.1.0"

# Configure structured JSON logging
configure_logging(level=LOG_LEVEL, json_format=LOG_JSON_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the name dictionary trie on startup so the first request is fast.
    """
    logger.info("Starting name search API...")
    engine = get_name_search_engine()
    logger.info(f"Name search API ready with {engine.dictionary_size} dictionary names")

    yield  # Application runs here

    logger.info("Shutting down name search API...")


# Create FastAPI application
app = FastAPI(
    title="Ethiopic Name Search API",
    description="""
    Search personal names written in Ethiopic (Ge'ez) or Latin script.

    ## Features

    * **Transliteration**: Latin name -> known Amharic renderings (`/transliterate`)
    * **Matching**: cross-script name comparison with optional fuzzy and phonetic modes (`/match`)
    * **Query expansion**: a query plus its Amharic variants, ready for a search backend (`/expand`)
    """,
    version=API_VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add custom middleware (last added = outermost)
app.add_middleware(APIKeyMiddleware, api_keys=API_KEYS)
app.add_middleware(RequestIDMiddleware)


# =============================================================================
# GLOBAL EXCEPTION HANDLER
# =============================================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Global handler for all AppError exceptions.

    Converts library exceptions to consistent JSON responses.
    """
    payload = exc.to_dict()
    logger.warning(
        f"[{payload['code']}] {exc.message} | Details: {exc.details}",
        extra={"request_id": get_request_id(request), "code": payload["code"]}
    )
    return JSONResponse(status_code=exc.status_code, content=payload)


# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "name": "Ethiopic Name Search API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/v1/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=False
    )
