"""
Pydantic models for API request/response schemas.
"""
from typing import List

from pydantic import BaseModel, Field

from utils.config import DEFAULT_MAX_DISTANCE


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    dictionary_size: int = Field(0, description="Number of Latin names in the dictionary")
    cache_size: int = Field(0, description="Number of cached transliteration results")


# Transliteration schemas
class TransliterateRequest(BaseModel):
    """Request model for the /transliterate endpoint."""
    text: str = Field(..., description="Latin name (or name fragment) to transliterate")
    include_partial_matches: bool = Field(
        True,
        description="Also return names that start with the text or one of its suffixes"
    )
    enable_cache: bool = Field(True, description="Use the transliteration cache")

    class Config:
        json_schema_extra = {
            "example": {
                "text": "amanuel",
                "include_partial_matches": True
            }
        }


class TransliterateResponse(BaseModel):
    """Response model for the /transliterate endpoint."""
    success: bool = Field(..., description="Whether transliteration completed")
    text: str = Field(..., description="Text as received")
    variants: List[str] = Field(
        default_factory=list,
        description="Amharic renderings in discovery order"
    )


# Matching schemas
class MatchRequest(BaseModel):
    """Request model for the /match endpoint."""
    name: str = Field(..., description="Stored name, Ethiopic or Latin")
    query: str = Field(..., description="Search query, Ethiopic or Latin")
    case_sensitive: bool = False
    whole_word: bool = Field(False, description="Only accept an exact (normalized) match")
    fuzzy: bool = Field(False, description="Enable edit-distance matching")
    max_distance: float = Field(
        DEFAULT_MAX_DISTANCE,
        ge=0,
        description="Levenshtein budget used when fuzzy is enabled"
    )
    phonetic: bool = Field(False, description="Enable phonetic-hash matching")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "አማኑኤል",
                "query": "Amanuel"
            }
        }


class MatchResponse(BaseModel):
    """Response model for the /match endpoint."""
    success: bool = Field(..., description="Whether the comparison completed")
    matches: bool = Field(..., description="True if the name matches the query")


# Query expansion schemas
class ExpandRequest(BaseModel):
    """Request model for the /expand endpoint."""
    query: str = Field(..., description="Search query to expand")


class ExpandResponse(BaseModel):
    """Response model for the /expand endpoint."""
    success: bool = Field(..., description="Whether expansion completed")
    terms: List[str] = Field(
        default_factory=list,
        description="Sanitized query followed by its Amharic variants"
    )


class ClearCacheResponse(BaseModel):
    """Response model for the /cache/clear endpoint."""
    success: bool = True
