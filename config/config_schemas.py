# config/config_schemas.py
"""
AI Configuration Schemas
Used by: /api/ai/config

Design: In-memory configuration (no database persistence)
- GET /config → returns current settings
- POST /config → updates settings in-memory (partial updates supported)
- Settings reset to file/env defaults on application restart
"""
from typing import Optional

from pydantic import BaseModel, Field


class AIConfigRequest(BaseModel):
    """
    Request to update AI configuration.
    All fields are optional; send only what you want to change.
    """

    # ── Model ──
    openai_model: Optional[str] = Field(
        None, min_length=1, description="OpenAI model name", examples=["gpt-4o", "gpt-4o-mini"]
    )

    # ── Request bounds ──
    llm_timeout_seconds: Optional[float] = Field(
        None, gt=0.0, le=300.0, description="Upper bound for a single completion call (seconds)"
    )
    llm_max_retries: Optional[int] = Field(None, ge=0, le=5)

    # ── Temperatures ──
    chat_temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    symptom_temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    disease_info_temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    news_temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    providers_temperature: Optional[float] = Field(None, ge=0.0, le=2.0)

    # ── Output lengths ──
    chat_max_tokens: Optional[int] = Field(None, ge=100, le=4000)
    symptom_max_tokens: Optional[int] = Field(None, ge=100, le=4000)
    disease_info_max_tokens: Optional[int] = Field(None, ge=100, le=4000)
    news_max_tokens: Optional[int] = Field(None, ge=100, le=4000)
    providers_max_tokens: Optional[int] = Field(None, ge=100, le=4000)


class AIConfigResponse(BaseModel):
    """Current AI configuration (complete state). The credential is never echoed."""

    llm_provider: str
    current_llm_model: str
    credentials_configured: bool
    base_url: Optional[str]

    llm_timeout_seconds: float
    llm_max_retries: int

    chat_temperature: float
    symptom_temperature: float
    disease_info_temperature: float
    news_temperature: float
    providers_temperature: float

    chat_max_tokens: int
    symptom_max_tokens: int
    disease_info_max_tokens: int
    news_max_tokens: int
    providers_max_tokens: int
