# config/aiconfig.py
"""
AI Query Service Configuration
Controls the completion provider and per-operation generation settings
"""
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AISettings(BaseSettings):
    """Configuration for the medical AI assistant"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ============================================================================
    # PROVIDER
    # ============================================================================
    LLM_PROVIDER: Literal["openai"] = "openai"

    # ── OpenAI Settings ──
    # Required: the application refuses to start without it
    OPENAI_API_KEY: str = Field(default="")
    OPENAI_MODEL: str = "gpt-4o"
    # Alternatives: "gpt-4o-mini", "gpt-4-turbo"
    # Any OpenAI-compatible endpoint (e.g. a local gateway)
    OPENAI_BASE_URL: Optional[str] = None

    # ============================================================================
    # REQUEST BOUNDS
    # ============================================================================
    LLM_TIMEOUT_SECONDS: float = 30.0
    LLM_MAX_RETRIES: int = 1

    # ============================================================================
    # GENERATION SETTINGS (per operation)
    # ============================================================================
    # Factual lookups run colder than open-ended chat
    CHAT_TEMPERATURE: float = 0.5
    SYMPTOM_TEMPERATURE: float = 0.2
    DISEASE_INFO_TEMPERATURE: float = 0.2
    NEWS_TEMPERATURE: float = 0.3
    PROVIDERS_TEMPERATURE: float = 0.2

    CHAT_MAX_TOKENS: int = 1500
    SYMPTOM_MAX_TOKENS: int = 2000
    DISEASE_INFO_MAX_TOKENS: int = 2500
    NEWS_MAX_TOKENS: int = 3000
    PROVIDERS_MAX_TOKENS: int = 2000

    # ============================================================================
    # PROMPT CONTENT
    # ============================================================================
    ASSISTANT_NAME: str = "MedScience AI"
    PROVIDER_DEFAULT_REGION: str = "India"

    @property
    def current_llm_model(self) -> str:
        """Get active LLM model based on provider."""
        provider_map = {
            "openai": self.OPENAI_MODEL,
        }
        return provider_map.get(self.LLM_PROVIDER, self.OPENAI_MODEL)

    @property
    def has_credentials(self) -> bool:
        return bool(self.OPENAI_API_KEY.strip())


ai_settings = AISettings()
