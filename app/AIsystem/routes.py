# app/AIsystem/routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.AIsystem.llm_client import MedicalAIClient
from app.AIsystem.schemas import (
    ChatRequest,
    ChatResponse,
    DiseaseDetail,
    HealthcareProviders,
    NewsItem,
    SymptomAnalysisResult,
    SymptomCheckRequest,
)
from app.medical_models.chat_history_model.chat_history_schemas import ChatHistoryCreate
from app.shared.dependencies import get_ai_client, get_repository
from app.shared.errors import APIError
from app.storage.base import MedicalRepository
from config.aiconfig import ai_settings
from config.config_schemas import AIConfigRequest, AIConfigResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["AI Assistant"])


# ============================================================
# ✅ SYMPTOM CHECK
# ============================================================
@router.post("/symptom-check", response_model=SymptomAnalysisResult)
async def symptom_check(
    payload: SymptomCheckRequest, ai_client: MedicalAIClient = Depends(get_ai_client)
):
    """Possible conditions for the reported symptoms. Never a diagnosis."""
    return await ai_client.analyze_symptoms(payload.symptoms, payload.user_info)


# ============================================================
# ✅ CHAT
# ============================================================
@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    ai_client: MedicalAIClient = Depends(get_ai_client),
    repository: MedicalRepository = Depends(get_repository),
):
    """
    Reply to a conversation. With a userId the conversation and the reply are
    saved as one chat history record.
    """
    reply = await ai_client.get_medical_response(payload.messages)

    if payload.user_id is not None:
        messages = [m.model_dump() for m in payload.messages]
        messages.append({"role": "assistant", "content": reply})
        try:
            await repository.create_chat_history(
                ChatHistoryCreate(user_id=payload.user_id, messages=messages)
            )
        except Exception as e:
            logger.error(f"❌ Failed to save chat for user {payload.user_id}: {e}", exc_info=True)
            raise APIError(500, "Failed to save chat history", error=str(e))

    return ChatResponse(response=reply)


# ============================================================
# ✅ DISEASE DETAIL
# ============================================================
@router.get("/disease-detailed/{disease_name}", response_model=DiseaseDetail)
async def disease_detailed(disease_name: str, ai_client: MedicalAIClient = Depends(get_ai_client)):
    if not disease_name.strip():
        raise APIError(400, "Disease name is required")
    return await ai_client.get_disease_information(disease_name.strip())


# ============================================================
# ✅ AI NEWS
# ============================================================
@router.get("/ai-news", response_model=List[NewsItem])
async def ai_news(
    category: Optional[str] = Query(None), ai_client: MedicalAIClient = Depends(get_ai_client)
):
    return await ai_client.get_medical_news(category or None)


# ============================================================
# ✅ HEALTHCARE PROVIDERS
# ============================================================
@router.get("/healthcare-providers", response_model=HealthcareProviders)
async def healthcare_providers(
    query: str = Query("top"),
    location: Optional[str] = Query(None),
    specialty: Optional[str] = Query(None),
    ai_client: MedicalAIClient = Depends(get_ai_client),
):
    return await ai_client.get_healthcare_providers(query.strip() or "top", location or None, specialty or None)


# ============================================================
# ✅ AI CONFIG
# ============================================================
@router.get("/ai/config", response_model=AIConfigResponse)
async def get_ai_config():
    """Current AI settings. The credential itself is never returned."""
    return AIConfigResponse(
        llm_provider=ai_settings.LLM_PROVIDER,
        current_llm_model=ai_settings.current_llm_model,
        credentials_configured=ai_settings.has_credentials,
        base_url=ai_settings.OPENAI_BASE_URL,
        llm_timeout_seconds=ai_settings.LLM_TIMEOUT_SECONDS,
        llm_max_retries=ai_settings.LLM_MAX_RETRIES,
        chat_temperature=ai_settings.CHAT_TEMPERATURE,
        symptom_temperature=ai_settings.SYMPTOM_TEMPERATURE,
        disease_info_temperature=ai_settings.DISEASE_INFO_TEMPERATURE,
        news_temperature=ai_settings.NEWS_TEMPERATURE,
        providers_temperature=ai_settings.PROVIDERS_TEMPERATURE,
        chat_max_tokens=ai_settings.CHAT_MAX_TOKENS,
        symptom_max_tokens=ai_settings.SYMPTOM_MAX_TOKENS,
        disease_info_max_tokens=ai_settings.DISEASE_INFO_MAX_TOKENS,
        news_max_tokens=ai_settings.NEWS_MAX_TOKENS,
        providers_max_tokens=ai_settings.PROVIDERS_MAX_TOKENS,
    )


@router.post("/ai/config", response_model=AIConfigResponse)
async def update_ai_config(config: AIConfigRequest):
    """
    Update AI configuration (in-memory only, resets on restart).

    Supports partial updates: send only the fields you want to change.

    Example request:
    ```json
    {
        "openai_model": "gpt-4o-mini",
        "chat_temperature": 0.4
    }
    ```
    """
    updated_fields = []

    # Request field names match the settings attributes, upper-cased
    for field, value in config.model_dump(exclude_none=True).items():
        setattr(ai_settings, field.upper(), value)
        updated_fields.append(f"{field} → {value}")

    logger.info(f"📝 AI Config Updated: {len(updated_fields)} field(s)")
    for field in updated_fields:
        logger.info(f"   • {field}")

    return await get_ai_config()
