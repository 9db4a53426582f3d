# app/AIsystem/llm_client.py
"""
Medical AI client with STRUCTURED OUTPUT validated by Pydantic.

Every operation sends a fixed system instruction plus the user turn(s) to the
chat model. Structured operations run in JSON mode, are decoded by LangChain's
JsonOutputParser and validated by the response normalizer. Any failure (timeout,
provider error, empty content, undecodable or invalid JSON) is logged and
replaced by a safe fallback, so callers always get a well-formed result.
"""
import asyncio
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.output_parsers import JsonOutputParser
from langchain_core.runnables import Runnable

from app.AIsystem import prompts
from app.AIsystem.response_normalizer import (
    normalize_disease_detail,
    normalize_news,
    normalize_providers,
    normalize_symptom_analysis,
)
from app.AIsystem.schemas import (
    ChatMessage,
    DiseaseDetail,
    HealthcareProviders,
    NewsItem,
    SymptomAnalysisResult,
    UserInfo,
)
from config.aiconfig import ai_settings

logger = logging.getLogger(__name__)


# ============================================================================
# ERRORS
# ============================================================================
class UpstreamServiceError(Exception):
    """The completion provider failed, timed out or returned unusable content."""


class EmptyCompletionError(UpstreamServiceError):
    """The provider answered with no content."""


class MissingCredentialError(RuntimeError):
    """No provider credential is configured."""


# ============================================================================
# FALLBACKS
# ============================================================================
CHAT_EMPTY_REPLY = "I'm sorry, I couldn't generate a response. Please try again."
CHAT_ERROR_REPLY = (
    "I apologize, but I'm having trouble connecting to my knowledge base. Please try again later."
)


def symptom_analysis_fallback() -> SymptomAnalysisResult:
    return SymptomAnalysisResult(
        possible_conditions=[],
        disclaimer=(
            "Sorry, there was an error analyzing your symptoms. Please try again later "
            "or consult a healthcare professional."
        ),
        recommendations=[
            "Please consult with a healthcare professional about your symptoms",
            "If symptoms are severe, seek immediate medical attention",
        ],
    )


def disease_detail_fallback() -> DiseaseDetail:
    return DiseaseDetail(
        overview="Information temporarily unavailable",
        references=["Unable to load references at this time"],
    )


# ============================================================================
# CHAT MODEL FACTORY
# ============================================================================
# (temperature, max_tokens, json_mode) -> runnable that accepts a message list
ChatModelFactory = Callable[[float, int, bool], Runnable]


def openai_chat_model(temperature: float, max_tokens: int, json_mode: bool) -> Runnable:
    """Build a ChatOpenAI model from the current AI settings."""
    from langchain_openai import ChatOpenAI

    model = ChatOpenAI(
        model=ai_settings.OPENAI_MODEL,
        api_key=ai_settings.OPENAI_API_KEY,
        base_url=ai_settings.OPENAI_BASE_URL,
        temperature=temperature,
        max_tokens=max_tokens,
        timeout=ai_settings.LLM_TIMEOUT_SECONDS,
        max_retries=ai_settings.LLM_MAX_RETRIES,
    )

    if json_mode:
        return model.bind(response_format={"type": "json_object"})
    return model


def to_langchain_messages(conversation: Sequence[ChatMessage]) -> List[BaseMessage]:
    message_types = {"system": SystemMessage, "user": HumanMessage, "assistant": AIMessage}
    return [message_types[m.role](content=m.content) for m in conversation]


class MedicalAIClient:
    """Prompt construction, provider calls and fallbacks for every AI operation."""

    def __init__(self, chat_model_factory: Optional[ChatModelFactory] = None):
        self._chat_model_factory = chat_model_factory or openai_chat_model

    async def _run(self, runnable: Runnable, messages: List[BaseMessage]) -> Any:
        """One bounded provider call. Raises UpstreamServiceError on any failure."""
        timeout = ai_settings.LLM_TIMEOUT_SECONDS

        try:
            return await asyncio.wait_for(runnable.ainvoke(messages), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise UpstreamServiceError(f"Completion timed out after {timeout}s") from e
        except OutputParserException as e:
            raise UpstreamServiceError(f"Completion was not valid JSON: {e}") from e
        except Exception as e:
            raise UpstreamServiceError(f"Completion request failed: {e}") from e

    async def _complete(
        self, messages: List[BaseMessage], temperature: float, max_tokens: int
    ) -> str:
        model = self._chat_model_factory(temperature, max_tokens, False)
        response = await self._run(model, messages)

        content = getattr(response, "content", response)
        if not isinstance(content, str) or not content.strip():
            raise EmptyCompletionError("Completion returned no content")
        return content

    async def _complete_json(
        self, system_prompt: str, user_prompt: str, temperature: float, max_tokens: int
    ) -> Any:
        """JSON-mode completion decoded by JsonOutputParser (code fences included)."""
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
        model = self._chat_model_factory(temperature, max_tokens, True)
        return await self._run(model | JsonOutputParser(), messages)

    # ============================================================
    # ✅ CHAT
    # ============================================================
    async def get_medical_response(self, conversation: Sequence[ChatMessage]) -> str:
        """Free-text reply to a conversation, with the assistant persona prepended."""
        messages = [SystemMessage(content=prompts.chat_system_prompt())]
        messages.extend(to_langchain_messages(conversation))

        try:
            reply = await self._complete(
                messages, ai_settings.CHAT_TEMPERATURE, ai_settings.CHAT_MAX_TOKENS
            )
        except EmptyCompletionError:
            logger.warning("⚠️  Chat completion returned no content")
            return CHAT_EMPTY_REPLY
        except Exception as e:
            logger.error(f"❌ Chat completion failed: {e}", exc_info=True)
            return CHAT_ERROR_REPLY

        logger.info(f"💬 Chat reply generated ({len(reply)} chars)")
        return reply

    # ============================================================
    # ✅ SYMPTOM ANALYSIS
    # ============================================================
    async def analyze_symptoms(
        self, symptoms: List[str], user_info: Optional[UserInfo] = None
    ) -> SymptomAnalysisResult:
        logger.info(f"🩺 Analyzing {len(symptoms)} symptom(s)")
        try:
            raw = await self._complete_json(
                prompts.SYMPTOM_SYSTEM_PROMPT,
                prompts.symptom_user_prompt(symptoms, user_info),
                ai_settings.SYMPTOM_TEMPERATURE,
                ai_settings.SYMPTOM_MAX_TOKENS,
            )
            result = normalize_symptom_analysis(raw)
        except Exception as e:
            logger.error(f"❌ Symptom analysis failed: {e}", exc_info=True)
            return symptom_analysis_fallback()

        logger.info(f"✅ Symptom analysis: {len(result.possible_conditions)} condition(s)")
        return result

    # ============================================================
    # ✅ DISEASE INFORMATION
    # ============================================================
    async def get_disease_information(self, disease_name: str) -> DiseaseDetail:
        try:
            raw = await self._complete_json(
                prompts.DISEASE_INFO_SYSTEM_PROMPT,
                prompts.disease_info_user_prompt(disease_name),
                ai_settings.DISEASE_INFO_TEMPERATURE,
                ai_settings.DISEASE_INFO_MAX_TOKENS,
            )
            return normalize_disease_detail(raw)
        except Exception as e:
            logger.error(f"❌ Disease information for '{disease_name}' failed: {e}", exc_info=True)
            return disease_detail_fallback()

    # ============================================================
    # ✅ MEDICAL NEWS
    # ============================================================
    async def get_medical_news(self, category: Optional[str] = None) -> List[NewsItem]:
        try:
            raw = await self._complete_json(
                prompts.NEWS_SYSTEM_PROMPT,
                prompts.news_user_prompt(date.today().isoformat(), category),
                ai_settings.NEWS_TEMPERATURE,
                ai_settings.NEWS_MAX_TOKENS,
            )
            items = normalize_news(raw)
        except Exception as e:
            logger.error(f"❌ Medical news generation failed: {e}", exc_info=True)
            return []

        logger.info(f"📰 Generated {len(items)} news item(s)")
        return items

    # ============================================================
    # ✅ HEALTHCARE PROVIDERS
    # ============================================================
    async def get_healthcare_providers(
        self, query: str, location: Optional[str] = None, specialty: Optional[str] = None
    ) -> HealthcareProviders:
        try:
            raw = await self._complete_json(
                prompts.providers_system_prompt(location or ai_settings.PROVIDER_DEFAULT_REGION),
                prompts.providers_user_prompt(query, location, specialty),
                ai_settings.PROVIDERS_TEMPERATURE,
                ai_settings.PROVIDERS_MAX_TOKENS,
            )
            return normalize_providers(raw)
        except Exception as e:
            logger.error(f"❌ Healthcare provider lookup failed: {e}", exc_info=True)
            return HealthcareProviders()

    def get_model_info(self) -> Dict:
        """Get current LLM configuration."""
        return {
            "provider": ai_settings.LLM_PROVIDER,
            "model": ai_settings.current_llm_model,
            "timeout_seconds": ai_settings.LLM_TIMEOUT_SECONDS,
            "temperatures": {
                "chat": ai_settings.CHAT_TEMPERATURE,
                "symptom": ai_settings.SYMPTOM_TEMPERATURE,
                "disease_info": ai_settings.DISEASE_INFO_TEMPERATURE,
                "news": ai_settings.NEWS_TEMPERATURE,
                "providers": ai_settings.PROVIDERS_TEMPERATURE,
            },
            "credentials_configured": ai_settings.has_credentials,
        }


def ensure_credentials() -> None:
    """Refuse to run without a provider credential."""
    if not ai_settings.has_credentials:
        raise MissingCredentialError(
            f"OPENAI_API_KEY is not set; the {ai_settings.LLM_PROVIDER} provider cannot be used"
        )


def build_ai_client() -> MedicalAIClient:
    logger.info(f"🤖 Initializing {ai_settings.LLM_PROVIDER} client ({ai_settings.current_llm_model})")
    return MedicalAIClient()
