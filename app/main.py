# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging.config
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.appconfig import settings

# Apply logging configuration
logging.config.dictConfig(settings.LOGGING_CONFIG)

# Import routers
from app.AIsystem.routes import router as ai_router
from app.chat_history.routes import router as chat_history_router
from app.disease_database.routes import router as disease_router
from app.news.routes import router as news_router
from app.resources.routes import router as resources_router
from app.shared.health_routes import router as health_router
from app.users.user_routes import router as user_router

from app.AIsystem.llm_client import MedicalAIClient, build_ai_client, ensure_credentials
from app.shared.errors import register_exception_handlers
from app.storage.base import MedicalRepository
from app.storage.factory import build_repository

# Import configurations
from config.aiconfig import ai_settings


def print_banner(repository: MedicalRepository) -> None:
    print("\n")
    print("\n===============================================================================")
    print("===============================================================================")
    print(f" 🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f" ✅ Storage Backend: {repository.name}")
    if repository.name == "database":
        print(f" ✅ Database: {settings.DATABASE_URL}")
    print(f" ✅ LLM Provider: {ai_settings.LLM_PROVIDER} - {ai_settings.current_llm_model}")
    if ai_settings.OPENAI_BASE_URL:
        print(f" ✅ LLM Base URL: {ai_settings.OPENAI_BASE_URL}")
    print(
        f" ✅ Temperatures: chat {ai_settings.CHAT_TEMPERATURE} / symptom {ai_settings.SYMPTOM_TEMPERATURE}"
        f" / disease {ai_settings.DISEASE_INFO_TEMPERATURE} / news {ai_settings.NEWS_TEMPERATURE}"
        f" / providers {ai_settings.PROVIDERS_TEMPERATURE}"
    )
    print(f" ✅ LLM Timeout: {ai_settings.LLM_TIMEOUT_SECONDS}s")
    print(f" ✅ API Prefix: {settings.API_PREFIX}")
    print("===============================================================================")
    print("===============================================================================\n")


def create_app(
    repository: Optional[MedicalRepository] = None,
    ai_client: Optional[MedicalAIClient] = None,
) -> FastAPI:
    """
    Build the application. Tests pass their own repository and AI client;
    otherwise both come from settings, and a missing provider credential
    stops startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        if ai_client is None:
            ensure_credentials()
        app.state.ai_client = ai_client or build_ai_client()
        app.state.repository = repository or build_repository()

        await app.state.repository.initialize(seed=settings.SEED_ON_STARTUP)
        print_banner(app.state.repository)
        yield
        # Shutdown
        await app.state.repository.close()
        print("👋 Shutting down")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Medical information API: disease database, symptom checker, AI assistant, news and resources",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers with prefixes
    app.include_router(disease_router, prefix=settings.API_PREFIX)
    app.include_router(ai_router, prefix=settings.API_PREFIX)
    app.include_router(news_router, prefix=settings.API_PREFIX)
    app.include_router(resources_router, prefix=settings.API_PREFIX)
    app.include_router(chat_history_router, prefix=settings.API_PREFIX)
    app.include_router(user_router, prefix=settings.API_PREFIX)
    app.include_router(health_router, prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
