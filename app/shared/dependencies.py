# app/shared/dependencies.py
from fastapi import Request

from app.AIsystem.llm_client import MedicalAIClient
from app.storage.base import MedicalRepository


def get_repository(request: Request) -> MedicalRepository:
    """Repository created by the application factory."""
    return request.app.state.repository


def get_ai_client(request: Request) -> MedicalAIClient:
    return request.app.state.ai_client
