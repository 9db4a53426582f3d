# app/shared/health_routes.py
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.AIsystem.llm_client import MedicalAIClient
from app.shared.dependencies import get_ai_client, get_repository
from app.storage.base import MedicalRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(
    repository: MedicalRepository = Depends(get_repository),
    ai_client: MedicalAIClient = Depends(get_ai_client),
):
    """Storage reachability plus the active model. 503 when storage is down."""
    storage_ok = await repository.ping()
    model_info = ai_client.get_model_info()

    body = {
        "status": "ok" if storage_ok else "degraded",
        "storage": {"backend": repository.name, "reachable": storage_ok},
        "llm": {
            "provider": model_info["provider"],
            "model": model_info["model"],
            "credentialsConfigured": model_info["credentials_configured"],
        },
    }

    if not storage_ok:
        logger.warning(f"⚠️  Health check: {repository.name} storage unreachable")
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
