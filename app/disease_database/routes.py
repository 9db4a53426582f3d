# app/disease_database/routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.medical_models.body_system_model.body_system_schemas import BodySystemResponse
from app.medical_models.disease_model.disease_schemas import DiseaseResponse
from app.medical_models.symptom_model.symptom_schemas import SymptomResponse
from app.shared.dependencies import get_repository
from app.shared.errors import APIError
from app.storage.base import MedicalRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Disease Database"])


# ============================================================
# ✅ BODY SYSTEMS
# ============================================================
@router.get("/body-systems", response_model=List[BodySystemResponse])
async def list_body_systems(repository: MedicalRepository = Depends(get_repository)):
    try:
        return await repository.get_all_body_systems()
    except Exception as e:
        logger.error(f"❌ Failed to fetch body systems: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch body systems", error=str(e))


@router.get("/body-systems/{body_system_id}", response_model=BodySystemResponse)
async def get_body_system(body_system_id: int, repository: MedicalRepository = Depends(get_repository)):
    try:
        body_system = await repository.get_body_system_by_id(body_system_id)
    except Exception as e:
        logger.error(f"❌ Failed to fetch body system {body_system_id}: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch body system", error=str(e))

    if body_system is None:
        raise APIError(404, "Body system not found")
    return body_system


# ============================================================
# ✅ DISEASES
# ============================================================
# /by-system and /search are declared before /{disease_id} so they are not
# captured as ids
@router.get("/diseases/by-system/{body_system_id}", response_model=List[DiseaseResponse])
async def list_diseases_by_system(
    body_system_id: int, repository: MedicalRepository = Depends(get_repository)
):
    try:
        return await repository.get_diseases_by_body_system(body_system_id)
    except Exception as e:
        logger.error(f"❌ Failed to fetch diseases for system {body_system_id}: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch diseases", error=str(e))


@router.get("/diseases/search", response_model=List[DiseaseResponse])
async def search_diseases(
    q: Optional[str] = Query(None, description="Matched against name, description and symptoms"),
    repository: MedicalRepository = Depends(get_repository),
):
    if q is None or not q.strip():
        raise APIError(400, "Search query is required")

    try:
        return await repository.search_diseases(q)
    except Exception as e:
        logger.error(f"❌ Disease search for '{q}' failed: {e}", exc_info=True)
        raise APIError(500, "Failed to search diseases", error=str(e))


@router.get("/diseases/{disease_id}", response_model=DiseaseResponse)
async def get_disease(disease_id: int, repository: MedicalRepository = Depends(get_repository)):
    try:
        disease = await repository.get_disease_by_id(disease_id)
    except Exception as e:
        logger.error(f"❌ Failed to fetch disease {disease_id}: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch disease", error=str(e))

    if disease is None:
        raise APIError(404, "Disease not found")
    return disease


# ============================================================
# ✅ SYMPTOMS
# ============================================================
@router.get("/symptoms", response_model=List[SymptomResponse])
async def list_symptoms(repository: MedicalRepository = Depends(get_repository)):
    try:
        return await repository.get_all_symptoms()
    except Exception as e:
        logger.error(f"❌ Failed to fetch symptoms: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch symptoms", error=str(e))
