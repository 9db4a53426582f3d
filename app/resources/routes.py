# app/resources/routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.medical_models.resource_model.resource_schemas import ResourceResponse
from app.shared.dependencies import get_repository
from app.shared.errors import APIError
from app.storage.base import MedicalRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get("/{resource_type}", response_model=List[ResourceResponse])
async def list_resources(
    resource_type: str,
    category: Optional[str] = Query(None),
    repository: MedicalRepository = Depends(get_repository),
):
    """
    Resources of one type ("journal", "hospital", ...) or every type with "all".
    An optional category narrows the result further.
    """
    try:
        return await repository.get_resources_by_type(resource_type, category or None)
    except Exception as e:
        logger.error(f"❌ Failed to fetch resources ({resource_type}, {category}): {e}", exc_info=True)
        raise APIError(500, "Failed to fetch resources", error=str(e))
