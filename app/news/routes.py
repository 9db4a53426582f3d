# app/news/routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.helpers.paging import resolve_paging
from app.medical_models.article_model.article_schemas import ArticleCategoryCount, ArticleResponse
from app.shared.dependencies import get_repository
from app.shared.errors import APIError
from app.storage.base import MedicalRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["News"])


# Paging params are read as strings so bad values fall back instead of failing
@router.get("", response_model=List[ArticleResponse])
async def latest_articles(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    repository: MedicalRepository = Depends(get_repository),
):
    resolved_page, resolved_limit = resolve_paging(page, limit)
    try:
        return await repository.get_latest_articles(resolved_page, resolved_limit)
    except Exception as e:
        logger.error(f"❌ Failed to fetch news: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch news", error=str(e))


@router.get("/categories", response_model=List[ArticleCategoryCount])
async def article_categories(repository: MedicalRepository = Depends(get_repository)):
    try:
        return await repository.get_article_categories()
    except Exception as e:
        logger.error(f"❌ Failed to fetch news categories: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch news categories", error=str(e))


@router.get("/category/{category}", response_model=List[ArticleResponse])
async def articles_by_category(
    category: str,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    repository: MedicalRepository = Depends(get_repository),
):
    resolved_page, resolved_limit = resolve_paging(page, limit)
    try:
        return await repository.get_articles_by_category(category, resolved_page, resolved_limit)
    except Exception as e:
        logger.error(f"❌ Failed to fetch news for category '{category}': {e}", exc_info=True)
        raise APIError(500, "Failed to fetch news by category", error=str(e))
