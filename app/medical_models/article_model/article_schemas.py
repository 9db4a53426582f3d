# app/medical_models/article_model/article_schemas.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.helpers.time import as_utc
from app.medical_models.camel_schema import CamelModel


class ArticleBase(CamelModel):
    title: str
    content: str
    summary: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None

class ArticleCreate(ArticleBase):
    # Defaults to insertion time when omitted
    published_at: Optional[datetime] = None

class ArticleResponse(ArticleBase):
    id: int
    published_at: datetime

    @field_validator("published_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

class ArticleCategoryCount(CamelModel):
    category: str
    count: int
