# app/medical_models/chat_history_model/chat_history_schemas.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from app.helpers.time import as_utc
from app.medical_models.camel_schema import CamelModel


class ChatHistoryBase(CamelModel):
    user_id: Optional[int] = None
    # Role-tagged entries, stored as given
    messages: List[Dict[str, Any]] = Field(..., min_length=1)

class ChatHistoryCreate(ChatHistoryBase):
    pass

class ChatHistoryResponse(ChatHistoryBase):
    id: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)
