# app/medical_models/body_system_model/body_system_schemas.py
from typing import Optional
from app.medical_models.camel_schema import CamelModel


class BodySystemBase(CamelModel):
    name: str
    description: str
    image_url: Optional[str] = None

class BodySystemCreate(BodySystemBase):
    pass

class BodySystemResponse(BodySystemBase):
    id: int
