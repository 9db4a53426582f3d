# app/medical_models/resource_model/resource_schemas.py
from typing import Optional
from app.medical_models.camel_schema import CamelModel


class ResourceBase(CamelModel):
    title: str
    description: str
    url: Optional[str] = None
    type: str
    category: Optional[str] = None
    location: Optional[str] = None

class ResourceCreate(ResourceBase):
    pass

class ResourceResponse(ResourceBase):
    id: int
