# app/medical_models/symptom_model/symptom_schemas.py
from typing import Optional
from app.medical_models.camel_schema import CamelModel


class SymptomBase(CamelModel):
    name: str
    body_system_id: Optional[int] = None
    description: Optional[str] = None

class SymptomCreate(SymptomBase):
    pass

class SymptomResponse(SymptomBase):
    id: int
