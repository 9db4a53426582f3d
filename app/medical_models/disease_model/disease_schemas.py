# app/medical_models/disease_model/disease_schemas.py
from typing import Optional
from app.medical_models.camel_schema import CamelModel


class DiseaseBase(CamelModel):
    name: str
    body_system_id: int
    description: str
    causes: Optional[str] = None
    # Free text, not linked to Symptom records
    symptoms: Optional[str] = None
    treatments: Optional[str] = None
    prevention: Optional[str] = None
    image_url: Optional[str] = None

class DiseaseCreate(DiseaseBase):
    pass

class DiseaseResponse(DiseaseBase):
    id: int
