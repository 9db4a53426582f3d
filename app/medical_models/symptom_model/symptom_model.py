# app/medical_models/symptom_model/symptom_model.py
from sqlalchemy import Column, Integer, String, Text
from app.database.connection import Base


class Symptom(Base):
    __tablename__ = "symptoms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Null for systemic symptoms (fever, fatigue, ...)
    body_system_id = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Symptom(id={self.id}, name='{self.name}')>"
