# app/medical_models/disease_model/disease_model.py
from sqlalchemy import Column, Integer, String, Text
from app.database.connection import Base


class Disease(Base):
    __tablename__ = "diseases"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)

    # Soft reference: no foreign key, callers own referential integrity
    body_system_id = Column(Integer, nullable=False, index=True)

    description = Column(Text, nullable=False)
    causes = Column(Text, nullable=True)
    symptoms = Column(Text, nullable=True)
    treatments = Column(Text, nullable=True)
    prevention = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)

    def __repr__(self):
        return f"<Disease(id={self.id}, name='{self.name}', body_system_id={self.body_system_id})>"
