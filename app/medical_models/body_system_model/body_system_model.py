# app/medical_models/body_system_model/body_system_model.py
from sqlalchemy import Column, Integer, String, Text
from app.database.connection import Base


class BodySystem(Base):
    __tablename__ = "body_systems"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)

    def __repr__(self):
        return f"<BodySystem(id={self.id}, name='{self.name}')>"
