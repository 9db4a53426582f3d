# app/medical_models/resource_model/resource_model.py
from sqlalchemy import Column, Integer, String, Text
from app.database.connection import Base


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    url = Column(String, nullable=True)
    # journal / reference / website / organization / hospital / ...
    type = Column(String, nullable=False, index=True)
    # professional / patient / hospital
    category = Column(String, nullable=True, index=True)
    location = Column(String, nullable=True)

    def __repr__(self):
        return f"<Resource(id={self.id}, title='{self.title}', type='{self.type}')>"
