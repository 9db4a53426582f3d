# app/medical_models/article_model/article_model.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from app.database.connection import Base
from app.helpers.time import utcnow


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    summary = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    category = Column(String, nullable=True, index=True)
    source = Column(String, nullable=True)
    published_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<Article(id={self.id}, title='{self.title}', category='{self.category}')>"
