# app/medical_models/chat_history_model/chat_history_model.py
from sqlalchemy import JSON, Column, DateTime, Integer
from app.database.connection import Base
from app.helpers.time import utcnow


class ChatHistory(Base):
    __tablename__ = "chat_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    messages = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<ChatHistory(id={self.id}, user_id={self.user_id}, messages={len(self.messages or [])})>"
