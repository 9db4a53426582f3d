# app/storage/factory.py
import logging

from app.storage.base import MedicalRepository
from config.appconfig import settings

logger = logging.getLogger(__name__)


def build_repository() -> MedicalRepository:
    """Pick the repository backend named by STORAGE_BACKEND."""
    backend = settings.STORAGE_BACKEND
    logger.info(f"🗂️  Storage backend: {backend}")

    if backend == "memory":
        from app.storage.memory_storage import InMemoryRepository

        return InMemoryRepository()

    elif backend == "database":
        from app.storage.sql_storage import SqlRepository

        return SqlRepository(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    else:
        raise ValueError(f"Unknown storage backend: {backend}")
