# app/storage/sql_storage.py
"""
SQLAlchemy-backed repository. Same contract as the in-memory store; identifiers
come from the database's autoincrement keys.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, or_, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

import app.model_registry  # noqa: F401  (registers every table on Base.metadata)
from app.database.connection import Base, create_engine, create_session_factory
from app.helpers.time import utcnow
from app.medical_models.article_model.article_model import Article
from app.medical_models.article_model.article_schemas import (
    ArticleCategoryCount,
    ArticleCreate,
    ArticleResponse,
)
from app.medical_models.body_system_model.body_system_model import BodySystem
from app.medical_models.body_system_model.body_system_schemas import BodySystemCreate, BodySystemResponse
from app.medical_models.chat_history_model.chat_history_model import ChatHistory
from app.medical_models.chat_history_model.chat_history_schemas import ChatHistoryCreate, ChatHistoryResponse
from app.medical_models.disease_model.disease_model import Disease
from app.medical_models.disease_model.disease_schemas import DiseaseCreate, DiseaseResponse
from app.medical_models.resource_model.resource_model import Resource
from app.medical_models.resource_model.resource_schemas import ResourceCreate, ResourceResponse
from app.medical_models.symptom_model.symptom_model import Symptom
from app.medical_models.symptom_model.symptom_schemas import SymptomCreate, SymptomResponse
from app.storage.base import (
    ALL_RESOURCE_TYPES,
    DuplicateUsernameError,
    MedicalRepository,
    StorageError,
    page_bounds,
)
from app.users.user_models.schemas import UserCreate, UserRecord
from app.users.user_models.user_model import User

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Largest value SQLite binds as an INTEGER (OFFSET and LIMIT included)
SQL_MAX_INTEGER = 2**63 - 1


class SqlRepository(MedicalRepository):
    """Repository over an async SQLAlchemy engine."""

    name = "database"

    def __init__(self, database_url: str, echo: bool = False, engine: Optional[AsyncEngine] = None):
        self.database_url = database_url
        self._engine = engine or create_engine(database_url, echo=echo)
        self._session_factory = create_session_factory(self._engine)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        """Session scope that turns driver/ORM failures into StorageError."""
        try:
            async with self._session_factory() as session:
                yield session
        except StorageError:
            raise
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError comes from the driver binding an out-of-range integer
            logger.error(f"❌ Database operation failed: {e}", exc_info=True)
            raise StorageError(str(e)) from e

    async def _add(self, row: Base, schema: Type[SchemaT]) -> SchemaT:
        async with self._session() as session:
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return schema.model_validate(row)

    async def _all(self, stmt, schema: Type[SchemaT]) -> List[SchemaT]:
        async with self._session() as session:
            result = await session.execute(stmt)
            return [schema.model_validate(row) for row in result.scalars().all()]

    async def _get(self, model: Type[Base], record_id: int, schema: Type[SchemaT]) -> Optional[SchemaT]:
        if abs(record_id) > SQL_MAX_INTEGER:
            return None
        async with self._session() as session:
            row = await session.get(model, record_id)
            return schema.model_validate(row) if row is not None else None

    # ============================================================
    # ✅ LIFECYCLE
    # ============================================================
    async def initialize(self, seed: bool = True) -> None:
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not prepare schema: {e}") from e
        await super().initialize(seed=seed)
        logger.info(f"🗄️  SQL store ready at {self._engine.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        await self._engine.dispose()

    async def ping(self) -> bool:
        try:
            async with self._session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except StorageError:
            return False

    # ============================================================
    # ✅ USERS
    # ============================================================
    async def create_user(self, user: UserCreate) -> UserRecord:
        try:
            async with self._session_factory() as session:
                row = User(username=user.username, hashed_password=user.hashed_password)
                session.add(row)
                await session.commit()
                await session.refresh(row)
                return UserRecord.model_validate(row)
        except IntegrityError as e:
            raise DuplicateUsernameError(user.username) from e
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    async def get_user(self, user_id: int) -> Optional[UserRecord]:
        return await self._get(User, user_id, UserRecord)

    async def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        rows = await self._all(select(User).where(User.username == username), UserRecord)
        return rows[0] if rows else None

    # ============================================================
    # ✅ BODY SYSTEMS
    # ============================================================
    async def create_body_system(self, body_system: BodySystemCreate) -> BodySystemResponse:
        return await self._add(BodySystem(**body_system.model_dump()), BodySystemResponse)

    async def get_all_body_systems(self) -> List[BodySystemResponse]:
        return await self._all(select(BodySystem).order_by(BodySystem.id), BodySystemResponse)

    async def get_body_system_by_id(self, body_system_id: int) -> Optional[BodySystemResponse]:
        return await self._get(BodySystem, body_system_id, BodySystemResponse)

    # ============================================================
    # ✅ DISEASES
    # ============================================================
    async def create_disease(self, disease: DiseaseCreate) -> DiseaseResponse:
        return await self._add(Disease(**disease.model_dump()), DiseaseResponse)

    async def get_disease_by_id(self, disease_id: int) -> Optional[DiseaseResponse]:
        return await self._get(Disease, disease_id, DiseaseResponse)

    async def get_diseases_by_body_system(self, body_system_id: int) -> List[DiseaseResponse]:
        if abs(body_system_id) > SQL_MAX_INTEGER:
            return []
        stmt = select(Disease).where(Disease.body_system_id == body_system_id).order_by(Disease.id)
        return await self._all(stmt, DiseaseResponse)

    async def search_diseases(self, query: str) -> List[DiseaseResponse]:
        needle = query.lower()
        # autoescape keeps % and _ in the query literal
        stmt = (
            select(Disease)
            .where(
                or_(
                    func.lower(Disease.name).contains(needle, autoescape=True),
                    func.lower(Disease.description).contains(needle, autoescape=True),
                    func.lower(Disease.symptoms).contains(needle, autoescape=True),
                )
            )
            .order_by(Disease.id)
        )
        return await self._all(stmt, DiseaseResponse)

    # ============================================================
    # ✅ SYMPTOMS
    # ============================================================
    async def create_symptom(self, symptom: SymptomCreate) -> SymptomResponse:
        return await self._add(Symptom(**symptom.model_dump()), SymptomResponse)

    async def get_all_symptoms(self) -> List[SymptomResponse]:
        return await self._all(select(Symptom).order_by(Symptom.id), SymptomResponse)

    async def get_symptom_by_id(self, symptom_id: int) -> Optional[SymptomResponse]:
        return await self._get(Symptom, symptom_id, SymptomResponse)

    # ============================================================
    # ✅ CHAT HISTORY
    # ============================================================
    async def create_chat_history(self, chat_history: ChatHistoryCreate) -> ChatHistoryResponse:
        row = ChatHistory(
            user_id=chat_history.user_id,
            messages=chat_history.messages,
            created_at=utcnow(),
        )
        return await self._add(row, ChatHistoryResponse)

    async def get_chat_history_by_user_id(self, user_id: int) -> List[ChatHistoryResponse]:
        if abs(user_id) > SQL_MAX_INTEGER:
            return []
        stmt = select(ChatHistory).where(ChatHistory.user_id == user_id).order_by(ChatHistory.id)
        return await self._all(stmt, ChatHistoryResponse)

    # ============================================================
    # ✅ ARTICLES
    # ============================================================
    async def create_article(self, article: ArticleCreate) -> ArticleResponse:
        fields = article.model_dump(exclude={"published_at"})
        row = Article(**fields, published_at=article.published_at or utcnow())
        return await self._add(row, ArticleResponse)

    async def get_article_by_id(self, article_id: int) -> Optional[ArticleResponse]:
        return await self._get(Article, article_id, ArticleResponse)

    async def get_latest_articles(self, page: int = 1, limit: int = 10) -> List[ArticleResponse]:
        start, _ = page_bounds(page, limit)
        if start > SQL_MAX_INTEGER:
            return []
        stmt = (
            select(Article)
            .order_by(Article.published_at.desc(), Article.id)
            .offset(start)
            .limit(min(limit, SQL_MAX_INTEGER))
        )
        return await self._all(stmt, ArticleResponse)

    async def get_articles_by_category(
        self, category: str, page: int = 1, limit: int = 10
    ) -> List[ArticleResponse]:
        start, _ = page_bounds(page, limit)
        if start > SQL_MAX_INTEGER:
            return []
        stmt = (
            select(Article)
            .where(Article.category == category)
            .order_by(Article.published_at.desc(), Article.id)
            .offset(start)
            .limit(min(limit, SQL_MAX_INTEGER))
        )
        return await self._all(stmt, ArticleResponse)

    async def get_article_categories(self) -> List[ArticleCategoryCount]:
        stmt = (
            select(Article.category, func.count(Article.id))
            .where(Article.category.is_not(None))
            .group_by(Article.category)
            .order_by(Article.category)
        )
        async with self._session() as session:
            result = await session.execute(stmt)
            return [ArticleCategoryCount(category=c, count=n) for c, n in result.all()]

    # ============================================================
    # ✅ RESOURCES
    # ============================================================
    async def create_resource(self, resource: ResourceCreate) -> ResourceResponse:
        return await self._add(Resource(**resource.model_dump()), ResourceResponse)

    async def get_resource_by_id(self, resource_id: int) -> Optional[ResourceResponse]:
        return await self._get(Resource, resource_id, ResourceResponse)

    async def get_resources_by_type(
        self, resource_type: str, category: Optional[str] = None
    ) -> List[ResourceResponse]:
        stmt = select(Resource).order_by(Resource.id)
        if resource_type != ALL_RESOURCE_TYPES:
            stmt = stmt.where(Resource.type == resource_type)
        if category:
            stmt = stmt.where(Resource.category == category)
        return await self._all(stmt, ResourceResponse)
