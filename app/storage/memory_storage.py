# app/storage/memory_storage.py
"""
In-memory repository. Process-lifetime only; a restart clears everything.
"""
import logging
import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from app.helpers.time import utcnow
from app.medical_models.article_model.article_schemas import (
    ArticleCategoryCount,
    ArticleCreate,
    ArticleResponse,
)
from app.medical_models.body_system_model.body_system_schemas import BodySystemCreate, BodySystemResponse
from app.medical_models.chat_history_model.chat_history_schemas import ChatHistoryCreate, ChatHistoryResponse
from app.medical_models.disease_model.disease_schemas import DiseaseCreate, DiseaseResponse
from app.medical_models.resource_model.resource_schemas import ResourceCreate, ResourceResponse
from app.medical_models.symptom_model.symptom_schemas import SymptomCreate, SymptomResponse
from app.storage.base import (
    ALL_RESOURCE_TYPES,
    DuplicateUsernameError,
    MedicalRepository,
    page_bounds,
)
from app.users.user_models.schemas import UserCreate, UserRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class _Collection(Generic[RecordT]):
    """Records keyed by id plus the id counter, guarded by one lock."""

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(
        self,
        build: Callable[[int], RecordT],
        check: Optional[Callable[[List[RecordT]], None]] = None,
    ) -> RecordT:
        # Counter bump and insert are one step for every other caller
        with self._lock:
            if check is not None:
                check(list(self._records.values()))
            record = build(self._next_id)
            self._records[self._next_id] = record
            self._next_id += 1
        return record

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def values(self) -> List[RecordT]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)


class InMemoryRepository(MedicalRepository):
    """Dict-backed repository with per-collection auto-increment ids."""

    name = "memory"

    def __init__(self):
        self._users: _Collection[UserRecord] = _Collection("users")
        self._body_systems: _Collection[BodySystemResponse] = _Collection("body_systems")
        self._diseases: _Collection[DiseaseResponse] = _Collection("diseases")
        self._symptoms: _Collection[SymptomResponse] = _Collection("symptoms")
        self._chat_histories: _Collection[ChatHistoryResponse] = _Collection("chat_history")
        self._articles: _Collection[ArticleResponse] = _Collection("articles")
        self._resources: _Collection[ResourceResponse] = _Collection("resources")

    async def initialize(self, seed: bool = True) -> None:
        await super().initialize(seed=seed)
        logger.info(
            f"📦 In-memory store ready: {len(self._body_systems)} body systems, "
            f"{len(self._diseases)} diseases, {len(self._symptoms)} symptoms, "
            f"{len(self._articles)} articles, {len(self._resources)} resources"
        )

    # ============================================================
    # ✅ USERS
    # ============================================================
    async def create_user(self, user: UserCreate) -> UserRecord:
        def ensure_unique(existing: List[UserRecord]) -> None:
            if any(u.username == user.username for u in existing):
                raise DuplicateUsernameError(user.username)

        return self._users.insert(
            lambda new_id: UserRecord(id=new_id, **user.model_dump()),
            check=ensure_unique,
        )

    async def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        return next((u for u in self._users.values() if u.username == username), None)

    # ============================================================
    # ✅ BODY SYSTEMS
    # ============================================================
    async def create_body_system(self, body_system: BodySystemCreate) -> BodySystemResponse:
        return self._body_systems.insert(
            lambda new_id: BodySystemResponse(id=new_id, **body_system.model_dump())
        )

    async def get_all_body_systems(self) -> List[BodySystemResponse]:
        return self._body_systems.values()

    async def get_body_system_by_id(self, body_system_id: int) -> Optional[BodySystemResponse]:
        return self._body_systems.get(body_system_id)

    # ============================================================
    # ✅ DISEASES
    # ============================================================
    async def create_disease(self, disease: DiseaseCreate) -> DiseaseResponse:
        return self._diseases.insert(lambda new_id: DiseaseResponse(id=new_id, **disease.model_dump()))

    async def get_disease_by_id(self, disease_id: int) -> Optional[DiseaseResponse]:
        return self._diseases.get(disease_id)

    async def get_diseases_by_body_system(self, body_system_id: int) -> List[DiseaseResponse]:
        return [d for d in self._diseases.values() if d.body_system_id == body_system_id]

    async def search_diseases(self, query: str) -> List[DiseaseResponse]:
        needle = query.lower()

        def matches(disease: DiseaseResponse) -> bool:
            fields = (disease.name, disease.description, disease.symptoms)
            return any(field and needle in field.lower() for field in fields)

        return [d for d in self._diseases.values() if matches(d)]

    # ============================================================
    # ✅ SYMPTOMS
    # ============================================================
    async def create_symptom(self, symptom: SymptomCreate) -> SymptomResponse:
        return self._symptoms.insert(lambda new_id: SymptomResponse(id=new_id, **symptom.model_dump()))

    async def get_all_symptoms(self) -> List[SymptomResponse]:
        return self._symptoms.values()

    async def get_symptom_by_id(self, symptom_id: int) -> Optional[SymptomResponse]:
        return self._symptoms.get(symptom_id)

    # ============================================================
    # ✅ CHAT HISTORY
    # ============================================================
    async def create_chat_history(self, chat_history: ChatHistoryCreate) -> ChatHistoryResponse:
        return self._chat_histories.insert(
            lambda new_id: ChatHistoryResponse(
                id=new_id,
                user_id=chat_history.user_id,
                messages=chat_history.messages,
                created_at=utcnow(),
            )
        )

    async def get_chat_history_by_user_id(self, user_id: int) -> List[ChatHistoryResponse]:
        return [c for c in self._chat_histories.values() if c.user_id == user_id]

    # ============================================================
    # ✅ ARTICLES
    # ============================================================
    async def create_article(self, article: ArticleCreate) -> ArticleResponse:
        fields = article.model_dump(exclude={"published_at"})
        published_at = article.published_at or utcnow()
        return self._articles.insert(
            lambda new_id: ArticleResponse(id=new_id, published_at=published_at, **fields)
        )

    async def get_article_by_id(self, article_id: int) -> Optional[ArticleResponse]:
        return self._articles.get(article_id)

    async def get_latest_articles(self, page: int = 1, limit: int = 10) -> List[ArticleResponse]:
        start, end = page_bounds(page, limit)
        return self._newest_first(self._articles.values())[start:end]

    async def get_articles_by_category(
        self, category: str, page: int = 1, limit: int = 10
    ) -> List[ArticleResponse]:
        start, end = page_bounds(page, limit)
        matching = [a for a in self._articles.values() if a.category == category]
        return self._newest_first(matching)[start:end]

    async def get_article_categories(self) -> List[ArticleCategoryCount]:
        counts: Dict[str, int] = {}
        for article in self._articles.values():
            if article.category:
                counts[article.category] = counts.get(article.category, 0) + 1
        return [ArticleCategoryCount(category=c, count=n) for c, n in sorted(counts.items())]

    @staticmethod
    def _newest_first(articles: List[ArticleResponse]) -> List[ArticleResponse]:
        # Stable sort: equal timestamps keep insertion order
        return sorted(articles, key=lambda a: a.published_at, reverse=True)

    # ============================================================
    # ✅ RESOURCES
    # ============================================================
    async def create_resource(self, resource: ResourceCreate) -> ResourceResponse:
        return self._resources.insert(lambda new_id: ResourceResponse(id=new_id, **resource.model_dump()))

    async def get_resource_by_id(self, resource_id: int) -> Optional[ResourceResponse]:
        return self._resources.get(resource_id)

    async def get_resources_by_type(
        self, resource_type: str, category: Optional[str] = None
    ) -> List[ResourceResponse]:
        resources = self._resources.values()
        if resource_type != ALL_RESOURCE_TYPES:
            resources = [r for r in resources if r.type == resource_type]
        if category:
            resources = [r for r in resources if r.category == category]
        return resources
