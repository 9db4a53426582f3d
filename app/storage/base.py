# app/storage/base.py
"""
Repository contract shared by the in-memory and SQL backends.

Every method is async so a networked store can be dropped in without touching
the routers. Lookups return None when a record is absent; they never raise for
"not found". Backends map their own failures to StorageError.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

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
from app.users.user_models.schemas import UserCreate, UserRecord

# Resource type that disables the type filter
ALL_RESOURCE_TYPES = "all"


class StorageError(Exception):
    """The backing store could not complete an operation."""


class DuplicateUsernameError(StorageError):
    """A user with this username already exists."""

    def __init__(self, username: str):
        super().__init__(f"Username already taken: {username}")
        self.username = username


def page_bounds(page: int, limit: int) -> tuple[int, int]:
    """1-based page → [start, end) slice bounds."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    return (page - 1) * limit, page * limit


class MedicalRepository(ABC):
    """CRUD-and-query operations over the medical collections."""

    name: str = "abstract"

    async def initialize(self, seed: bool = True) -> None:
        """Prepare the store and load fixtures when it is empty."""
        if seed and not await self.get_all_body_systems():
            from app.storage.seed_data import seed_repository

            await seed_repository(self)

    async def close(self) -> None:
        return None

    async def ping(self) -> bool:
        """Cheap reachability check for the health endpoint."""
        return True

    # ── Users ──
    @abstractmethod
    async def create_user(self, user: UserCreate) -> UserRecord: ...

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[UserRecord]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[UserRecord]: ...

    # ── Body systems ──
    @abstractmethod
    async def create_body_system(self, body_system: BodySystemCreate) -> BodySystemResponse: ...

    @abstractmethod
    async def get_all_body_systems(self) -> List[BodySystemResponse]: ...

    @abstractmethod
    async def get_body_system_by_id(self, body_system_id: int) -> Optional[BodySystemResponse]: ...

    # ── Diseases ──
    @abstractmethod
    async def create_disease(self, disease: DiseaseCreate) -> DiseaseResponse: ...

    @abstractmethod
    async def get_disease_by_id(self, disease_id: int) -> Optional[DiseaseResponse]: ...

    @abstractmethod
    async def get_diseases_by_body_system(self, body_system_id: int) -> List[DiseaseResponse]: ...

    @abstractmethod
    async def search_diseases(self, query: str) -> List[DiseaseResponse]:
        """Case-insensitive substring match on name, description or symptoms."""

    # ── Symptoms ──
    @abstractmethod
    async def create_symptom(self, symptom: SymptomCreate) -> SymptomResponse: ...

    @abstractmethod
    async def get_all_symptoms(self) -> List[SymptomResponse]: ...

    @abstractmethod
    async def get_symptom_by_id(self, symptom_id: int) -> Optional[SymptomResponse]: ...

    # ── Chat history ──
    @abstractmethod
    async def create_chat_history(self, chat_history: ChatHistoryCreate) -> ChatHistoryResponse:
        """createdAt is assigned here, whatever the caller sent."""

    @abstractmethod
    async def get_chat_history_by_user_id(self, user_id: int) -> List[ChatHistoryResponse]: ...

    # ── Articles ──
    @abstractmethod
    async def create_article(self, article: ArticleCreate) -> ArticleResponse: ...

    @abstractmethod
    async def get_article_by_id(self, article_id: int) -> Optional[ArticleResponse]: ...

    @abstractmethod
    async def get_latest_articles(self, page: int = 1, limit: int = 10) -> List[ArticleResponse]:
        """Newest first; pages past the end are empty."""

    @abstractmethod
    async def get_articles_by_category(
        self, category: str, page: int = 1, limit: int = 10
    ) -> List[ArticleResponse]: ...

    @abstractmethod
    async def get_article_categories(self) -> List[ArticleCategoryCount]: ...

    # ── Resources ──
    @abstractmethod
    async def create_resource(self, resource: ResourceCreate) -> ResourceResponse: ...

    @abstractmethod
    async def get_resource_by_id(self, resource_id: int) -> Optional[ResourceResponse]: ...

    @abstractmethod
    async def get_resources_by_type(
        self, resource_type: str, category: Optional[str] = None
    ) -> List[ResourceResponse]:
        """resource_type "all" disables the type filter; category is ANDed in."""
