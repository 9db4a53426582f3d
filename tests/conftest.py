"""
Pytest configuration and fixtures
"""
from typing import AsyncGenerator, Callable, List

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import Runnable, RunnableLambda
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.AIsystem.llm_client import MedicalAIClient
from app.main import create_app
from app.storage.memory_storage import InMemoryRepository
from app.storage.sql_storage import SqlRepository
from config.aiconfig import ai_settings


# Test database URL (in-memory SQLite shared through a single connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================
# ✅ AI CLIENT STAND-INS
# ============================================================
class RecordingFactory:
    """Chat model factory that remembers how it was called."""

    def __init__(self, model: Runnable):
        self.model = model
        self.calls: List[dict] = []

    def __call__(self, temperature: float, max_tokens: int, json_mode: bool) -> Runnable:
        self.calls.append(
            {"temperature": temperature, "max_tokens": max_tokens, "json_mode": json_mode}
        )
        return self.model


def scripted_client(*responses: str) -> MedicalAIClient:
    """AI client whose model replies with the given texts, in order."""
    return MedicalAIClient(chat_model_factory=RecordingFactory(FakeListChatModel(responses=list(responses))))


def _unreachable(_messages):
    raise ConnectionError("provider unreachable")


def failing_client() -> MedicalAIClient:
    return MedicalAIClient(chat_model_factory=RecordingFactory(RunnableLambda(_unreachable)))


@pytest.fixture(autouse=True)
def restore_ai_settings():
    """Tests may patch the shared AI settings; put them back afterwards."""
    snapshot = ai_settings.model_dump()
    yield
    for field, value in snapshot.items():
        setattr(ai_settings, field, value)


# ============================================================
# ✅ REPOSITORIES
# ============================================================
@pytest.fixture
async def memory_repository() -> InMemoryRepository:
    repository = InMemoryRepository()
    await repository.initialize()
    return repository


@pytest.fixture
def empty_repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
async def sql_repository() -> AsyncGenerator[SqlRepository, None]:
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    repository = SqlRepository(TEST_DATABASE_URL, engine=engine)
    await repository.initialize()
    yield repository
    await repository.close()


# ============================================================
# ✅ HTTP CLIENTS
# ============================================================
@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """
    Build a TestClient over a fresh app. Use it as a context manager so the
    lifespan (seeding) runs.
    """

    def _build(ai_client: MedicalAIClient = None, repository=None, **kwargs) -> TestClient:
        app = create_app(
            repository=repository or InMemoryRepository(),
            ai_client=ai_client or scripted_client("{}"),
        )
        return TestClient(app, **kwargs)

    return _build


@pytest.fixture
def client(make_client):
    with make_client() as test_client:
        yield test_client
