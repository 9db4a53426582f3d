"""
News and resource directory endpoint tests
"""
import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.helpers.paging import resolve_paging
from app.storage.sql_storage import SqlRepository
from config.appconfig import settings
from tests.conftest import TEST_DATABASE_URL

pytestmark = pytest.mark.integration


def test_news_pages(client):
    pages = [client.get("/api/news", params={"page": p, "limit": 2}).json() for p in (1, 2, 3)]
    dates = [a["publishedAt"] for page in pages for a in page]

    assert all(len(page) == 2 for page in pages)
    assert dates == sorted(dates, reverse=True)
    assert client.get("/api/news", params={"page": 4, "limit": 2}).json() == []


def test_news_huge_page_is_empty_on_sql_backend(make_client):
    engine = create_async_engine(
        TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    repository = SqlRepository(TEST_DATABASE_URL, engine=engine)

    with make_client(repository=repository) as test_client:
        latest = test_client.get("/api/news", params={"page": str(10**20)})
        by_category = test_client.get("/api/news/category/Neurology", params={"page": str(10**20)})

    assert latest.status_code == 200
    assert latest.json() == []
    assert by_category.status_code == 200
    assert by_category.json() == []


@pytest.mark.parametrize("params", [{}, {"page": "abc"}, {"page": "0", "limit": "-3"}])
def test_news_bad_paging_falls_back(client, params):
    response = client.get("/api/news", params=params)
    assert response.status_code == 200
    assert len(response.json()) == 6


def test_resolve_paging_caps_limit():
    assert resolve_paging(None, None) == (settings.DEFAULT_PAGE, settings.DEFAULT_PAGE_SIZE)
    assert resolve_paging("3", "100000") == (3, settings.MAX_PAGE_SIZE)
    assert resolve_paging("2.5", "x") == (settings.DEFAULT_PAGE, settings.DEFAULT_PAGE_SIZE)


def test_news_categories(client):
    categories = client.get("/api/news/categories").json()
    assert len(categories) == 6
    assert categories[0] == {"category": "Cardiology", "count": 1}


def test_news_by_category(client):
    articles = client.get("/api/news/category/Neurology").json()
    assert [a["category"] for a in articles] == ["Neurology"]
    assert client.get("/api/news/category/Unknown").json() == []


def test_resources_all_by_category(client):
    resources = client.get("/api/resources/all", params={"category": "patient"}).json()
    assert len(resources) == 2
    assert all(r["category"] == "patient" for r in resources)


def test_resources_by_type(client):
    hospitals = client.get("/api/resources/hospital").json()
    assert len(hospitals) == 2
    assert all(r["type"] == "hospital" for r in hospitals)
    assert client.get("/api/resources/podcast").json() == []


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["storage"] == {"backend": "memory", "reachable": True}


def test_health_reports_unreachable_storage(make_client, empty_repository, monkeypatch):
    async def down():
        return False

    with make_client(repository=empty_repository) as test_client:
        monkeypatch.setattr(empty_repository, "ping", down)
        response = test_client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"
