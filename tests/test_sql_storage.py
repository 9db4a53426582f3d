"""
SQL repository tests (in-memory SQLite)
"""
import pytest
from sqlalchemy import select

from app.medical_models.article_model.article_model import Article
from app.medical_models.article_model.article_schemas import ArticleResponse
from app.medical_models.chat_history_model.chat_history_schemas import ChatHistoryCreate
from app.medical_models.disease_model.disease_schemas import DiseaseCreate
from app.storage.base import DuplicateUsernameError, StorageError
from app.users.user_models.schemas import UserCreate

pytestmark = pytest.mark.integration


async def test_seeded_tables(sql_repository):
    assert len(await sql_repository.get_all_body_systems()) == 5
    assert len(await sql_repository.get_all_symptoms()) == 20
    assert await sql_repository.ping() is True


async def test_ids_increase_and_round_trip(sql_repository):
    first = await sql_repository.create_disease(
        DiseaseCreate(name="Gout", body_system_id=1, description="Uric acid crystals in joints")
    )
    second = await sql_repository.create_disease(
        DiseaseCreate(name="Lupus", body_system_id=1, description="Autoimmune disease")
    )
    assert second.id > first.id
    assert await sql_repository.get_disease_by_id(first.id) == first


async def test_search_matches_memory_semantics(sql_repository):
    assert await sql_repository.search_diseases("DIABETES") == await sql_repository.search_diseases("diabetes")
    assert [d.name for d in await sql_repository.search_diseases("chest tightness")] == ["Asthma"]
    # LIKE wildcards are matched literally
    assert await sql_repository.search_diseases("%") == []


async def test_latest_articles_pages(sql_repository):
    pages = [await sql_repository.get_latest_articles(page, 2) for page in (1, 2, 3)]
    dates = [a.published_at for page in pages for a in page]

    assert len(dates) == 6
    assert dates == sorted(dates, reverse=True)
    assert all(d.tzinfo is not None for d in dates)
    assert await sql_repository.get_latest_articles(4, 2) == []


async def test_out_of_range_pages_are_empty(sql_repository):
    """Pages past SQLite's integer range return nothing instead of failing"""
    assert await sql_repository.get_latest_articles(10**20, 10) == []
    assert await sql_repository.get_articles_by_category("Neurology", 10**20, 10) == []
    assert len(await sql_repository.get_latest_articles(1, 10**20)) == 6


async def test_out_of_range_ids_find_nothing(sql_repository):
    assert await sql_repository.get_article_by_id(10**20) is None
    assert await sql_repository.get_disease_by_id(-(10**20)) is None
    assert await sql_repository.get_chat_history_by_user_id(10**20) == []
    assert await sql_repository.get_diseases_by_body_system(10**20) == []


async def test_driver_overflow_maps_to_storage_error(sql_repository):
    stmt = select(Article).where(Article.id == 10**20)
    with pytest.raises(StorageError):
        await sql_repository._all(stmt, ArticleResponse)


async def test_get_by_id_round_trips(sql_repository):
    article = (await sql_repository.get_latest_articles(1, 1))[0]
    resource = (await sql_repository.get_resources_by_type("journal"))[0]
    symptom = (await sql_repository.get_all_symptoms())[0]

    assert await sql_repository.get_article_by_id(article.id) == article
    assert await sql_repository.get_resource_by_id(resource.id) == resource
    assert await sql_repository.get_symptom_by_id(symptom.id) == symptom
    assert await sql_repository.get_article_by_id(999999) is None
    assert await sql_repository.get_resource_by_id(999999) is None
    assert await sql_repository.get_symptom_by_id(999999) is None


async def test_category_counts(sql_repository):
    categories = await sql_repository.get_article_categories()
    assert len(categories) == 6
    assert [c.category for c in categories] == sorted(c.category for c in categories)


async def test_resources_filtering(sql_repository):
    patient = await sql_repository.get_resources_by_type("all", "patient")
    assert len(patient) == 2
    assert all(r.category == "patient" for r in patient)


async def test_chat_history_round_trip(sql_repository):
    messages = [{"role": "user", "content": "hello"}, {"role": "assistant", "content": "hi"}]
    saved = await sql_repository.create_chat_history(ChatHistoryCreate(user_id=3, messages=messages))

    history = await sql_repository.get_chat_history_by_user_id(3)
    assert [h.id for h in history] == [saved.id]
    assert history[0].messages == messages
    assert history[0].created_at.tzinfo is not None


async def test_duplicate_username(sql_repository):
    created = await sql_repository.create_user(UserCreate(username="bob", hashed_password="h"))
    with pytest.raises(DuplicateUsernameError):
        await sql_repository.create_user(UserCreate(username="bob", hashed_password="h2"))

    assert (await sql_repository.get_user_by_username("bob")).id == created.id
