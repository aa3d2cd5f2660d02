import pytest
import requests
from fastapi.testclient import TestClient

from ukrainian_learning_api.app.core.storage import MemStorage
from ukrainian_learning_api.app.main import create_app
from ukrainian_learning_api.app.schemas.community import CommunityResourceCreate
from ukrainian_learning_api.app.services import translation_service
from ukrainian_learning_api.app.services.translation_service import TranslationService


def _save(client, **body):
    payload = {"ukrainianText": "Привіт", "englishText": "Hello"}
    payload.update(body)
    resp = client.post("/api/translations", json=payload)
    assert resp.status_code == 200
    return resp.json()


# -- translations ----------------------------------------------------------


def test_save_translation_returns_camel_case_record(client: TestClient) -> None:
    record = _save(client, userId="u1")

    assert record["ukrainianText"] == "Привіт"
    assert record["englishText"] == "Hello"
    assert record["userId"] == "u1"
    assert record["isFavorite"] is False
    assert record["id"]
    assert record["createdAt"].startswith("2025-07-01T12:00:00")


def test_save_translation_invalid_body(client: TestClient) -> None:
    resp = client.post("/api/translations", json={"ukrainianText": "Привіт"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid request data"}


def test_list_translations_for_user(client: TestClient) -> None:
    first = _save(client, userId="u1", ukrainianText="один")
    _save(client, userId="u2")
    second = _save(client, userId="u1", ukrainianText="два")

    resp = client.get("/api/translations", params={"userId": "u1"})

    assert resp.status_code == 200
    assert [t["id"] for t in resp.json()] == [second["id"], first["id"]]


def test_list_translations_without_user_is_capped(client: TestClient) -> None:
    for i in range(12):
        _save(client, ukrainianText=str(i))
    resp = client.get("/api/translations")
    assert resp.status_code == 200
    assert [t["ukrainianText"] for t in resp.json()] == [str(i) for i in range(10)]


def test_toggle_favorite(client: TestClient, seeded_storage: MemStorage) -> None:
    record = _save(client)

    resp = client.patch(f"/api/translations/{record['id']}/favorite")

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert seeded_storage.translations[record["id"]].is_favorite is True


def test_toggle_favorite_unknown_id_still_succeeds(client: TestClient) -> None:
    resp = client.patch("/api/translations/does-not-exist/favorite")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_store_failure_maps_to_generic_500(client: TestClient, seeded_storage: MemStorage, monkeypatch) -> None:
    def boom(user_id=None):
        raise RuntimeError("internal detail")

    monkeypatch.setattr(seeded_storage, "get_user_translations", boom)
    resp = client.get("/api/translations")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to fetch translations"}


# -- dictionary ------------------------------------------------------------


def test_dictionary_search(client: TestClient) -> None:
    resp = client.get("/api/dictionary/search", params={"q": "hello"})
    assert resp.status_code == 200
    body = resp.json()
    assert [e["ukrainianWord"] for e in body] == ["Привіт"]
    assert body[0]["examples"] == [{"ukrainian": "Привіт! Як справи?", "english": "Hello! How are you?"}]
    assert body[0]["partOfSpeech"] == "interjection"


@pytest.mark.parametrize("params", [{}, {"q": ""}])
def test_dictionary_search_requires_query(client: TestClient, params) -> None:
    resp = client.get("/api/dictionary/search", params=params)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Query parameter required"}


def test_dictionary_list_and_get(client: TestClient) -> None:
    entries = client.get("/api/dictionary").json()
    assert len(entries) == 5

    resp = client.get(f"/api/dictionary/{entries[1]['id']}")
    assert resp.status_code == 200
    assert resp.json()["englishTranslation"] == "Thank you"


def test_dictionary_entry_not_found(client: TestClient) -> None:
    resp = client.get("/api/dictionary/missing")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Dictionary entry not found"}


# -- history ---------------------------------------------------------------


def test_history_ordered_by_year(client: TestClient) -> None:
    resp = client.get("/api/history")
    assert resp.status_code == 200
    years = [e["year"] for e in resp.json()]
    assert years == sorted(years)
    assert years[0] == 1891


def test_history_filtered_by_year(client: TestClient) -> None:
    resp = client.get("/api/history", params={"year": 1955})
    assert [e["title"] for e in resp.json()] == ["First Cabinet Minister"]


# -- learning --------------------------------------------------------------


def test_learning_modules(client: TestClient) -> None:
    resp = client.get("/api/learning/modules")
    assert resp.status_code == 200
    modules = resp.json()
    assert [m["orderIndex"] for m in modules] == [1, 2, 3]
    assert modules[0]["hasVoicePractice"] is True
    assert modules[0]["estimatedTime"] == 15
    assert modules[0]["content"]["lessons"][0] == {"id": 1, "title": "Greetings", "completed": True}

    one = client.get(f"/api/learning/modules/{modules[2]['id']}")
    assert one.status_code == 200
    assert one.json()["title"] == "Canadian Culture & Customs"


def test_learning_module_not_found(client: TestClient) -> None:
    resp = client.get("/api/learning/modules/missing")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Learning module not found"}


# -- community -------------------------------------------------------------


def test_community_resources_by_type(client: TestClient, seeded_storage: MemStorage) -> None:
    seeded_storage.add_community_resource(CommunityResourceCreate(name="Hidden", type="event", is_active=False))

    resp = client.get("/api/community/resources", params={"type": "event"})

    assert resp.status_code == 200
    names = [r["name"] for r in resp.json()]
    assert names == ["Canada's National Ukrainian Festival", "Ukrainian Independence Day Celebration"]
    assert all(r["type"] == "event" and r["isActive"] for r in resp.json())


def test_community_resources_all_active(client: TestClient) -> None:
    resp = client.get("/api/community/resources")
    assert len(resp.json()) == 5


def test_upcoming_events(client: TestClient) -> None:
    resp = client.get("/api/community/events")
    assert resp.status_code == 200
    body = resp.json()
    assert [e["name"] for e in body] == [
        "Canada's National Ukrainian Festival",
        "Ukrainian Independence Day Celebration",
    ]
    assert body[0]["eventDate"].startswith("2025-08-01")


# -- translate -------------------------------------------------------------


def test_translate_fallback(client: TestClient) -> None:
    resp = client.post("/api/translate", json={"text": "hello"})
    assert resp.status_code == 200
    assert resp.json() == {"translatedText": "Привіт", "sourceLanguage": "auto", "targetLanguage": "uk"}


def test_translate_fallback_keeps_language_hints(client: TestClient) -> None:
    resp = client.post("/api/translate", json={"text": "Bread", "from": "en", "to": "uk"})
    assert resp.json() == {"translatedText": "Bread", "sourceLanguage": "en", "targetLanguage": "uk"}


@pytest.mark.parametrize("body", [{}, {"text": ""}])
def test_translate_requires_text(client: TestClient, body) -> None:
    resp = client.post("/api/translate", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Text is required"}


def test_translate_provider_failure(seeded_storage: MemStorage, monkeypatch) -> None:
    def fake_post(*args, **kwargs):
        raise requests.Timeout("provider timed out")

    monkeypatch.setattr(translation_service.requests, "post", fake_post)
    client = TestClient(create_app(storage=seeded_storage, translation_service=TranslationService(api_key="k")))

    resp = client.post("/api/translate", json={"text": "hello"})

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Translation failed"}


# -- users -----------------------------------------------------------------


def test_register_and_fetch_user(client: TestClient) -> None:
    resp = client.post("/api/users", json={"username": "olena", "password": "secret"})
    assert resp.status_code == 201
    user = resp.json()
    assert "password" not in user
    assert user["learningProgress"] == 0
    assert user["completedLessons"] == []
    assert user["favoriteTranslations"] == []

    assert client.get(f"/api/users/{user['id']}").json()["username"] == "olena"
    assert client.get("/api/users", params={"username": "olena"}).json()["id"] == user["id"]


def test_register_duplicate_username(client: TestClient) -> None:
    client.post("/api/users", json={"username": "olena", "password": "secret"})
    resp = client.post("/api/users", json={"username": "olena", "password": "other"})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Username already exists"}


def test_user_lookup_errors(client: TestClient) -> None:
    assert client.get("/api/users").status_code == 400
    assert client.get("/api/users", params={"username": "nobody"}).status_code == 404
    assert client.get("/api/users/missing").status_code == 404


def test_update_progress(client: TestClient) -> None:
    user = client.post("/api/users", json={"username": "olena", "password": "secret"}).json()

    resp = client.patch(
        f"/api/users/{user['id']}/progress",
        json={"learningProgress": 40, "completedLessons": ["greetings"]},
    )

    assert resp.json() == {"success": True}
    updated = client.get(f"/api/users/{user['id']}").json()
    assert updated["learningProgress"] == 40
    assert updated["completedLessons"] == ["greetings"]


def test_update_progress_rejects_negative(client: TestClient) -> None:
    resp = client.patch("/api/users/any/progress", json={"learningProgress": -1})
    assert resp.status_code == 400


# -- app -------------------------------------------------------------------


def test_versioned_prefix_serves_same_routes(client: TestClient) -> None:
    assert client.get("/api/v1/history").json() == client.get("/api/history").json()


def test_default_app_is_seeded() -> None:
    from ukrainian_learning_api.app.main import app

    resp = TestClient(app).get("/api/dictionary")
    assert resp.status_code == 200
    assert len(resp.json()) >= 5
