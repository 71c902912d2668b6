"""Integration tests for the storage API, directly and through the client."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from transedit.main import app
from transedit.services.client import TranslationsClient
from transedit.services.sync import load_store, save_all, save_key


@pytest.fixture
async def client(translations_dir):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def store_client(translations_dir):
    async with TranslationsClient(
        base_url="http://test", transport=ASGITransport(app=app)
    ) as tc:
        yield tc


def _read(directory, lang):
    return json.loads((directory / f"{lang}.json").read_text(encoding="utf-8"))


class TestHealthEndpoint:
    async def test_health_returns_ok(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestMetricsEndpoint:
    async def test_metrics_returns_text(self, client):
        await client.get("/api/translations")
        response = await client.get("/metrics")
        assert response.status_code == 200
        assert "transedit_loads_total" in response.text


class TestTranslationsEndpoint:
    async def test_load_shape(self, client):
        response = await client.get("/api/translations")
        assert response.status_code == 200
        data = response.json()
        assert data["translations"]["en"] == {
            "greeting": {"hello": "Hello"},
            "farewell": "Farewell",
        }
        assert data["translations"]["fr"] == {}
        assert data["allKeys"] == ["farewell", "greeting.hello"]
        assert data["mainLang"] == "en"

    async def test_save_rewrites_files(self, client, translations_dir):
        body = {"translations": {"fr": {"greeting": {"hello": "Bonjour"}}}}
        response = await client.post("/api/save", json=body)
        assert response.status_code == 200
        assert _read(translations_dir, "fr") == {"greeting": {"hello": "Bonjour"}}
        assert _read(translations_dir, "en")["farewell"] == "Farewell"

    async def test_save_rejects_dotted_segment(self, client, translations_dir):
        body = {"translations": {"fr": {"a.b": "x"}}}
        response = await client.post("/api/save", json=body)
        assert response.status_code == 422
        assert _read(translations_dir, "fr") == {}

    async def test_save_rejects_bad_language(self, client):
        body = {"translations": {"../etc": {"a": "x"}}}
        response = await client.post("/api/save", json=body)
        assert response.status_code == 422

    async def test_save_key_merges_into_tree(self, client, translations_dir):
        body = {"key": "greeting.bye", "values": {"en": "Bye", "fr": "Salut"}}
        response = await client.post("/api/save-key", json=body)
        assert response.status_code == 200
        assert _read(translations_dir, "en")["greeting"] == {"hello": "Hello", "bye": "Bye"}
        assert _read(translations_dir, "fr") == {"greeting": {"bye": "Salut"}}

    async def test_save_key_skips_blank_untranslated(self, client, translations_dir):
        body = {"key": "greeting.bye", "values": {"en": "", "fr": "Salut"}}
        response = await client.post("/api/save-key", json=body)
        assert response.status_code == 200
        assert _read(translations_dir, "en") == {
            "greeting": {"hello": "Hello"},
            "farewell": "Farewell",
        }
        assert _read(translations_dir, "fr") == {"greeting": {"bye": "Salut"}}

    async def test_save_key_collision(self, client):
        body = {"key": "farewell.formal", "values": {"en": "Fare thee well"}}
        response = await client.post("/api/save-key", json=body)
        assert response.status_code == 422

    async def test_save_key_malformed_key(self, client):
        body = {"key": "a..b", "values": {"en": "x"}}
        response = await client.post("/api/save-key", json=body)
        assert response.status_code == 422


class TestEditSession:
    async def test_load_edit_save_all(self, store_client, translations_dir):
        store = await load_store(store_client)
        assert store.languages == ["en", "fr"]

        store.set_value("fr", "greeting.hello", "Bonjour")
        store.set_value("fr", "farewell", "Adieu")
        await save_all(store, store_client)

        assert store.list_dirty() == frozenset()
        assert _read(translations_dir, "fr") == {
            "greeting": {"hello": "Bonjour"},
            "farewell": "Adieu",
        }

    async def test_save_key_colliding_in_other_language(self, store_client, translations_dir):
        store = await load_store(store_client)
        store.set_value("fr", "farewell.formal", "Adieu")
        await save_key(store, store_client, "farewell.formal")

        assert store.list_dirty() == frozenset()
        assert _read(translations_dir, "fr") == {"farewell": {"formal": "Adieu"}}
        assert _read(translations_dir, "en")["farewell"] == "Farewell"

    async def test_empty_subobject_survives_full_save(self, store_client, translations_dir):
        (translations_dir / "de.json").write_text(
            json.dumps({"menu": {}, "ok": "OK"}), encoding="utf-8"
        )
        store = await load_store(store_client)
        store.set_value("de", "ok", "Gut")
        await save_all(store, store_client)

        assert _read(translations_dir, "de") == {"menu": {}, "ok": "Gut"}

    async def test_load_edit_save_key(self, store_client, translations_dir):
        store = await load_store(store_client)
        store.set_value("fr", "farewell", "Adieu")
        store.set_value("fr", "greeting.hello", "Bonjour")
        await save_key(store, store_client, "farewell")

        assert store.list_dirty() == {("fr", "greeting.hello")}
        assert _read(translations_dir, "fr") == {"farewell": "Adieu"}
        assert _read(translations_dir, "en")["farewell"] == "Farewell"
