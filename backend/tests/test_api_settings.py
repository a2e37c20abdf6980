"""Tests for AI settings endpoints."""

import pytest

from flowledger.ai.client import AIClient, get_ai_client, reset_ai_client
from flowledger.config import Settings, settings
from flowledger.main import app


@pytest.fixture
def restore_settings(monkeypatch):
    """Undo runtime settings changes made through the API."""
    for field in ("ai_provider", "ai_model", "ai_max_tokens", "ai_temperature"):
        monkeypatch.setattr(settings, field, getattr(settings, field))
    yield
    reset_ai_client()


class TestSettingsAPI:

    def test_get_settings(self, client):
        response = client.get("/api/v1/settings")
        assert response.status_code == 200
        data = response.json()
        assert data["ai"]["provider"] == settings.ai_provider
        assert {p["id"] for p in data["available_providers"]} == {"openrouter", "ollama", "anthropic", "openai"}

    def test_update_ai_settings(self, client, restore_settings):
        response = client.patch("/api/v1/settings/ai", json={"provider": "ollama", "model": "mistral:7b"})
        assert response.status_code == 200
        data = response.json()
        assert data["provider"] == "ollama"
        assert data["model"] == "mistral:7b"
        assert data["key_configured"] is True

    def test_unknown_provider(self, client, restore_settings):
        response = client.patch("/api/v1/settings/ai", json={"provider": "nope"})
        assert response.status_code == 400

    @pytest.mark.parametrize("update", [{"max_tokens": -5}, {"max_tokens": 0}, {"temperature": -0.1}, {"temperature": 2.5}])
    def test_out_of_range_values_rejected(self, client, restore_settings, update):
        before = (settings.ai_max_tokens, settings.ai_temperature)
        response = client.patch("/api/v1/settings/ai", json=update)
        assert response.status_code == 422
        assert (settings.ai_max_tokens, settings.ai_temperature) == before


class TestConnectionTest:
    """Test the AI connection check."""

    def test_connection_ok(self, client, fake_completion):
        fake_completion.content = " OK \n"
        response = client.post("/api/v1/settings/ai/test")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "response": "OK"}
        assert len(fake_completion.calls) == 1
        assert fake_completion.calls[0]["max_tokens"] == 10

    def test_missing_key_fails_without_request(self, client, fake_completion):
        keyless = AIClient(Settings(_env_file=None, ai_provider="openrouter", openrouter_api_key=None))
        app.dependency_overrides[get_ai_client] = lambda: keyless

        response = client.post("/api/v1/settings/ai/test")
        assert response.status_code == 500
        assert "API key is not configured" in response.json()["detail"]
        assert fake_completion.calls == []

    def test_provider_error(self, client, fake_completion):
        fake_completion.error = RuntimeError("upstream down")
        response = client.post("/api/v1/settings/ai/test")
        assert response.status_code == 500
        assert "upstream down" in response.json()["detail"]
