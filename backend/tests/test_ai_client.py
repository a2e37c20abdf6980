"""Tests for the chat-completion client."""

import asyncio
import pytest

from flowledger.ai.client import (
    AIClient,
    AIConfigurationError,
    AIRequestError,
    AIResponseError,
)
from flowledger.config import Settings
from flowledger.schemas.ai import ChatMessage


class TestChatComplete:
    """Request shaping and error mapping."""

    def test_missing_key_fails_before_request(self, fake_completion):
        client = AIClient(Settings(_env_file=None, ai_provider="openrouter", openrouter_api_key=None))
        assert client.key_configured is False

        with pytest.raises(AIConfigurationError):
            asyncio.run(client.chat_complete([ChatMessage(role="user", content="hi")]))
        assert fake_completion.calls == []

    def test_ollama_needs_no_key(self, fake_completion):
        client = AIClient(Settings(_env_file=None, ai_provider="ollama", ai_model="llama3.1:8b"))
        result = asyncio.run(client.chat_complete([{"role": "user", "content": "hi"}]))

        assert result.choices[0].message.content == "OK"
        call = fake_completion.calls[0]
        assert call["model"] == "ollama/llama3.1:8b"
        assert call["api_base"] == "http://localhost:11434"
        assert "api_key" not in call

    def test_openrouter_request(self, ai_client, fake_completion):
        result = asyncio.run(ai_client.chat_complete(
            [ChatMessage(role="system", content="sys"), ChatMessage(role="user", content="hi")]
        ))

        assert result.choices[0].message.content == "OK"
        call = fake_completion.calls[0]
        assert call["model"] == "openrouter/amazon/nova-2-lite-v1:free"
        assert call["api_key"] == "test-key"
        assert call["max_tokens"] == 4000
        assert call["temperature"] == 0.7
        assert call["messages"][1] == {"role": "user", "content": "hi"}
        assert call["extra_headers"]["X-Title"] == "AI Expense Tracker"

    def test_options_override_defaults(self, ai_client, fake_completion):
        asyncio.run(ai_client.chat_complete(
            [ChatMessage(role="user", content="hi")],
            model="openrouter/other",
            max_tokens=10,
            temperature=0.0,
        ))
        call = fake_completion.calls[0]
        assert call["model"] == "openrouter/other"
        assert call["max_tokens"] == 10
        assert call["temperature"] == 0.0

    def test_transport_error_wrapped(self, ai_client, fake_completion):
        error = RuntimeError("503 Service Unavailable")
        error.status_code = 503
        fake_completion.error = error

        with pytest.raises(AIRequestError) as exc_info:
            asyncio.run(ai_client.complete("sys", "hi"))
        assert exc_info.value.status_code == 503


class TestCompleteJson:
    """JSON response handling."""

    def test_strips_code_fence(self, ai_client, fake_completion):
        fake_completion.content = '```json\n{"transactions": []}\n```'
        assert asyncio.run(ai_client.complete_json("sys", "hi")) == {"transactions": []}
        assert fake_completion.calls[0]["response_format"] == {"type": "json_object"}

    def test_invalid_json(self, ai_client, fake_completion):
        fake_completion.content = "Sure! Here are your transactions."
        with pytest.raises(AIResponseError):
            asyncio.run(ai_client.complete_json("sys", "hi"))
