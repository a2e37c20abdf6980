import logging
import litellm
from typing import Optional, Dict, Any, List, Sequence, Union
import json

from flowledger.config import Settings, settings
from flowledger.schemas.ai import ChatCompletion, ChatMessage

logger = logging.getLogger(__name__)

litellm.drop_params = True

KEYED_PROVIDERS = ("openrouter", "openai", "anthropic")


class AIClientError(Exception):
    """Base class for chat-completion failures."""


class AIConfigurationError(AIClientError):
    """The provider needs an API key that is not configured."""


class AIRequestError(AIClientError):
    """The request failed in transport or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AIResponseError(AIClientError):
    """The response could not be parsed."""


class AIClient:

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings
        self.provider = self.config.ai_provider
        self.model = self._get_model_string()

    def _get_model_string(self) -> str:
        model = self.config.ai_model

        if self.provider == "openrouter":
            if not model.startswith("openrouter/"):
                return f"openrouter/{model}"
            return model
        elif self.provider == "ollama":
            if not model.startswith("ollama/"):
                return f"ollama/{model}"
            return model
        else:
            return model

    def _get_api_key(self) -> Optional[str]:
        if self.provider == "openrouter":
            return self.config.openrouter_api_key
        elif self.provider == "anthropic":
            return self.config.anthropic_api_key
        elif self.provider == "openai":
            return self.config.openai_api_key
        return None

    @property
    def key_configured(self) -> bool:
        return self.provider not in KEYED_PROVIDERS or bool(self._get_api_key())

    def _get_api_base(self) -> Optional[str]:
        if self.provider == "openrouter":
            return "https://openrouter.ai/api/v1"
        elif self.provider == "ollama":
            return self.config.ai_base_url or "http://localhost:11434"
        return self.config.ai_base_url

    async def chat_complete(
        self,
        messages: Sequence[Union[ChatMessage, Dict[str, str]]],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False
    ) -> ChatCompletion:
        """
        Send one chat-completion request and return its choices.

        Raises AIConfigurationError before any network call when the
        provider's API key is missing, and AIRequestError when the call
        fails or the provider answers with a non-success status.
        """
        if not self.key_configured:
            raise AIConfigurationError(f"{self.provider} API key is not configured")

        kwargs: Dict[str, Any] = {
            "model": model or self.model,
            "messages": [
                m.model_dump() if isinstance(m, ChatMessage) else dict(m)
                for m in messages
            ],
            "max_tokens": max_tokens or self.config.ai_max_tokens,
            "temperature": temperature if temperature is not None else self.config.ai_temperature,
        }

        api_key = self._get_api_key()
        if api_key:
            kwargs["api_key"] = api_key
        api_base = self._get_api_base()
        if api_base:
            kwargs["api_base"] = api_base
        if self.provider == "openrouter":
            kwargs["extra_headers"] = {
                "HTTP-Referer": self.config.ai_app_url,
                "X-Title": self.config.ai_app_title,
            }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            logger.error(f"AI completion error: {e}")
            raise AIRequestError(str(e), status_code=getattr(e, "status_code", None)) from e

        choices: List[Dict[str, Any]] = [
            {"message": {"content": choice.message.content or ""}}
            for choice in response.choices
        ]
        usage = getattr(response, "usage", None)
        return ChatCompletion.model_validate({
            "choices": choices,
            "usage": {"total_tokens": usage.total_tokens} if usage else None,
        })

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> str:
        response = await self.chat_complete(
            [
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=user_prompt),
            ],
            max_tokens=max_tokens,
            temperature=temperature,
            json_mode=json_mode,
        )
        if not response.choices:
            raise AIResponseError("AI response contained no choices")
        return response.choices[0].message.content

    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> Any:
        response = await self.complete(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            temperature=temperature,
            max_tokens=max_tokens,
            json_mode=True
        )

        cleaned = response.strip()
        if cleaned.startswith("```json"):
            cleaned = cleaned[7:]
        if cleaned.startswith("```"):
            cleaned = cleaned[3:]
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]

        try:
            return json.loads(cleaned.strip())
        except json.JSONDecodeError as e:
            raise AIResponseError(f"AI response is not valid JSON: {e}") from e


_ai_client: Optional[AIClient] = None

def get_ai_client() -> AIClient:
    global _ai_client
    if _ai_client is None:
        _ai_client = AIClient()
    return _ai_client


def reset_ai_client() -> None:
    global _ai_client
    _ai_client = None
