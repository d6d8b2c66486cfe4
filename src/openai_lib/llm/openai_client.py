"""OpenAI chat completion client - one POST per call, raw JSON back."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from openai_lib.config import DEFAULT_BASE_URL, get_settings
from openai_lib.errors import DecodeError, StatusError, TransportError
from openai_lib.llm.base import ChatCompletionClient
from openai_lib.models import Message, Model

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/chat/completions"


class Openai(ChatCompletionClient):
    """OpenAI API client bound to one API key and one model."""

    def __init__(
        self,
        api_key: str,
        model: Model | str,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = Model(model)
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        model: Model | str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "Openai":
        """Build a client from OPENAI_API_KEY / OPENAI_MODEL / OPENAI_BASE_URL."""
        settings = get_settings()
        api_key = settings.openai_api_key.get_secret_value()
        if not api_key:
            raise ValueError("OPENAI_API_KEY is not configured")
        return cls(
            api_key,
            model or settings.openai_model,
            base_url=settings.openai_base_url,
            http_client=http_client,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def model(self) -> Model:
        return self._model

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def url(self) -> str:
        return f"{self._base_url}{CHAT_COMPLETIONS_PATH}"

    def __repr__(self) -> str:
        return f"Openai(model={self._model.format()!r}, base_url={self._base_url!r}, api_key='***')"

    def build_request_body(
        self,
        messages: Sequence[Message | Mapping[str, str]],
    ) -> dict[str, Any]:
        """Request body with the configured model and the messages in order."""
        return {
            "model": self._model.format(),
            "messages": [
                (m if isinstance(m, Message) else Message.model_validate(m)).to_payload()
                for m in messages
            ],
        }

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(self.url, json=payload, headers=self._headers())
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.post(self.url, json=payload, headers=self._headers())

    async def get_chat_completion(
        self,
        messages: Sequence[Message | Mapping[str, str]],
    ) -> Any:
        """
        POST the messages to the chat completions endpoint once.
        Returns the deserialized JSON body; raises TransportError, StatusError
        or DecodeError. No retries, no timeout.
        """
        payload = self.build_request_body(messages)
        logger.debug(
            "Chat completion request: model=%s messages=%d",
            payload["model"],
            len(payload["messages"]),
        )
        try:
            resp = await self._post(payload)
        except httpx.HTTPError as e:
            logger.warning("Chat completion transport error: %s", type(e).__name__)
            raise TransportError(f"chat completion request failed: {type(e).__name__}") from e

        logger.debug("Chat completion response: %s", resp.status_code)
        if not resp.is_success:
            logger.error(
                "Chat completion failed: %s %s",
                resp.status_code,
                resp.text[:200],
            )
            raise StatusError(resp.status_code, resp.text)
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("Chat completion response is not JSON: %s", resp.text[:200])
            raise DecodeError(resp.text) from e
