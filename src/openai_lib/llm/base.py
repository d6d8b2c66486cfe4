"""Chat completion client abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from openai_lib.models import Message


class ChatCompletionClient(ABC):
    """Chat completion client interface."""

    @abstractmethod
    async def get_chat_completion(
        self,
        messages: Sequence[Message | Mapping[str, str]],
    ) -> Any:
        """
        Send chat completion request and return the raw JSON response.
        messages: [Message(role="system"|"user"|"assistant", content="...")]
        """
        ...
