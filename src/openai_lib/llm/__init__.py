"""Chat completion clients."""

from openai_lib.llm.base import ChatCompletionClient
from openai_lib.llm.openai_client import Openai

__all__ = ["ChatCompletionClient", "Openai"]
