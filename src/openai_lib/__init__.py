"""Minimal async client for the OpenAI chat completions endpoint."""

from openai_lib.errors import DecodeError, OpenaiError, StatusError, TransportError
from openai_lib.llm import ChatCompletionClient, Openai
from openai_lib.models import Message, Model, Role

__all__ = [
    "ChatCompletionClient",
    "DecodeError",
    "Message",
    "Model",
    "Openai",
    "OpenaiError",
    "Role",
    "StatusError",
    "TransportError",
]
