"""Data models."""

from openai_lib.models.chat_model import Model
from openai_lib.models.message import Message, Role

__all__ = [
    "Message",
    "Model",
    "Role",
]
