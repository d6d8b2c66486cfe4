"""Chat message data model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """Single role-tagged message in a chat completion request."""

    model_config = ConfigDict(extra="forbid")

    role: Role = Field(..., description="system, user or assistant")
    content: str = Field(..., description="Message text, sent verbatim")

    def to_payload(self) -> dict[str, str]:
        """Wire form: {"role": ..., "content": ...}."""
        return {"role": self.role.value, "content": self.content}
