"""Supported chat models."""

from enum import Enum


class Model(str, Enum):
    """Chat model identifiers accepted by the completions endpoint."""

    GPT_35_TURBO = "gpt-3.5-turbo"
    GPT_35_TURBO_16K = "gpt-3.5-turbo-16k"
    GPT_35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    GPT_35_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT_4 = "gpt-4"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_INSTRUCT = "gpt-4-instruct"
    GPT_4_32K_0613 = "gpt-4-32k-0613"

    def format(self) -> str:
        """Identifier string sent as the request's `model` field."""
        return self.value
