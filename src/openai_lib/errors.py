"""Errors raised by the chat completion client."""


class OpenaiError(Exception):
    """Base class for every failure surfaced by the client."""


class TransportError(OpenaiError):
    """Request never produced a response (network, DNS, TLS)."""


class StatusError(OpenaiError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"chat completion failed with HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(OpenaiError):
    """Successful response whose body is not valid JSON."""

    def __init__(self, body: str) -> None:
        super().__init__("chat completion response is not valid JSON")
        self.body = body
