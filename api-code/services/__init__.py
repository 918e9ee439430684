from .chat_service import GeminiRelayClient
from .errors import (
    DecodeError,
    EmptyMessageError,
    EmptyResponseError,
    RelayError,
    TransportError,
    UpstreamHttpError,
)

__all__ = [
    "GeminiRelayClient",
    "DecodeError",
    "EmptyMessageError",
    "EmptyResponseError",
    "RelayError",
    "TransportError",
    "UpstreamHttpError",
]
