from .chat import ChatRequest, ChatResponse, ErrorResponse
from .health import HealthResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
]
