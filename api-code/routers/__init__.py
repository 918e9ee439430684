from .chat import build_chat_router
from .health import build_health_router
from .widget import build_widget_router

__all__ = ["build_chat_router", "build_health_router", "build_widget_router"]
