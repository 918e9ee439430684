from __future__ import annotations

import logging
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent
API_CODE_PATH = PROJECT_ROOT / "api-code"
if str(API_CODE_PATH) not in sys.path:
    sys.path.insert(0, str(API_CODE_PATH))

from application import create_app  # noqa: E402
from env_loader import load_local_env  # noqa: E402
from services import GeminiRelayClient  # noqa: E402
from settings import get_settings  # noqa: E402


load_local_env()
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
# httpx logs full request URLs at INFO, which would include the API key.
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger("cybersec-tutor")

logger.info("Loading configuration from environment variables...")
relay_client = GeminiRelayClient.from_settings(settings)
app = create_app(settings, relay_client)

logger.info("Health check available at: http://localhost:%s/health", settings.port)
logger.info("Chat API available at: http://localhost:%s/api/chat", settings.port)
logger.info("Widget script available at: http://localhost:%s/widget.js", settings.port)


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
