from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Response


logger = logging.getLogger("cybersec-tutor.api.widget")

JAVASCRIPT_MEDIA_TYPE = "application/javascript"


def build_widget_router(widget_path: Path) -> APIRouter:
    """Serve the embeddable chat widget script.

    The script is read once when the router is built so every request returns
    the same bytes that shipped with the deployment.
    """
    script = Path(widget_path).read_bytes()
    logger.info("Loaded widget script from %s (%d bytes)", widget_path, len(script))
    router = APIRouter(tags=["widget"])

    @router.get("/widget.js", response_class=Response)
    async def widget_script() -> Response:
        return Response(content=script, media_type=JAVASCRIPT_MEDIA_TYPE)

    return router
