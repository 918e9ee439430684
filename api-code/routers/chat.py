from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from schemas import ChatRequest, ChatResponse, ErrorResponse
from services import EmptyMessageError, GeminiRelayClient, RelayError


logger = logging.getLogger("cybersec-tutor.api.chat")

EMPTY_MESSAGE_ERROR = "Message cannot be empty"
GENERATION_FAILED_ERROR = "Failed to generate response"


def validate_message(message: str) -> str:
    if not message.strip():
        raise EmptyMessageError()
    return message


def failure_response(exc: Exception) -> JSONResponse:
    """Collapse an internal failure into one of the two user-facing outcomes.

    Validation problems are the caller's fault and become a 400. Every relay
    failure becomes the same generic 500, whatever the upstream said.
    """
    if isinstance(exc, EmptyMessageError):
        status_code, message = status.HTTP_400_BAD_REQUEST, EMPTY_MESSAGE_ERROR
    else:
        status_code, message = status.HTTP_500_INTERNAL_SERVER_ERROR, GENERATION_FAILED_ERROR
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def build_chat_router(relay_client: GeminiRelayClient) -> APIRouter:
    """Create the chat router wired to the provided relay client."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post(
        "/chat",
        response_model=ChatResponse,
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        },
        summary="Ask the cybersecurity tutor a question",
    )
    async def chat_endpoint(payload: ChatRequest) -> Union[ChatResponse, JSONResponse]:
        try:
            message = validate_message(payload.message)
        except EmptyMessageError as exc:
            return failure_response(exc)

        try:
            reply = await relay_client.chat(message)
        except RelayError as exc:
            logger.error("Error processing chat request: %s", exc)
            return failure_response(exc)

        return ChatResponse(response=reply)

    return router
