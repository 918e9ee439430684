from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from schemas.gemini import Content, GenerateContentRequest, GenerateContentResponse, Part
from settings import Settings

from .errors import DecodeError, EmptyResponseError, RelayError, TransportError, UpstreamHttpError


logger = logging.getLogger("cybersec-tutor.chat")

GEMINI_MODEL_NAME = "gemini-2.5-flash"
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"

SYSTEM_INSTRUCTION = (
    "You are a helpful cybersecurity tutor assistant for university students. "
    "Your role is to explain cybersecurity concepts, terminologies, attack types and defenses "
    "in a clear, educational manner suitable for classroom learning. "
    "Keep explanations concise but informative. "
    "Use examples when helpful. "
    "If asked about something unrelated to cybersecurity or sensitive topics, politely redirect "
    "the conversation back to cybersecurity topics. "
    "Always prioritize educational value and ethical understanding."
)


def build_request_payload(message: str) -> dict:
    """Wrap one user message and the tutor persona into a generateContent body."""
    request = GenerateContentRequest(
        system_instruction=Content(parts=[Part(text=SYSTEM_INSTRUCTION)]),
        contents=[Content(parts=[Part(text=message)], role="user")],
    )
    return request.to_payload()


def extract_reply(body: bytes | str) -> str:
    """Return the first part of the first candidate, verbatim."""
    try:
        parsed = GenerateContentResponse.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(exc) from exc

    if not parsed.candidates:
        raise EmptyResponseError("Gemini returned no candidates")
    parts = parsed.candidates[0].content.parts
    if not parts:
        raise EmptyResponseError("Gemini candidate has no content parts")
    if not parts[0].text:
        raise EmptyResponseError("Gemini candidate text is empty")
    return parts[0].text


class GeminiRelayClient:
    """Relays single-turn chat messages to the Gemini generateContent endpoint.

    One ``httpx.AsyncClient`` is held for the life of the process and only
    read after construction; call ``aclose`` on shutdown.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = GEMINI_MODEL_NAME,
        api_base: str = GEMINI_API_BASE,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY must be set in environment or .env file")
        self._api_key = api_key
        self.model_name = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(transport=transport, timeout=timeout)
        logger.info("Gemini client initialized with model: %s", self.model_name)
        logger.info("API key length: %d characters", len(api_key))

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GeminiRelayClient":
        return cls(
            settings.gemini_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            timeout=settings.gemini_timeout_seconds,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        # Without the key; it is added as a query parameter per request.
        return f"{self.api_base}/models/{self.model_name}:generateContent"

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()
        logger.info("Gemini HTTP client closed")

    async def chat(self, message: str) -> str:
        logger.debug("Processing chat request (%d chars)", len(message))
        payload = build_request_payload(message)

        try:
            response = await self._client.post(
                self.endpoint,
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.RequestError as exc:
            logger.error("Gemini API request error for %s: %r", self.endpoint, exc)
            raise TransportError(exc) from exc

        if not response.is_success:
            body = response.text
            logger.error("Gemini API error (%s): %s", response.status_code, body)
            raise UpstreamHttpError(response.status_code, body)

        try:
            text = extract_reply(response.content)
        except RelayError as exc:
            logger.error("Unusable Gemini response: %s", exc)
            raise

        logger.info("Successfully generated response (%d chars)", len(text))
        logger.debug("Response: %s", text)
        return text
