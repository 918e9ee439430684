from __future__ import annotations


class EmptyMessageError(ValueError):
    """Raised when a chat message is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Message cannot be empty")


class RelayError(RuntimeError):
    """Base class for failures while relaying a message to Gemini."""


class UpstreamHttpError(RelayError):
    """Gemini answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Gemini API error ({status}): {body}")


class TransportError(RelayError):
    """The request never produced an HTTP response (DNS, TLS, reset, timeout)."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Failed to call Gemini API: {cause!r}")


class DecodeError(RelayError):
    """A success response whose body is not a valid generateContent payload."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"Failed to parse Gemini response: {cause}")


class EmptyResponseError(RelayError):
    """A well-formed response without any candidate or part to read text from."""

    def __init__(self, detail: str = "No response text from Gemini") -> None:
        super().__init__(detail)
