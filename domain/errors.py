from typing import Any, Optional


class CareerLiftError(Exception):
    """Base error carrying an error kind, HTTP status and human-readable detail."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_payload(self) -> dict:
        return {
            "error": self.message,
            "details": self.detail if self.detail is not None else self.message,
            "kind": self.kind,
        }


class InvalidInputError(CareerLiftError):
    kind = "invalid_input"
    status_code = 400


class NoFileProvidedError(InvalidInputError):
    kind = "no_file_provided"

    def __init__(self, message: str = "No file uploaded. Attach the resume in the 'file' field."):
        super().__init__(message)


class GenerationError(CareerLiftError):
    """Failures attributable to the generation service or its output."""


class UpstreamConfigError(GenerationError):
    kind = "upstream_config"


class UpstreamUnavailableError(GenerationError):
    kind = "upstream_unavailable"

    def __init__(self, message: str, detail: Any = None, upstream_status: Optional[int] = None):
        super().__init__(message, detail)
        self.upstream_status = upstream_status


class EmptyResponseError(GenerationError):
    kind = "empty_response"


class MalformedResponseError(GenerationError):
    kind = "malformed_response"
