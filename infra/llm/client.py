import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from app.settings import settings
from domain.errors import (
    MalformedResponseError,
    UpstreamConfigError,
    UpstreamUnavailableError,
)
from infra.llm.composer import GenerationRequest, OperationKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawServiceResponse:
    operation_kind: OperationKind
    body: Dict


def build_payload(request: GenerationRequest) -> Dict:
    parts = [{"text": request.payload}]
    if request.attachment is not None:
        parts.append({"inline_data": request.attachment.as_inline_data()})

    payload: Dict = {"contents": [{"role": "user", "parts": parts}]}
    if request.instruction:
        payload["systemInstruction"] = {"parts": [{"text": request.instruction}]}
    if request.grounded:
        payload["tools"] = [{"google_search": {}}]
    if request.response_schema is not None:
        payload["generationConfig"] = {
            "responseMimeType": "application/json",
            "responseSchema": request.response_schema,
        }
    return payload


def _error_detail(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return response.text


class GeminiClient:
    """Single-attempt executor for Gemini ``generateContent`` calls.

    Retrying is left to the caller (see ``infra.llm.retry``).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.base_url = (base_url or settings.GEMINI_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.GEMINI_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def execute(self, request: GenerationRequest) -> RawServiceResponse:
        if not self.api_key:
            raise UpstreamConfigError("GEMINI_API_KEY is not configured on the server.")

        kind = request.operation_kind
        logger.info("%s request sent to %s", kind.value, self.model)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    params={"key": self.api_key},
                    headers={"Content-Type": "application/json"},
                    json=build_payload(request),
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("%s request failed with HTTP %s", kind.value, status)
            raise UpstreamUnavailableError(
                f"Generation service returned HTTP {status}.",
                detail=_error_detail(exc.response),
                upstream_status=status,
            ) from exc
        except httpx.TimeoutException as exc:
            logger.warning("%s request timed out after %ss", kind.value, self.timeout)
            raise UpstreamUnavailableError(
                "Generation service timed out.", detail=str(exc) or type(exc).__name__) from exc
        except httpx.RequestError as exc:
            logger.warning("%s request could not reach the service: %s", kind.value, exc)
            raise UpstreamUnavailableError(
                "Generation service is unreachable.", detail=str(exc) or type(exc).__name__) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "Generation service returned a non-JSON envelope.", detail=response.text[:500]) from exc
        if not isinstance(body, dict):
            raise MalformedResponseError("Generation service returned an unexpected envelope.")
        return RawServiceResponse(operation_kind=kind, body=body)
