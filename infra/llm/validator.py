import json
import logging
import re
from enum import Enum
from typing import Any, Dict, List, Tuple

from domain.errors import EmptyResponseError, MalformedResponseError
from domain.schemas import GroundingSource
from infra.llm.client import RawServiceResponse

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


class ResponseShape(Enum):
    """Expected payload shape per operation, with its required top-level keys."""

    ANALYSIS = ("resumeScore", "missingSkills", "recommendations", "summary")
    LEARNING = ("courses", "opportunities")
    PLAIN_TEXT = ()

    @property
    def required_keys(self) -> Tuple[str, ...]:
        return self.value

    @property
    def is_json(self) -> bool:
        return self is not ResponseShape.PLAIN_TEXT


def _first_candidate(body: Dict) -> Dict:
    candidates = body.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return {}
    return candidates[0]


def extract_text(body: Dict) -> str:
    parts = ((_first_candidate(body).get("content") or {}).get("parts")) or []
    texts = [p.get("text") for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    return "".join(texts).strip()


def extract_sources(body: Dict) -> List[GroundingSource]:
    metadata = _first_candidate(body).get("groundingMetadata") or {}
    entries = list(metadata.get("groundingAttributions") or []) + \
        list(metadata.get("groundingChunks") or [])
    sources: List[GroundingSource] = []
    seen = set()
    for entry in entries:
        web = entry.get("web") if isinstance(entry, dict) else None
        if not isinstance(web, dict):
            continue
        uri, title = web.get("uri"), web.get("title")
        if not uri or not title or uri in seen:
            continue
        seen.add(uri)
        sources.append(GroundingSource(uri=uri, title=title))
    return sources


def parse_json_payload(text: str) -> Any:
    m = _FENCE.match(text)
    if m:
        text = m.group(1)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            "Failed to parse the generation service's JSON response.", detail=text[:500]) from exc


def validate(raw: RawServiceResponse, shape: ResponseShape) -> Tuple[Any, List[GroundingSource]]:
    kind = raw.operation_kind.value
    text = extract_text(raw.body)
    if not text:
        feedback = raw.body.get("promptFeedback")
        logger.error("%s response was empty: %s", kind, feedback or "no candidates")
        raise EmptyResponseError(
            "Generation service response was empty or malformed.", detail=feedback)

    sources = extract_sources(raw.body)
    if not shape.is_json:
        return text, sources

    parsed = parse_json_payload(text)
    if not isinstance(parsed, dict):
        raise MalformedResponseError(f"{kind} response is not a JSON object.", detail=text[:500])
    missing = [k for k in shape.required_keys if k not in parsed]
    if missing:
        raise MalformedResponseError(
            f"{kind} response is missing required keys: {', '.join(missing)}", detail=parsed)
    logger.info("%s response validated (%d sources)", kind, len(sources))
    return parsed, sources
