import logging
from typing import Iterable, List, Union

from pydantic import ValidationError

from domain.errors import GenerationError, MalformedResponseError
from domain.schemas import Course, LearningResult, Opportunity
from infra.catalog.recommendations import static_learning_catalog
from infra.llm.client import GeminiClient
from infra.llm.composer import OperationKind, compose
from infra.llm.validator import ResponseShape, validate

logger = logging.getLogger(__name__)


def _clean_field(value):
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _keep_valid(model, items) -> List:
    out = []
    for item in items if isinstance(items, list) else []:
        if not isinstance(item, dict):
            continue
        try:
            out.append(model.model_validate({k: _clean_field(v) for k, v in item.items()}))
        except ValidationError:
            logger.debug("Dropping incomplete %s entry: %s", model.__name__, item)
    return out


async def _discover_live(role: str, skills, client: GeminiClient) -> LearningResult:
    discovery = await client.execute(compose(OperationKind.DISCOVER, role, skills))
    notes, sources = validate(discovery, ResponseShape.PLAIN_TEXT)

    structured = await client.execute(compose(OperationKind.STRUCTURE, notes))
    parsed, _ = validate(structured, ResponseShape.LEARNING)

    courses = _keep_valid(Course, parsed.get("courses"))
    opportunities = _keep_valid(Opportunity, parsed.get("opportunities"))
    if not courses and not opportunities:
        raise MalformedResponseError("Structured learning response contained no usable entries.",
                                     detail=parsed)
    return LearningResult(courses=courses, opportunities=opportunities, sources=sources)


async def discover_learning_resources(
    role: str,
    skills: Union[Iterable[str], str, None],
    *,
    client: GeminiClient,
) -> LearningResult:
    """Find live courses and opportunities, falling back to the curated catalog.

    Bad input still raises; any generation failure is replaced by the catalog.
    """
    compose(OperationKind.DISCOVER, role, skills)  # input check before any call

    try:
        result = await _discover_live(role, skills, client)
    except GenerationError as exc:
        logger.warning("Course discovery failed for role=%r (%s: %s); serving static catalog",
                       role, exc.kind, exc.message)
        return static_learning_catalog()

    logger.info("Course discovery validated for role=%r: %d courses, %d opportunities",
                role, len(result.courses), len(result.opportunities))
    return result
