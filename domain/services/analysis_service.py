import logging
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from domain.errors import MalformedResponseError
from domain.schemas import AnalysisResult
from infra.llm.client import GeminiClient
from infra.llm.composer import OperationKind, compose
from infra.llm.retry import RetryPolicy, run_with_retry
from infra.llm.validator import ResponseShape, validate
from infra.repositories.analyses_repository import AnalysesRepository

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def analyze_resume(
    resume_text: Optional[str],
    career_goal: Optional[str],
    *,
    client: GeminiClient,
    policy: RetryPolicy,
    user_id: Optional[str] = None,
    repository: Optional[AnalysesRepository] = None,
) -> AnalysisResult:
    """Score a resume against a career goal.

    Transport failures are retried under ``policy``; empty or malformed output
    fails the call straight away. There is no fallback for this path.
    """
    request = compose(OperationKind.ANALYZE, resume_text, career_goal)
    goal = career_goal.strip()
    logger.info("ANALYZE composed for goal=%r (%d chars)", goal, len(request.payload))

    raw = await run_with_retry(lambda: client.execute(request), policy)
    parsed, sources = validate(raw, ResponseShape.ANALYSIS)

    try:
        result = AnalysisResult(
            **{k: parsed.get(k) for k in ResponseShape.ANALYSIS.required_keys},
            timestamp=_now_iso(),
            careerGoal=goal,
            sources=sources,
        )
    except ValidationError as exc:
        raise MalformedResponseError(
            "ANALYZE response fields have unexpected types.", detail=str(exc)) from exc

    empty = [name for name, value in (
        ("missingSkills", result.missingSkills),
        ("recommendations.certifications", result.recommendations.certifications),
        ("recommendations.opportunities", result.recommendations.opportunities),
        ("summary", result.summary),
    ) if not value]
    if empty:
        raise MalformedResponseError(
            f"ANALYZE response left required fields empty: {', '.join(empty)}", detail=parsed)

    logger.info("ANALYZE validated: score=%s missing_skills=%d sources=%d",
                result.resumeScore, len(result.missingSkills), len(result.sources))

    if user_id and repository is not None:
        repository.append(user_id, result)
    return result
