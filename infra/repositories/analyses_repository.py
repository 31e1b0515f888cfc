import uuid
from typing import Optional
from sqlalchemy import select
from domain.schemas import AnalysisResult
from infra.db.session import SessionLocal
from infra.db.models import AnalysisRecord


class AnalysesRepository:
    """Append-only store of completed analyses, keyed by user."""

    def append(self, user_id: str, result: AnalysisResult) -> str:
        aid = f"analysis_{uuid.uuid4().hex}"
        with SessionLocal() as s:
            s.add(AnalysisRecord(
                id=aid,
                user_id=user_id,
                career_goal=result.careerGoal,
                resume_score=result.resumeScore,
                payload=result.model_dump_json(),
                timestamp=result.timestamp,
            ))
            s.commit()
        return aid

    def latest(self, user_id: str) -> Optional[AnalysisResult]:
        with SessionLocal() as s:
            rec = s.execute(
                select(AnalysisRecord)
                .where(AnalysisRecord.user_id == user_id)
                .order_by(AnalysisRecord.timestamp.desc())
                .limit(1)
            ).scalar_one_or_none()
            if not rec:
                return None
            return AnalysisResult.model_validate_json(rec.payload)
