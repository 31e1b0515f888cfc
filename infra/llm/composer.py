"""Builds the instruction payload for each kind of generation call.

Composition is pure: nothing here touches the network or the filesystem, so a
request can be inspected in full before it is handed to the client.
"""
import base64
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Union

from app.settings import settings
from domain.errors import InvalidInputError
from infra.llm.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    ANALYSIS_USER_PROMPT,
    DISCOVERY_SYSTEM_PROMPT,
    DISCOVERY_USER_PROMPT,
    EXTRACT_SYSTEM_PROMPT,
    EXTRACT_USER_PROMPT,
    STRUCTURE_SYSTEM_PROMPT,
    STRUCTURE_USER_PROMPT,
)
from infra.llm.response_schemas import ANALYSIS_SCHEMA, LEARNING_SCHEMA


class OperationKind(str, Enum):
    ANALYZE = "ANALYZE"
    EXTRACT = "EXTRACT"
    DISCOVER = "DISCOVER"
    STRUCTURE = "STRUCTURE"


@dataclass(frozen=True)
class Attachment:
    mime_type: str
    data: bytes

    def as_inline_data(self) -> Dict[str, str]:
        return {
            "mime_type": self.mime_type,
            "data": base64.b64encode(self.data).decode("ascii"),
        }


@dataclass(frozen=True)
class GenerationRequest:
    operation_kind: OperationKind
    instruction: str
    payload: str
    response_schema: Optional[Dict] = None
    grounded: bool = False
    attachment: Optional[Attachment] = None


def _require(value: Optional[str], field: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise InvalidInputError(f"{field} is required.")
    return text


def normalize_skills(skills: Union[Iterable[str], str, None]) -> list[str]:
    if skills is None:
        return []
    if isinstance(skills, str):
        skills = skills.split(",")
    return [s.strip() for s in skills if s and str(s).strip()]


def truncate_resume(resume_text: str, limit: Optional[int] = None) -> str:
    limit = settings.MAX_RESUME_CHARS if limit is None else limit
    return resume_text[:limit]


def compose_analysis(resume_text: Optional[str], career_goal: Optional[str]) -> GenerationRequest:
    resume = _require(resume_text, "resumeText")
    goal = _require(career_goal, "careerGoal")
    query = ANALYSIS_USER_PROMPT.format(career_goal=goal, resume=truncate_resume(resume))
    return GenerationRequest(
        operation_kind=OperationKind.ANALYZE,
        instruction=ANALYSIS_SYSTEM_PROMPT.strip(),
        payload=query,
        response_schema=ANALYSIS_SCHEMA,
        grounded=True,
    )


def compose_discovery(role: Optional[str], skills: Union[Iterable[str], str, None]) -> GenerationRequest:
    target = _require(role, "role")
    skill_list = normalize_skills(skills)
    query = DISCOVERY_USER_PROMPT.format(
        role=target,
        skills=", ".join(skill_list) if skill_list else "core skills for the role",
    )
    return GenerationRequest(
        operation_kind=OperationKind.DISCOVER,
        instruction=DISCOVERY_SYSTEM_PROMPT.strip(),
        payload=query,
        grounded=True,
    )


def compose_structure(discovery_text: Optional[str]) -> GenerationRequest:
    notes = _require(discovery_text, "discovery text")
    return GenerationRequest(
        operation_kind=OperationKind.STRUCTURE,
        instruction=STRUCTURE_SYSTEM_PROMPT.strip(),
        payload=STRUCTURE_USER_PROMPT.format(notes=notes),
        response_schema=LEARNING_SCHEMA,
    )


def compose_extraction(content: Optional[bytes], mime_type: Optional[str]) -> GenerationRequest:
    if not content:
        raise InvalidInputError("Uploaded file is empty.")
    return GenerationRequest(
        operation_kind=OperationKind.EXTRACT,
        instruction=EXTRACT_SYSTEM_PROMPT,
        payload=EXTRACT_USER_PROMPT,
        attachment=Attachment(mime_type=mime_type or "application/octet-stream", data=content),
    )


_COMPOSERS = {
    OperationKind.ANALYZE: compose_analysis,
    OperationKind.DISCOVER: compose_discovery,
    OperationKind.STRUCTURE: compose_structure,
    OperationKind.EXTRACT: compose_extraction,
}


def compose(kind: OperationKind, *args, **kwargs) -> GenerationRequest:
    return _COMPOSERS[OperationKind(kind)](*args, **kwargs)
