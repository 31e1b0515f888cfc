import logging
import mimetypes
import os
import secrets
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from fastapi import UploadFile

from domain.errors import InvalidInputError, NoFileProvidedError
from domain.schemas import UploadResult
from domain.services.analysis_service import analyze_resume
from infra.llm.client import GeminiClient
from infra.llm.composer import OperationKind, compose
from infra.llm.retry import RetryPolicy
from infra.llm.validator import ResponseShape, validate
from infra.repositories.analyses_repository import AnalysesRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedDocument:
    path: str
    original_name: str
    size_bytes: int
    mime_type: str

    def read_bytes(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read()


def unique_upload_name(original_name: str) -> str:
    _, ext = os.path.splitext(original_name or "")
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{ext.lower()}"


def remove_upload(path: Optional[str]) -> None:
    if path and os.path.exists(path):
        os.remove(path)


@contextmanager
def stored_upload(upload_dir: str, original_name: str, content: bytes,
                  mime_type: Optional[str] = None) -> Iterator[UploadedDocument]:
    """Hold an uploaded file on disk for the duration of the block.

    Only the file written here is removed on exit, whatever the outcome.
    """
    os.makedirs(upload_dir, exist_ok=True)
    path = os.path.join(upload_dir, unique_upload_name(original_name))
    out = open(path, "xb")
    try:
        with out:
            out.write(content)
        yield UploadedDocument(
            path=path,
            original_name=original_name,
            size_bytes=len(content),
            mime_type=mime_type or mimetypes.guess_type(original_name)[0] or "application/octet-stream",
        )
    finally:
        remove_upload(path)
        logger.debug("Removed temporary upload %s", path)


class UploadCoordinator:
    def __init__(self, client: GeminiClient, policy: RetryPolicy, upload_dir: str,
                 max_bytes: int, repository: Optional[AnalysesRepository] = None):
        self.client = client
        self.policy = policy
        self.upload_dir = upload_dir
        self.max_bytes = max_bytes
        self.repository = repository

    async def extract_text(self, document: UploadedDocument) -> str:
        request = compose(OperationKind.EXTRACT, document.read_bytes(), document.mime_type)
        raw = await self.client.execute(request)
        text, _ = validate(raw, ResponseShape.PLAIN_TEXT)
        return text

    async def handle(self, upload: Optional[UploadFile], career_goal: Optional[str] = None,
                     user_id: Optional[str] = None) -> UploadResult:
        if upload is None or not upload.filename:
            raise NoFileProvidedError()
        content = await upload.read()
        if not content:
            raise NoFileProvidedError("Uploaded file is empty.")
        if len(content) > self.max_bytes:
            raise InvalidInputError(
                f"File too large. Maximum upload size is {self.max_bytes} bytes.")

        goal = (career_goal or "").strip()
        with stored_upload(self.upload_dir, upload.filename, content, upload.content_type) as doc:
            logger.info("Stored upload %s (%d bytes, %s)", doc.original_name, doc.size_bytes, doc.mime_type)
            text = await self.extract_text(doc)
            analysis = None
            if goal:
                analysis = await analyze_resume(
                    text, goal,
                    client=self.client,
                    policy=self.policy,
                    user_id=user_id,
                    repository=self.repository,
                )
        return UploadResult(extractedText=text, characterCount=len(text), analysis=analysis)
