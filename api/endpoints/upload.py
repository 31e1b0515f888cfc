from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from app.settings import settings
from domain.schemas import UploadResult
from domain.services.upload_coordinator import UploadCoordinator
from infra.llm.client import GeminiClient
from infra.llm.retry import RetryPolicy
from infra.repositories.analyses_repository import AnalysesRepository
from api.deps import get_analyses_repository, get_gemini_client, get_retry_policy, get_upload_dir

router = APIRouter()


@router.post("/upload-resume", response_model=UploadResult)
async def upload_resume(file: Optional[UploadFile] = File(default=None),
                        careerGoal: Optional[str] = Form(default=None),
                        userId: Optional[str] = Form(default=None),
                        client: GeminiClient = Depends(get_gemini_client),
                        policy: RetryPolicy = Depends(get_retry_policy),
                        repo: AnalysesRepository = Depends(get_analyses_repository),
                        upload_dir: str = Depends(get_upload_dir)) -> UploadResult:
    coordinator = UploadCoordinator(
        client=client,
        policy=policy,
        upload_dir=upload_dir,
        max_bytes=settings.MAX_UPLOAD_BYTES,
        repository=repo,
    )
    return await coordinator.handle(file, careerGoal, user_id=userId)
