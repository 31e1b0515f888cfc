from fastapi import APIRouter, Depends
from domain.schemas import CoursesRequest, LearningResult
from domain.services.learning_service import discover_learning_resources
from infra.llm.client import GeminiClient
from api.deps import get_gemini_client

router = APIRouter()


@router.post("/courses", response_model=LearningResult)
async def courses(body: CoursesRequest,
                  client: GeminiClient = Depends(get_gemini_client)) -> LearningResult:
    return await discover_learning_resources(body.role, body.skills, client=client)
