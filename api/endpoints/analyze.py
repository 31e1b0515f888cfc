from fastapi import APIRouter, Depends, HTTPException, Query
from domain.schemas import AnalysisResult, AnalyzeRequest
from domain.services.analysis_service import analyze_resume
from infra.llm.client import GeminiClient
from infra.llm.retry import RetryPolicy
from infra.repositories.analyses_repository import AnalysesRepository
from api.deps import get_analyses_repository, get_gemini_client, get_retry_policy

router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(body: AnalyzeRequest,
                  client: GeminiClient = Depends(get_gemini_client),
                  policy: RetryPolicy = Depends(get_retry_policy),
                  repo: AnalysesRepository = Depends(get_analyses_repository)) -> AnalysisResult:
    return await analyze_resume(
        body.resumeText,
        body.careerGoal,
        client=client,
        policy=policy,
        user_id=body.userId,
        repository=repo,
    )


@router.get("/analyses/latest", response_model=AnalysisResult)
async def latest_analysis(userId: str = Query(..., min_length=1),
                          repo: AnalysesRepository = Depends(get_analyses_repository)) -> AnalysisResult:
    result = repo.latest(userId)
    if not result:
        raise HTTPException(status_code=404, detail="no analysis found for user")
    return result
