from app.settings import settings
from infra.llm.client import GeminiClient
from infra.llm.retry import RetryPolicy
from infra.repositories.analyses_repository import AnalysesRepository

analyses_repo = AnalysesRepository()


def get_gemini_client() -> GeminiClient:
    return GeminiClient()


def get_retry_policy() -> RetryPolicy:
    return RetryPolicy.from_settings()


def get_analyses_repository() -> AnalysesRepository:
    return analyses_repo


def get_upload_dir() -> str:
    return settings.UPLOAD_DIR
