from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from app.settings import settings

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "model": settings.GEMINI_MODEL,
        "gemini_configured": bool(settings.GEMINI_API_KEY),
    }


root_router = APIRouter()


@root_router.get("/", response_class=PlainTextResponse)
def root():
    return f"{settings.APP_NAME} backend is running."
