from fastapi import APIRouter
from app.settings import settings
from api.endpoints.analyze import router as analyze_router
from api.endpoints.upload import router as upload_router
from api.endpoints.courses import router as courses_router
from api.endpoints.recommendations import router as recommendations_router
from api.endpoints.health import router as health_router, root_router

api_router = APIRouter()
api_router.include_router(root_router, tags=["health"])
api_router.include_router(analyze_router, prefix=settings.API_PREFIX, tags=["analyze"])
api_router.include_router(upload_router, prefix=settings.API_PREFIX, tags=["upload"])
api_router.include_router(courses_router, prefix=settings.API_PREFIX, tags=["courses"])
api_router.include_router(recommendations_router, prefix=settings.API_PREFIX, tags=["recommendations"])
api_router.include_router(health_router, prefix=settings.API_PREFIX, tags=["health"])
