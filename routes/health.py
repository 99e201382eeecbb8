from fastapi import APIRouter

from config.settings import APP_NAME, APP_VERSION

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": APP_NAME,
        "version": APP_VERSION,
    }
