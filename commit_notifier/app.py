from fastapi import FastAPI
from commit_notifier.core.config import settings
from commit_notifier.core.logging import LoggingMiddleware, get_logger
from commit_notifier.routers import notifications
from commit_notifier.services.github_service import GithubService
from datetime import datetime, timezone

logger=get_logger(__name__)

def create_app() -> FastAPI:
    app=FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
    )

    app.add_middleware(LoggingMiddleware)
    app.include_router(
        notifications.router,
        prefix="/api",
        tags=["notifications"]
    )

    @app.get("/")
    async def root():
        return {"message":settings.APP_NAME, "version":settings.VERSION ,"status":"running"}

    @app.get("/health")
    async def health_check():
        health={
            "status": "healthy",
            "version": settings.VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {}
        }
        health["services"]["github"]={
            "status": "connected" if await GithubService().test_connection() else "disconnected",
            "url": settings.GITHUB_API_URL,
        }
        health["services"]["webhook"]={
            "status": "configured" if settings.WEBHOOK_URL else "missing",
        }

        service_statuses = [service["status"] for service in health["services"].values()]
        if "missing" in service_statuses:
            health["status"] ="degraded"
        elif "disconnected" in service_statuses:
            health["status"] ="partial"

        return health

    return app
