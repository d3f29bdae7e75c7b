from commit_notifier.core.config import settings
from commit_notifier.core.exceptions import ConfigurationError, DeliveryError, UpstreamFetchError
from commit_notifier.core.logging import get_logger
from commit_notifier.services.event_loader import event_from_payload
from commit_notifier.services.github_service import GithubService
from commit_notifier.services.notifier import run_notification
from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from typing import Optional

logger = get_logger(__name__)
router = APIRouter()

def get_githubService() -> GithubService:
    return GithubService()

@router.post("/notify")
async def relay_push(
    request: Request,
    x_github_event: Optional[str] = Header(None),
    github_service: GithubService = Depends(get_githubService),
):
    if x_github_event == "ping":
        return {"status": "pong"}

    if x_github_event and x_github_event != "push":
        logger.info("ignoring event", github_event=x_github_event)
        return JSONResponse(status_code=202, content={"status": "ignored", "event": x_github_event})

    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="request body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="request body must be a JSON object")

    try:
        event = event_from_payload(body, server_url=settings.GITHUB_SERVER_URL)
    except ConfigurationError as e:
        logger.warning("rejected push payload", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    try:
        payload = await run_notification(settings.notify_options(), event, github=github_service)
    except ConfigurationError as e:
        logger.error("relay misconfigured", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
    except (UpstreamFetchError, DeliveryError) as e:
        logger.error("relay delivery failed", error=str(e))
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "status": "delivered",
        "repository": event.repo.full_name,
        "sha": event.commit.id if event.commit else None,
        "fields": len(payload.embeds[0].fields),
    }
