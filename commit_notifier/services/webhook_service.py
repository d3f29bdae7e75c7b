from commit_notifier.core.config import settings
from commit_notifier.core.exceptions import DeliveryError
from commit_notifier.core.logging import get_logger
from commit_notifier.models.embed import WebhookPayload
import httpx
from typing import Optional

logger = get_logger(__name__)

class WebhookService:
    """single POST of the payload to the destination webhook, no retries"""

    def __init__(
        self,
        webhook_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.transport = transport
        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": f"{settings.APP_NAME}/{settings.VERSION}",
        }

    async def send(self, payload: WebhookPayload) -> httpx.Response:
        body = payload.to_json()
        logger.info("sending webhook", embeds=len(payload.embeds), has_content=payload.content is not None)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(self.webhook_url, json=body, headers=self.headers)
            except httpx.HTTPError as e:
                logger.error("webhook request failed", error=str(e))
                raise DeliveryError(f"failed to send webhook: {e}") from e

        if not response.is_success:
            logger.error("webhook rejected", status_code=response.status_code, body=response.text)
            raise DeliveryError(
                f"failed to send webhook: {response.reason_phrase or 'error'}",
                status_code=response.status_code,
                body=response.text or None,
            )

        logger.info("webhook sent successfully", status_code=response.status_code)
        return response
