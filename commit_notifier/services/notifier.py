from commit_notifier.core.logging import bind_run_context, get_logger
from commit_notifier.models.commit import PushEvent
from commit_notifier.models.embed import WebhookPayload
from commit_notifier.models.options import NotifyOptions
from commit_notifier.services.embed_builder import build_payload
from commit_notifier.services.file_changes import resolve_file_changes
from commit_notifier.services.github_service import GithubService
from commit_notifier.services.options import normalize_options
from commit_notifier.services.webhook_service import WebhookService
from datetime import datetime
from typing import Any, Mapping, Optional

logger = get_logger(__name__)

class NotificationService:
    """one run: resolve file lists, assemble the payload, deliver it once"""

    def __init__(
        self,
        options: NotifyOptions,
        github: Optional[GithubService] = None,
        webhook: Optional[WebhookService] = None,
    ):
        self.options = options
        self.github = github or GithubService()
        self.webhook = webhook or WebhookService(options.webhook_url)

    async def notify(self, event: PushEvent, now: Optional[datetime] = None) -> WebhookPayload:
        bind_run_context(event.repo.full_name, event.commit.id if event.commit else None)
        if event.commit is None:
            logger.warning("event has no commit, sending embed without commit sections")

        changes = await resolve_file_changes(self.options, event, self.github)
        payload = build_payload(self.options, event, changes, now)
        await self.webhook.send(payload)

        logger.info("notification delivered")
        return payload

async def run_notification(
    raw_options: Mapping[str, Any],
    event: PushEvent,
    github: Optional[GithubService] = None,
    webhook: Optional[WebhookService] = None,
) -> WebhookPayload:
    """normalize options first so config errors stop the run before any request"""
    options = normalize_options(raw_options)
    service = NotificationService(options, github=github, webhook=webhook)
    return await service.notify(event)
