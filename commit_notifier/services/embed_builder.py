from commit_notifier.core.logging import get_logger
from commit_notifier.models.commit import FileChanges, PushEvent
from commit_notifier.models.embed import (
    Embed, EmbedAuthor, EmbedField, EmbedFooter, EmbedMedia, WebhookPayload
)
from commit_notifier.models.options import DEFAULT_TITLE, NotifyOptions
from commit_notifier.services.colour import change_colour, resolve_colour
from commit_notifier.services.fields import build_fields
from commit_notifier.services.limits import enforce_limits
from datetime import datetime, timezone
from typing import List, Optional

logger = get_logger(__name__)

def embed_colour(options: NotifyOptions, event: PushEvent, changes: Optional[FileChanges]) -> int:
    colour = resolve_colour(options.embed_colour)
    if options.colour_changes and event.commit is not None:
        colour = change_colour(colour, changes or FileChanges.from_commit(event.commit))
    return colour

def build_embed(
    options: NotifyOptions,
    event: PushEvent,
    fields: List[EmbedField],
    colour: int,
    now: Optional[datetime] = None,
) -> Embed:
    embed = Embed(
        title=options.embed_title or DEFAULT_TITLE,
        description=options.embed_description or None,
        url=event.repo.commit_url(event.commit.id) if event.commit else event.repo.html_url,
        color=colour,
        fields=fields,
    )

    if options.author_name:
        embed.author = EmbedAuthor(
            name=options.author_name,
            url=options.author_url or event.repo.html_url,
            icon_url=options.author_icon_url or None,
        )

    if options.thumbnail_url:
        embed.thumbnail = EmbedMedia(url=options.thumbnail_url)

    if options.image_url:
        embed.image = EmbedMedia(url=options.image_url)

    if options.footer_text:
        embed.footer = EmbedFooter(
            text=options.footer_text,
            icon_url=options.footer_icon_url or options.footer_icon or None,
        )

    #the run's own clock, not the commit's timestamp
    if options.footer_timestamp:
        embed.timestamp = now or datetime.now(timezone.utc)

    return embed

def build_payload(
    options: NotifyOptions,
    event: PushEvent,
    changes: Optional[FileChanges] = None,
    now: Optional[datetime] = None,
) -> WebhookPayload:
    """Assemble the size-limited webhook payload for one push event."""
    fields = build_fields(options, event, changes)
    colour = embed_colour(options, event, changes)
    embed = build_embed(options, event, fields, colour, now)

    embed, content = enforce_limits(embed, options.content or None)

    logger.info(
        "payload assembled",
        sha=event.commit.id[:8] if event.commit else None,
        fields=len(embed.fields),
        color=embed.color,
    )
    return WebhookPayload(content=content, embeds=[embed])
