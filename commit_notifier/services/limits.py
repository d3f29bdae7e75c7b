"""Size ceilings of the destination chat platform and their enforcement.

Attribute limits are applied first, each on its own. Whatever remains over
the aggregate ceiling afterwards is recovered by dropping fields from the
end, so sections built earlier outlive sections built later. An embed with
no fields left is returned as-is even if it is still oversized.
"""
from commit_notifier.core.logging import get_logger
from commit_notifier.models.embed import Embed, EmbedField
from typing import Iterable, Optional, Tuple

logger = get_logger(__name__)

ELLIPSIS = "..."

TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
FOOTER_TEXT_LIMIT = 2048
AUTHOR_NAME_LIMIT = 256
EMBED_TOTAL_LIMIT = 6000
CONTENT_LIMIT = 2000

def truncate(text: str, limit: int) -> str:
    """keep a prefix so that prefix + ellipsis fits in limit"""
    if len(text) <= limit:
        return text
    if limit <= len(ELLIPSIS):
        return text[:limit]
    return text[:limit - len(ELLIPSIS)] + ELLIPSIS

def fields_size(fields: Iterable[EmbedField]) -> int:
    return sum(len(field.name) + len(field.value) for field in fields)

def embed_size(embed: Embed) -> int:
    size = len(embed.title) + len(embed.description or "")
    if embed.footer is not None:
        size += len(embed.footer.text)
    if embed.author is not None:
        size += len(embed.author.name)
    return size + fields_size(embed.fields)

def truncate_attributes(embed: Embed) -> Embed:
    update = {"title": truncate(embed.title, TITLE_LIMIT)}
    if embed.description is not None:
        update["description"] = truncate(embed.description, DESCRIPTION_LIMIT)
    if embed.author is not None:
        update["author"] = embed.author.model_copy(
            update={"name": truncate(embed.author.name, AUTHOR_NAME_LIMIT)}
        )
    if embed.footer is not None:
        update["footer"] = embed.footer.model_copy(
            update={"text": truncate(embed.footer.text, FOOTER_TEXT_LIMIT)}
        )
    update["fields"] = [
        EmbedField(
            name=truncate(field.name, FIELD_NAME_LIMIT),
            value=truncate(field.value, FIELD_VALUE_LIMIT),
            inline=field.inline,
        )
        for field in embed.fields
    ]
    return embed.model_copy(update=update)

def drop_trailing_fields(embed: Embed) -> Embed:
    fields = list(embed.fields)
    total = embed_size(embed)

    while total > EMBED_TOTAL_LIMIT and fields:
        dropped = fields.pop()
        total -= len(dropped.name) + len(dropped.value)
        logger.debug("dropped field to fit embed", field=dropped.name, size=total)

    if total > EMBED_TOTAL_LIMIT:
        logger.warning("embed exceeds size limit with no fields left", size=total)

    return embed.model_copy(update={"fields": fields})

def enforce_limits(embed: Embed, content: Optional[str] = None) -> Tuple[Embed, Optional[str]]:
    """Return copies of embed and content that fit the platform limits."""
    limited = drop_trailing_fields(truncate_attributes(embed))

    dropped = len(embed.fields) - len(limited.fields)
    if dropped:
        logger.info("fields dropped to fit embed", dropped=dropped, remaining=len(limited.fields))

    if content is not None:
        content = truncate(content, CONTENT_LIMIT)

    return limited, content
