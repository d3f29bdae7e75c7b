from commit_notifier.core.exceptions import ConfigurationError
from commit_notifier.core.logging import get_logger
from commit_notifier.models.options import DEFAULT_TITLE, NotifyOptions
from commit_notifier.services.colour import resolve_colour
from pydantic import ValidationError
from typing import Any, Dict, Mapping
from urllib.parse import urlparse

logger = get_logger(__name__)

def normalize_options(raw: Mapping[str, Any]) -> NotifyOptions:
    """Validate and default the flat option mapping.

    Strings are stripped, empty or missing values fall back to their
    defaults. A missing or non-http webhook URL and an unparseable colour
    raise ConfigurationError before anything touches the network.
    """
    cleaned: Dict[str, Any] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            field = NotifyOptions.model_fields.get(key)
            if not value and field is not None and field.annotation is bool:
                continue
        cleaned[key] = value

    webhook_url = cleaned.get("webhook_url") or ""
    if not webhook_url:
        raise ConfigurationError("webhook url is required")

    try:
        parsed = urlparse(webhook_url)
    except ValueError:
        raise ConfigurationError("webhook url must be an http(s) url") from None
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError("webhook url must be an http(s) url")

    if not cleaned.get("embed_title"):
        cleaned["embed_title"] = DEFAULT_TITLE

    # fail on a bad colour before any request is made
    resolve_colour(cleaned.get("embed_colour"))

    try:
        options = NotifyOptions(**cleaned)
    except ValidationError as e:
        raise ConfigurationError(f"invalid notification options: {e}") from e

    logger.debug(
        "options normalized",
        show_commit_message=options.show_commit_message,
        show_changed_files=options.show_changed_files,
        show_branch=options.show_branch,
        show_author=options.show_author,
        show_commit_link=options.show_commit_link,
        colour_changes=options.colour_changes,
    )
    return options
