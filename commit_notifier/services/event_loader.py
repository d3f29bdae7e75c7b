from commit_notifier.core.exceptions import ConfigurationError
from commit_notifier.core.logging import get_logger
from commit_notifier.models.commit import CommitAuthor, CommitRecord, PushEvent, RepoIdentity
from commit_notifier.schemas.github import PushCommit, PushEventPayload
from pydantic import ValidationError
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import json

logger = get_logger(__name__)

def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("unparseable commit timestamp", timestamp=value)
        return None

def _repo_name(payload: PushEventPayload, repository: Optional[str]) -> Tuple[str, str]:
    repo = payload.repository
    if repo is not None:
        owner = (repo.owner.login or repo.owner.name) if repo.owner else None
        if owner and repo.name:
            return owner, repo.name
        if repo.full_name and "/" in repo.full_name:
            owner, name = repo.full_name.split("/", 1)
            return owner, name

    if repository and "/" in repository:
        owner, name = repository.strip().split("/", 1)
        if owner and name:
            return owner, name

    raise ConfigurationError("repository owner/name not available from event or GITHUB_REPOSITORY")

def _commit_record(commit: PushCommit, ref: Optional[str]) -> CommitRecord:
    author = commit.author
    return CommitRecord(
        id=commit.id,
        message=commit.message or "",
        author=CommitAuthor(
            name=author.name,
            email=author.email,
            username=author.username,
            login=author.login,
        ) if author else CommitAuthor(),
        url=commit.url,
        timestamp=_parse_timestamp(commit.timestamp),
        added=commit.added,
        modified=commit.modified,
        removed=commit.removed,
        branch=ref,
    )

def event_from_payload(
    data: Dict[str, Any],
    repository: Optional[str] = None,
    ref: Optional[str] = None,
    server_url: str = "https://github.com",
) -> PushEvent:
    """Build a PushEvent from a GitHub push webhook body."""
    try:
        payload = PushEventPayload.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"invalid push event payload: {e}") from e

    owner, name = _repo_name(payload, repository)
    ref = payload.ref or ref

    head = payload.head_commit
    if head is None and payload.commits:
        head = payload.commits[-1]

    event = PushEvent(
        repo=RepoIdentity(owner=owner, name=name, server_url=server_url),
        commit=_commit_record(head, ref) if head else None,
        ref=ref,
        pusher_name=payload.pusher.name if payload.pusher else None,
        sender_login=payload.sender.login if payload.sender else None,
    )

    logger.info(
        "push event loaded",
        repo=event.repo.full_name,
        sha=event.commit.id[:8] if event.commit else None,
        ref=ref,
    )
    return event

def load_event(
    path: Optional[str],
    repository: Optional[str] = None,
    ref: Optional[str] = None,
    server_url: str = "https://github.com",
) -> PushEvent:
    """read the event file the actions runner writes to GITHUB_EVENT_PATH"""
    if not path:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set")

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f"event file not found: {path}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"could not read event file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"event file {path} does not hold a JSON object")

    return event_from_payload(data, repository=repository, ref=ref, server_url=server_url)
