from commit_notifier.models.commit import CommitRecord, FileChanges, PushEvent
from commit_notifier.models.embed import EmbedField
from commit_notifier.models.options import NotifyOptions
from commit_notifier.services.limits import FIELD_VALUE_LIMIT, truncate
from typing import List, Optional
import re

NO_MESSAGE = "No commit message provided"
UNKNOWN_BRANCH = "Unknown"
UNKNOWN_AUTHOR = "Unknown"

REF_PREFIX = re.compile(r"^refs/[^/]+/")

def code_block(text: str) -> str:
    return f"```\n{text}\n```"

def message_field(commit: CommitRecord) -> EmbedField:
    message = commit.message.strip() or NO_MESSAGE
    return EmbedField(
        name="Commit Message",
        value=truncate(code_block(message), FIELD_VALUE_LIMIT),
        inline=False,
    )

def changed_files_field(changes: FileChanges) -> EmbedField:
    #every section is listed, even when it has no entries
    lines: List[str] = []
    for label, paths in (
        ("Added", changes.added),
        ("Modified", changes.modified),
        ("Removed", changes.removed),
    ):
        lines.append(f"{label}:")
        lines.extend(paths)

    return EmbedField(
        name="Changed Files",
        value=truncate(code_block("\n".join(lines)), FIELD_VALUE_LIMIT),
        inline=False,
    )

def branch_name(ref: Optional[str]) -> Optional[str]:
    if not ref:
        return None
    return REF_PREFIX.sub("", ref) or None

def branch_field(event: PushEvent) -> EmbedField:
    name = branch_name(event.ref)
    if name is None and event.commit is not None:
        name = branch_name(event.commit.branch)
    return EmbedField(name="Branch", value=name or UNKNOWN_BRANCH, inline=True)

def author_username(event: PushEvent) -> Optional[str]:
    author = event.commit.author if event.commit is not None else None
    candidates = [
        event.pusher_name,
        event.sender_login,
        author.username if author else None,
        author.login if author else None,
    ]
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return None

def author_field(event: PushEvent) -> EmbedField:
    commit = event.commit
    username = author_username(event)
    display = (commit.author.name if commit else None) or username or UNKNOWN_AUTHOR

    if username:
        value = f"{display} ([@{username}]({event.repo.profile_url(username)}))"
    else:
        value = display
    return EmbedField(name="Author", value=value, inline=True)

def commit_link_field(event: PushEvent) -> EmbedField:
    sha = event.commit.id
    value = (
        f"[`{sha[:7]}`]({event.repo.commit_url(sha)}) | "
        f"[{event.repo.full_name}]({event.repo.html_url})"
    )
    return EmbedField(name="Commit Link", value=value, inline=False)

def build_fields(
    options: NotifyOptions,
    event: PushEvent,
    changes: Optional[FileChanges] = None,
) -> List[EmbedField]:
    """Ordered field sequence for the enabled sections.

    Order is fixed: message, changed files, branch, author, commit link.
    It doubles as the drop order when the embed is too large, last first.
    """
    commit = event.commit
    if commit is None:
        return []

    fields: List[EmbedField] = []
    if options.show_commit_message:
        fields.append(message_field(commit))

    if options.show_changed_files:
        fields.append(changed_files_field(changes or FileChanges.from_commit(commit)))

    if options.show_branch:
        fields.append(branch_field(event))

    if options.show_author:
        fields.append(author_field(event))

    if options.show_commit_link:
        fields.append(commit_link_field(event))

    return fields
