from commit_notifier.core.logging import get_logger
from commit_notifier.models.commit import CommitRecord, FileChanges, PushEvent, RepoIdentity
from commit_notifier.models.options import NotifyOptions
from commit_notifier.services.github_service import GithubService
from typing import Optional, Protocol

logger = get_logger(__name__)

class FileChangeSource(Protocol):
    async def files_for_commit(self, commit_id: str) -> FileChanges: ...

class LocalFileChangeSource:
    """file lists carried by the event payload itself"""

    def __init__(self, commit: CommitRecord):
        self.commit = commit

    async def files_for_commit(self, commit_id: str) -> FileChanges:
        return FileChanges.from_commit(self.commit)

class GithubFileChangeSource:
    """file lists looked up through the GitHub commits API"""

    def __init__(self, github: GithubService, repo: RepoIdentity):
        self.github = github
        self.repo = repo

    async def files_for_commit(self, commit_id: str) -> FileChanges:
        return await self.github.get_commit_files(self.repo.owner, self.repo.name, commit_id)

def select_source(options: NotifyOptions, event: PushEvent, github: GithubService) -> FileChangeSource:
    commit = event.commit
    if options.prefer_local_file_lists and commit.has_file_lists:
        logger.debug("using file lists from event payload")
        return LocalFileChangeSource(commit)

    logger.debug("using remote file lookup")
    return GithubFileChangeSource(github, event.repo)

async def resolve_file_changes(
    options: NotifyOptions,
    event: PushEvent,
    github: GithubService,
) -> Optional[FileChanges]:
    """None when no enabled section needs file lists or there is no commit"""
    if event.commit is None or not options.needs_file_changes:
        return None

    source = select_source(options, event, github)
    return await source.files_for_commit(event.commit.id)
