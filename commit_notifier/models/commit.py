from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

class CommitAuthor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    login: Optional[str] = None

class CommitRecord(BaseModel):
    """one commit as reported by the triggering event"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    message: str = ""
    author: CommitAuthor = Field(default_factory=CommitAuthor)
    url: Optional[str] = None
    timestamp: Optional[datetime] = None

    #None means the event did not carry the list at all
    added: Optional[List[str]] = None
    modified: Optional[List[str]] = None
    removed: Optional[List[str]] = None

    branch: Optional[str] = None

    @property
    def has_file_lists(self) -> bool:
        return any(files is not None for files in (self.added, self.modified, self.removed))

class RepoIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    server_url: str = "https://github.com"

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        return f"{self.server_url.rstrip('/')}/{self.owner}/{self.name}"

    def commit_url(self, sha: str) -> str:
        return f"{self.html_url}/commit/{sha}"

    def profile_url(self, username: str) -> str:
        return f"{self.server_url.rstrip('/')}/{username}"

class FileChanges(BaseModel):
    model_config = ConfigDict(frozen=True)

    added: List[str] = []
    modified: List[str] = []
    removed: List[str] = []

    @classmethod
    def from_commit(cls, commit: CommitRecord) -> "FileChanges":
        return cls(
            added=commit.added or [],
            modified=commit.modified or [],
            removed=commit.removed or [],
        )

class PushEvent(BaseModel):
    """explicit event context handed to the pipeline"""
    model_config = ConfigDict(frozen=True)

    repo: RepoIdentity
    commit: Optional[CommitRecord] = None
    ref: Optional[str] = None
    pusher_name: Optional[str] = None
    sender_login: Optional[str] = None
