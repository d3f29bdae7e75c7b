from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

class GitUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    login: Optional[str] = None

class PushCommit(BaseModel):
    """commit entry of a push event (head_commit / commits[])"""
    model_config = ConfigDict(extra="ignore")

    id: str
    message: Optional[str] = ""
    timestamp: Optional[str] = None
    url: Optional[str] = None
    author: Optional[GitUser] = None
    added: Optional[List[str]] = None
    modified: Optional[List[str]] = None
    removed: Optional[List[str]] = None

class RepoOwner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: Optional[str] = None
    name: Optional[str] = None

class PushRepository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    full_name: Optional[str] = None
    html_url: Optional[str] = None
    owner: Optional[RepoOwner] = None

class PushEventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ref: Optional[str] = None
    head_commit: Optional[PushCommit] = None
    commits: List[PushCommit] = []
    repository: Optional[PushRepository] = None
    pusher: Optional[GitUser] = None
    sender: Optional[GitUser] = None

class CommitFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    filename: str
    status: str  # 'added', 'modified', 'removed', 'renamed', ...
    previous_filename: Optional[str] = None

class CommitDetail(BaseModel):
    """GET /repos/{owner}/{repo}/commits/{sha}"""
    model_config = ConfigDict(extra="ignore")

    sha: str
    files: List[CommitFile] = Field(default_factory=list)
