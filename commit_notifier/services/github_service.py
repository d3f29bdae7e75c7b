from commit_notifier.core.config import settings
from commit_notifier.core.exceptions import UpstreamFetchError
from commit_notifier.core.logging import get_logger
from commit_notifier.models.commit import FileChanges
from commit_notifier.schemas.github import CommitDetail
from pydantic import ValidationError
import httpx
from typing import Optional, List, Dict

logger= get_logger(__name__)

ADDED_STATUSES = {"added", "copied"}
REMOVED_STATUSES = {"removed"}

class GithubService:
    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.GITHUB_API_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.transport = transport
        self.headers={
            "Accept":"application/vnd.github.v3+json",
            "User-Agent":f"{settings.APP_NAME}/{settings.VERSION}"

        }
        token = token if token is not None else settings.GITHUB_TOKEN
        if token:
            self.headers["Authorization"]=f"token {token}"
            logger.info("github service initialized")

        else:
            logger.warning("github service initialized (limited rate)")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def get_commit_files(self, owner: str, repo: str, sha: str, per_page: int = 100) -> FileChanges:
        """added/modified/removed paths of one commit"""
        logger.info("fetching commit files", owner=owner, repo=repo, sha=sha[:8])

        added: List[str] = []
        modified: List[str] = []
        removed: List[str] = []
        page = 1

        async with self._client() as client:
            while True:
                try:
                    response = await client.get(
                        f"{self.base_url}/repos/{owner}/{repo}/commits/{sha}",
                        headers=self.headers,
                        params={"per_page": per_page, "page": page}
                    )
                except httpx.HTTPError as e:
                    logger.error("commit lookup failed", sha=sha[:8], error=str(e))
                    raise UpstreamFetchError(f"commit lookup failed: {e}") from e

                if response.status_code == 404:
                    logger.error("commit not found", owner=owner, repo=repo, sha=sha[:8])
                    raise UpstreamFetchError(f"commit {sha} not found in {owner}/{repo}", status_code=404)
                elif response.status_code != 200:
                    logger.error("GitHub API error", status_code=response.status_code, sha=sha[:8])
                    raise UpstreamFetchError(
                        f"GitHub API error: {response.status_code}", status_code=response.status_code
                    )

                try:
                    detail = CommitDetail.model_validate(response.json())
                except (ValueError, ValidationError) as e:
                    raise UpstreamFetchError(f"unexpected commit payload: {e}") from e

                for file in detail.files:
                    if file.status in ADDED_STATUSES:
                        added.append(file.filename)
                    elif file.status in REMOVED_STATUSES:
                        removed.append(file.filename)
                    else:
                        modified.append(file.filename)

                if len(detail.files) < per_page:
                    break
                page += 1

        logger.info("commit files fetched", sha=sha[:8], added=len(added),
                    modified=len(modified), removed=len(removed))
        return FileChanges(added=added, modified=modified, removed=removed)

    async def get_rate_limit(self)-> Dict:
        #ratelimit status for github
        async with self._client() as client:
            response = await client.get(
                f"{self.base_url}/rate_limit",
                headers=self.headers
            )

            if response.status_code == 200:
                return response.json()
            else:
                logger.error("failed to fetch rate limit", status_code=response.status_code)
                return {}

    async def test_connection(self) -> bool: #github api connection test
        try:
            rate_limit = await self.get_rate_limit()
            return bool(rate_limit.get("rate"))
        except httpx.HTTPError as e:
            logger.error("GitHub service test failed", error=str(e))
            return False
