import pytest
import httpx
from commit_notifier.models.commit import CommitAuthor, CommitRecord, PushEvent, RepoIdentity
from commit_notifier.models.options import NotifyOptions

WEBHOOK_URL = "https://discord.example/api/webhooks/1/token"
SHA = "0123456789abcdef0123456789abcdef01234567"


@pytest.fixture
def repo():
    return RepoIdentity(owner="octo", name="widgets")


@pytest.fixture
def commit():
    return CommitRecord(
        id=SHA,
        message="fix bug",
        author=CommitAuthor(name="Octo Cat", email="octo@example.com", username="octocat"),
        url=f"https://api.github.com/repos/octo/widgets/commits/{SHA}",
        added=["a.txt"],
        modified=["src/app.py"],
        removed=[],
    )


@pytest.fixture
def event(repo, commit):
    return PushEvent(repo=repo, commit=commit, ref="refs/heads/main")


@pytest.fixture
def make_options():
    """Factory for NotifyOptions with a valid webhook URL."""
    def _make(**overrides):
        values = {"webhook_url": WEBHOOK_URL}
        values.update(overrides)
        return NotifyOptions(**values)
    return _make


@pytest.fixture
def all_sections(make_options):
    return make_options(
        show_commit_message=True,
        show_changed_files=True,
        show_branch=True,
        show_author=True,
        show_commit_link=True,
    )


@pytest.fixture
def recorder():
    """
    MockTransport that records every request and answers with the
    configured response.
    """
    class Recorder:
        def __init__(self):
            self.requests = []
            self.responses = []

        def handler(self, request):
            self.requests.append(request)
            if self.responses:
                return self.responses.pop(0)
            return httpx.Response(204)

        @property
        def transport(self):
            return httpx.MockTransport(self.handler)

    return Recorder()


@pytest.fixture
def push_payload():
    return {
        "ref": "refs/heads/feature/login",
        "head_commit": {
            "id": SHA,
            "message": "Add login form\n\nWith validation.",
            "timestamp": "2024-05-01T12:00:00Z",
            "url": f"https://github.com/octo/widgets/commit/{SHA}",
            "author": {"name": "Octo Cat", "email": "octo@example.com", "username": "octocat"},
            "added": ["login.html"],
            "modified": ["app.py"],
            "removed": [],
        },
        "commits": [],
        "repository": {
            "name": "widgets",
            "full_name": "octo/widgets",
            "html_url": "https://github.com/octo/widgets",
            "owner": {"login": "octo", "name": "octo"},
        },
        "pusher": {"name": "pusher-bot", "email": "bot@example.com"},
        "sender": {"login": "sender-user"},
    }
