import httpx
import pytest
from commit_notifier.core.exceptions import UpstreamFetchError
from commit_notifier.services.github_service import GithubService

SHA = "0123456789abcdef0123456789abcdef01234567"


def _service(handler, token="ghp_test"):
    return GithubService(
        token=token,
        base_url="https://api.github.test",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_get_commit_files_classifies_statuses():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={
            "sha": SHA,
            "files": [
                {"filename": "new.py", "status": "added"},
                {"filename": "copy.py", "status": "copied"},
                {"filename": "app.py", "status": "modified"},
                {"filename": "moved.py", "status": "renamed", "previous_filename": "old.py"},
                {"filename": "gone.py", "status": "removed"},
            ],
        })

    changes = await _service(handler).get_commit_files("octo", "widgets", SHA)

    assert changes.added == ["new.py", "copy.py"]
    assert changes.modified == ["app.py", "moved.py"]
    assert changes.removed == ["gone.py"]

    request = seen[0]
    assert request.url.path == f"/repos/octo/widgets/commits/{SHA}"
    assert request.headers["Authorization"] == "token ghp_test"
    assert request.headers["Accept"] == "application/vnd.github.v3+json"


@pytest.mark.asyncio
async def test_get_commit_files_follows_pages():
    def handler(request):
        page = int(request.url.params["page"])
        if page == 1:
            files = [{"filename": f"f{i}.py", "status": "modified"} for i in range(2)]
        else:
            files = [{"filename": "last.py", "status": "added"}]
        return httpx.Response(200, json={"sha": SHA, "files": files})

    changes = await _service(handler).get_commit_files("octo", "widgets", SHA, per_page=2)

    assert changes.modified == ["f0.py", "f1.py"]
    assert changes.added == ["last.py"]


@pytest.mark.asyncio
async def test_no_token_sends_no_authorization():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"sha": SHA, "files": []})

    await _service(handler, token="").get_commit_files("octo", "widgets", SHA)

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 404, 500])
async def test_error_status_raises_upstream_fetch_error(status):
    service = _service(lambda request: httpx.Response(status, json={"message": "nope"}))

    with pytest.raises(UpstreamFetchError) as exc_info:
        await service.get_commit_files("octo", "widgets", SHA)

    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_transport_error_raises_upstream_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamFetchError, match="connection refused"):
        await _service(handler).get_commit_files("octo", "widgets", SHA)


@pytest.mark.asyncio
async def test_unexpected_body_raises_upstream_fetch_error():
    service = _service(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(UpstreamFetchError):
        await service.get_commit_files("octo", "widgets", SHA)


@pytest.mark.asyncio
async def test_connection_check():
    ok = _service(lambda request: httpx.Response(200, json={"rate": {"remaining": 60}}))
    down = _service(lambda request: httpx.Response(503))

    assert await ok.test_connection() is True
    assert await down.test_connection() is False
