import pytest
from pydantic import ValidationError
from commit_notifier.core.config import Settings
from commit_notifier.core.exceptions import ConfigurationError
from commit_notifier.services.options import normalize_options

WEBHOOK_URL = "https://discord.example/api/webhooks/1/token"


def test_normalize_applies_defaults():
    options = normalize_options({"webhook_url": WEBHOOK_URL})

    assert options.embed_title == "GitHub Commit Notification"
    assert options.embed_colour == ""
    assert options.show_commit_message is False
    assert options.prefer_local_file_lists is True


@pytest.mark.parametrize("url", ["", "   ", None])
def test_missing_webhook_url_is_configuration_error(url):
    with pytest.raises(ConfigurationError, match="webhook url is required"):
        normalize_options({"webhook_url": url})


def test_non_http_webhook_url_rejected():
    with pytest.raises(ConfigurationError, match="http"):
        normalize_options({"webhook_url": "ftp://example.com/hook"})


def test_unparseable_webhook_url_is_configuration_error():
    with pytest.raises(ConfigurationError, match="http"):
        normalize_options({"webhook_url": "https://[::1/api"})


def test_malformed_colour_rejected():
    with pytest.raises(ConfigurationError, match="colour"):
        normalize_options({"webhook_url": WEBHOOK_URL, "embed_colour": "#nothex"})


def test_strings_stripped_and_boolean_text_parsed():
    options = normalize_options({
        "webhook_url": f"  {WEBHOOK_URL}  ",
        "embed_title": "  ",
        "footer_text": " built ",
        "show_branch": "true",
        "show_author": "",
        "colour_changes": "False",
    })

    assert options.webhook_url == WEBHOOK_URL
    assert options.embed_title == "GitHub Commit Notification"
    assert options.footer_text == "built"
    assert options.show_branch is True
    assert options.show_author is False
    assert options.colour_changes is False


def test_invalid_boolean_is_configuration_error():
    with pytest.raises(ConfigurationError):
        normalize_options({"webhook_url": WEBHOOK_URL, "show_branch": "sometimes"})


def test_options_are_immutable():
    options = normalize_options({"webhook_url": WEBHOOK_URL})
    with pytest.raises(ValidationError):
        options.show_branch = True


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.setenv("SHOW_COMMIT_MESSAGE", "true")
    monkeypatch.setenv("EMBED_COLOUR", "#00ff00")
    monkeypatch.setenv("SHOW_BRANCH", "")

    raw = Settings(_env_file=None).notify_options()
    options = normalize_options(raw)

    assert options.webhook_url == WEBHOOK_URL
    assert options.show_commit_message is True
    assert options.show_branch is False
    assert options.embed_colour == "#00ff00"
