from commit_notifier.core.exceptions import ConfigurationError
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Dict, Optional

class Settings(BaseSettings):
    #app settings
    APP_NAME: str = "commit-notifier"
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    #relay server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    #github api's
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_SERVER_URL: str = "https://github.com"
    GITHUB_TOKEN: Optional[str] = None

    #actions runtime context
    GITHUB_EVENT_PATH: Optional[str] = None
    GITHUB_REPOSITORY: Optional[str] = None
    GITHUB_REF: Optional[str] = None

    HTTP_TIMEOUT: Optional[float] = 30.0

    #notification
    WEBHOOK_URL: str = ""
    CONTENT: str = ""
    EMBED_TITLE: str = ""
    EMBED_DESCRIPTION: str = ""
    EMBED_COLOUR: str = ""
    COLOUR_CHANGES: bool = False

    EMBED_AUTHOR_NAME: str = ""
    EMBED_AUTHOR_ICON_URL: str = ""
    EMBED_AUTHOR_URL: str = ""
    EMBED_THUMBNAIL_URL: str = ""
    EMBED_IMAGE_URL: str = ""

    EMBED_FOOTER_TEXT: str = ""
    EMBED_FOOTER_ICON: str = ""
    EMBED_FOOTER_ICON_URL: str = ""
    EMBED_FOOTER_TIMESTAMP: bool = False

    SHOW_COMMIT_MESSAGE: bool = False
    SHOW_CHANGED_FILES: bool = False
    SHOW_BRANCH: bool = False
    SHOW_AUTHOR: bool = False
    SHOW_COMMIT_LINK: bool = False
    PREFER_LOCAL_FILE_LISTS: bool = True

    # unset action inputs arrive as empty strings
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    def notify_options(self) -> Dict[str, Any]:
        """raw notification options keyed by option name"""
        return {
            "webhook_url": self.WEBHOOK_URL,
            "content": self.CONTENT,
            "embed_title": self.EMBED_TITLE,
            "embed_description": self.EMBED_DESCRIPTION,
            "embed_colour": self.EMBED_COLOUR,
            "colour_changes": self.COLOUR_CHANGES,
            "author_name": self.EMBED_AUTHOR_NAME,
            "author_icon_url": self.EMBED_AUTHOR_ICON_URL,
            "author_url": self.EMBED_AUTHOR_URL,
            "thumbnail_url": self.EMBED_THUMBNAIL_URL,
            "image_url": self.EMBED_IMAGE_URL,
            "footer_text": self.EMBED_FOOTER_TEXT,
            "footer_icon": self.EMBED_FOOTER_ICON,
            "footer_icon_url": self.EMBED_FOOTER_ICON_URL,
            "footer_timestamp": self.EMBED_FOOTER_TIMESTAMP,
            "show_commit_message": self.SHOW_COMMIT_MESSAGE,
            "show_changed_files": self.SHOW_CHANGED_FILES,
            "show_branch": self.SHOW_BRANCH,
            "show_author": self.SHOW_AUTHOR,
            "show_commit_link": self.SHOW_COMMIT_LINK,
            "prefer_local_file_lists": self.PREFER_LOCAL_FILE_LISTS,
        }

def load_settings() -> Settings:
    """settings from the environment, ConfigurationError when a value does not parse"""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid settings: {e}") from e

try:
    settings = Settings()
except ValidationError:
    #defaults until main() reports the error through load_settings()
    settings = Settings.model_construct()
