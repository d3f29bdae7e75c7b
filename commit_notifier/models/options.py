from pydantic import BaseModel, ConfigDict

DEFAULT_TITLE = "GitHub Commit Notification"

class NotifyOptions(BaseModel):
    """normalized notification options, immutable once loaded"""
    model_config = ConfigDict(frozen=True)

    webhook_url: str
    content: str = ""

    embed_title: str = DEFAULT_TITLE
    embed_description: str = ""
    embed_colour: str = ""
    colour_changes: bool = False

    author_name: str = ""
    author_icon_url: str = ""
    author_url: str = ""
    thumbnail_url: str = ""
    image_url: str = ""

    footer_text: str = ""
    footer_icon: str = ""
    footer_icon_url: str = ""
    footer_timestamp: bool = False

    show_commit_message: bool = False
    show_changed_files: bool = False
    show_branch: bool = False
    show_author: bool = False
    show_commit_link: bool = False
    prefer_local_file_lists: bool = True

    @property
    def needs_file_changes(self) -> bool:
        return self.show_changed_files or self.colour_changes
