from pydantic import BaseModel, Field
from typing import Any, Dict, Optional, List
from datetime import datetime

class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool = False

class EmbedAuthor(BaseModel):
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None

class EmbedFooter(BaseModel):
    text: str
    icon_url: Optional[str] = None

class EmbedMedia(BaseModel):
    url: str

class Embed(BaseModel):
    title: str
    description: Optional[str] = None
    url: Optional[str] = None
    color: int = Field(0xFFFFFF, ge=0, le=0xFFFFFF)
    fields: List[EmbedField] = []
    author: Optional[EmbedAuthor] = None
    footer: Optional[EmbedFooter] = None
    image: Optional[EmbedMedia] = None
    thumbnail: Optional[EmbedMedia] = None
    timestamp: Optional[datetime] = None

class WebhookPayload(BaseModel):
    content: Optional[str] = None
    embeds: List[Embed]

    def to_json(self) -> Dict[str, Any]:
        """request body with unset blocks left out"""
        return self.model_dump(mode="json", exclude_none=True)
