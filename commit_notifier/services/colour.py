from commit_notifier.core.exceptions import ConfigurationError
from commit_notifier.models.commit import FileChanges
from typing import Optional
import re

WHITE = 0xFFFFFF
GREEN = 0x00FF00
RED = 0xFF0000

HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

def resolve_colour(hex_colour: Optional[str]) -> int:
    """hex string (with or without '#') to the numeric embed colour"""
    if not hex_colour or not hex_colour.strip():
        return WHITE

    text = hex_colour.strip()
    if text.startswith('#'):
        text = text[1:]

    #plain hex digits only, no 0x prefix or underscores
    if not HEX_DIGITS.fullmatch(text):
        raise ConfigurationError(f"invalid embed colour: {hex_colour!r}")
    value = int(text, 16)

    if not 0 <= value <= WHITE:
        raise ConfigurationError(f"embed colour out of range: {hex_colour!r}")
    return value

def change_colour(base: int, changes: Optional[FileChanges]) -> int:
    #added wins over removed when both are present
    if changes is None:
        return base
    if changes.added:
        return GREEN
    if changes.removed:
        return RED
    return base
