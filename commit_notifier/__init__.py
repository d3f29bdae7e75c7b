"""Commit notification embeds for chat webhooks."""

__version__ = "0.1.0"
