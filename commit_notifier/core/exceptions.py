"""Notifier exception hierarchy.

Every failure of a run surfaces as one NotifierError subclass.
"""
from typing import Optional


class NotifierError(Exception):
    """Base exception for all notifier errors."""


class ConfigurationError(NotifierError):
    """Raised when a required option is missing or an option is malformed."""


class UpstreamFetchError(NotifierError):
    """Raised when the remote file-list lookup fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DeliveryError(NotifierError):
    """Raised when the webhook POST fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        detail = message
        if status_code is not None:
            detail = f"{detail} (status {status_code})"
        if body:
            detail = f"{detail}: {body}"
        super().__init__(detail)
