"""
Exception types raised by the Infoblox administration toolkit.
"""

from typing import Optional


class IbAdminError(Exception):
    """Base class for toolkit errors."""
    pass


class SourceUnavailable(IbAdminError):
    """Raised when an ingestion source cannot be opened."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Unable to open [{source}] for reading: {reason}")


class ConfigError(IbAdminError):
    """Raised when configuration validation fails."""
    pass


class SessionError(IbAdminError):
    """Raised when a grid master session cannot be established or used."""

    def __init__(self, status_code: Optional[int], detail: str):
        self.status_code = status_code
        self.detail = detail
        if status_code is None:
            super().__init__(detail)
        else:
            super().__init__(f"[{status_code}] {detail}")


class DownloadError(IbAdminError):
    """Raised when the API distribution cannot be located or fetched."""
    pass
