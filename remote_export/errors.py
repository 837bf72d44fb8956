"""Exceptions raised by migration destinations."""

from typing import Optional


class MigrateError(Exception):
    """Base class for migration errors."""


class ConfigurationError(MigrateError):
    """The destination configuration is missing or invalid."""


class ExportFailure(MigrateError):
    """
    A row could not be exported.

    Raised for every unsuccessful POST. Subclasses carry the detail of what
    went wrong, but callers can treat them all as one failure.
    """

    def __init__(self, message: str = "POST unsuccessful", body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body

    @property
    def error_code(self) -> Optional[str]:
        return None


class RemoteRejection(ExportFailure):
    """The remote service answered with a non-2xx status code."""

    def __init__(self, status_code: int, body: Optional[bytes] = None):
        super().__init__(f"POST unsuccessful: status {status_code}", body)
        self.status_code = status_code

    @property
    def error_code(self) -> Optional[str]:
        return str(self.status_code)


class UnextractableIdentifier(ExportFailure):
    """The POST succeeded but no identifier could be read from the response."""

    def __init__(self, reason: str, body: Optional[bytes] = None):
        super().__init__(f"POST unsuccessful: {reason}", body)
        self.reason = reason
