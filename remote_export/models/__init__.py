"""Data models for the remote export destination."""

from .schema import (
    FieldType,
    FieldDefinition,
)
from .config import (
    ExportConfig,
    RequestFormat,
)
from .record import (
    Row,
    Success,
    IdentifierMap,
    ExportOutcome,
    MigrationResult,
)

__all__ = [
    "FieldType",
    "FieldDefinition",
    "ExportConfig",
    "RequestFormat",
    "Row",
    "Success",
    "IdentifierMap",
    "ExportOutcome",
    "MigrationResult",
]
