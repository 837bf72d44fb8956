"""Row and result models for exported migration data."""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from datetime import datetime

from ..services.nested import (
    PathLike,
    get_value,
    has_value,
    set_value,
    unset_value,
)


@dataclass
class Row:
    """
    One unit of migrated data.

    ``source`` holds the values read from the source system and
    ``destination`` the processed values addressed by property paths
    (segments separated by '/', e.g. 'endpoint/url').
    """
    source_id: str = ""
    source: Dict[str, Any] = field(default_factory=dict)
    destination: Dict[str, Any] = field(default_factory=dict)

    def get_destination_property(self, path: PathLike, default: Any = None) -> Any:
        return get_value(self.destination, path, default)

    def has_destination_property(self, path: PathLike) -> bool:
        return has_value(self.destination, path)

    def set_destination_property(self, path: PathLike, value: Any) -> None:
        set_value(self.destination, path, value)

    def remove_destination_property(self, path: PathLike) -> bool:
        return unset_value(self.destination, path)

    def get_destination(self) -> Dict[str, Any]:
        """Get a deep copy of the destination values."""
        return copy.deepcopy(self.destination)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.source_id,
            "source": self.source,
            "destination": self.destination,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Row":
        """
        Create from dictionary representation.

        A mapping with neither a "source" nor a "destination" key is taken
        to be the destination values themselves.
        """
        if "source" not in data and "destination" not in data:
            return cls(source_id=str(data.get("id", "")), destination=dict(data))
        return cls(
            source_id=str(data.get("id", "")),
            source=data.get("source") or {},
            destination=data.get("destination") or {},
        )


@dataclass(frozen=True)
class Success:
    """The row was accepted; no identifiers are tracked."""

    @property
    def destination_ids(self) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class IdentifierMap:
    """Destination identifiers read from the remote response."""
    ids: Dict[str, Any]

    @property
    def destination_ids(self) -> Dict[str, Any]:
        return dict(self.ids)


ExportOutcome = Union[Success, IdentifierMap]


@dataclass
class MigrationResult:
    """Result of attempting to export a row."""
    record_id: str
    destination_ids: Dict[str, Any] = field(default_factory=dict)
    success: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None
    loaded_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "record_id": self.record_id,
            "destination_ids": self.destination_ids,
            "success": self.success,
            "error": self.error,
            "error_code": self.error_code,
            "loaded_at": self.loaded_at.isoformat() if self.loaded_at else None,
        }
