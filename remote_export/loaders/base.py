"""Base destination interface for migration targets."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from datetime import datetime
import logging

from ..models.config import ExportConfig
from ..models.record import Row, ExportOutcome, MigrationResult
from ..models.schema import FieldDefinition, FieldType
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of exporting a set of rows."""
    migration_id: str
    total_attempted: int = 0
    total_succeeded: int = 0
    total_failed: int = 0
    results: List[MigrationResult] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    id_map: Dict[str, Dict[str, Any]] = field(default_factory=dict)  # source id -> destination ids
    aborted: bool = False

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    @property
    def success_rate(self) -> float:
        if self.total_attempted == 0:
            return 0.0
        return self.total_succeeded / self.total_attempted

    def to_dict(self) -> Dict[str, Any]:
        return {
            "migration_id": self.migration_id,
            "total_attempted": self.total_attempted,
            "total_succeeded": self.total_succeeded,
            "total_failed": self.total_failed,
            "success_rate": self.success_rate,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_seconds": self.duration_seconds,
            "aborted": self.aborted,
            "id_map": self.id_map,
            "errors": self.errors,
        }


class BaseDestination(ABC):
    """
    Base class for migration destinations.

    Destinations receive one processed row at a time and report the
    identifiers the row was given on the destination side.
    """

    DEFAULT_IDS = {"id": FieldDefinition(name="id", type=FieldType.STRING)}

    def __init__(self, config: ExportConfig):
        """
        Initialize the destination.

        Args:
            config: Fully resolved destination configuration
        """
        self.config = config

    def check_requirements(self) -> None:
        """
        Check the configuration before any row is exported.

        Raises:
            ConfigurationError: If the destination cannot run
        """
        if self.config is None:
            raise ConfigurationError("The destination has no configuration")

    @abstractmethod
    def import_row(self, row: Row) -> ExportOutcome:
        """
        Export a single row.

        Args:
            row: Row to export

        Returns:
            Success, or an IdentifierMap of destination identifiers

        Raises:
            ExportFailure: If the row could not be exported
        """
        pass

    def get_ids(self) -> Dict[str, FieldDefinition]:
        """Get the identifiers this destination produces."""
        if self.config.expected_ids is not None:
            return self.config.expected_ids
        return dict(self.DEFAULT_IDS)

    def fields(self) -> Dict[str, FieldDefinition]:
        """Get the declared destination fields."""
        return self.config.fields or {}
