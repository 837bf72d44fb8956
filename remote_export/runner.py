"""Sequential export runner - drives a destination over a set of rows."""

import logging
from datetime import datetime
from typing import Iterable, Optional

import requests

from .errors import ExportFailure
from .loaders.base import BaseDestination, LoadResult
from .models.record import Row, MigrationResult

logger = logging.getLogger(__name__)


class ExportRunner:
    """
    Exports rows one at a time through a destination.

    Configuration problems abort the run before any row is sent. Row
    failures are recorded and, depending on ``continue_on_error`` and
    ``max_errors``, either skipped over or allowed to stop the run.
    """

    def __init__(
        self,
        destination: BaseDestination,
        continue_on_error: bool = True,
        max_errors: int = 100
    ):
        """
        Initialize the runner.

        Args:
            destination: Destination to export rows to
            continue_on_error: Keep going after a failed row
            max_errors: Stop after this many failed rows
        """
        self.destination = destination
        self.continue_on_error = continue_on_error
        self.max_errors = max_errors

    def run(self, rows: Iterable[Row]) -> LoadResult:
        """
        Export all rows.

        Raises:
            ConfigurationError: If the destination fails its pre-flight check
        """
        self.destination.check_requirements()

        result = LoadResult(migration_id=self.destination.config.migration_id)
        result.started_at = datetime.utcnow()

        for index, row in enumerate(rows):
            record_id = row.source_id
            if not record_id:
                record_id = str(index)
                logger.warning(f"Row {index} has no source id, tracking it by position")

            migration_result = self.export_row(row, record_id)
            result.results.append(migration_result)
            result.total_attempted += 1

            if migration_result.success:
                result.total_succeeded += 1
                result.id_map[record_id] = migration_result.destination_ids
                continue

            result.total_failed += 1
            result.errors.append({
                "record_id": record_id,
                "error": migration_result.error,
                "error_code": migration_result.error_code,
            })

            if not self.continue_on_error or result.total_failed >= self.max_errors:
                logger.error(f"Stopping after {result.total_failed} failed rows")
                result.aborted = True
                break

        result.completed_at = datetime.utcnow()
        logger.info(
            f"Exported {result.total_succeeded}/{result.total_attempted} rows"
        )
        return result

    def export_row(self, row: Row, record_id: Optional[str] = None) -> MigrationResult:
        """Export one row and capture its outcome."""
        if record_id is None:
            record_id = row.source_id

        try:
            outcome = self.destination.import_row(row)
        except ExportFailure as e:
            logger.error(f"Failed to export row {record_id}: {e}")
            return MigrationResult(
                record_id=record_id,
                success=False,
                error=str(e),
                error_code=e.error_code,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Transport failure for row {record_id}: {e}")
            return MigrationResult(
                record_id=record_id,
                success=False,
                error=str(e),
                error_code=type(e).__name__,
            )

        return MigrationResult(
            record_id=record_id,
            destination_ids=outcome.destination_ids,
            success=True,
            loaded_at=datetime.utcnow(),
        )
