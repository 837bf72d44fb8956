"""Destination that POSTs rows to a remote HTTP endpoint."""

import logging
import requests
from typing import Any, Dict, Optional
from urllib3.filepost import encode_multipart_formdata

from .base import BaseDestination
from ..errors import ConfigurationError, RemoteRejection, UnextractableIdentifier
from ..models.config import ExportConfig, RequestFormat
from ..models.record import Row, ExportOutcome, Success, IdentifierMap
from ..services.nested import flatten_form_fields, unset_value
from ..services.response import Unparseable, decode_response_body, extract_identifiers

logger = logging.getLogger(__name__)


class RemoteDestination(BaseDestination):
    """
    POSTs each row to the URL held in one of its own properties.

    The property named by ``url_property`` is read from the row and removed
    from the request body. The body is encoded as JSON, form or multipart.
    When ``ids`` are configured, the JSON response is read back into an
    identifier map; otherwise a 2xx response is a plain success.

    Holds no per-row state, so one instance can serve concurrent exports as
    long as the session can.
    """

    def __init__(
        self,
        config: ExportConfig,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the remote destination.

        Args:
            config: Fully resolved destination configuration
            session: HTTP session to send requests with
        """
        super().__init__(config)
        self._session = session or self._create_session()

    @classmethod
    def create(cls, config: ExportConfig, session: Optional[requests.Session] = None) -> "RemoteDestination":
        """Create a destination from configuration with an optional shared session."""
        return cls(config, session=session)

    def _create_session(self) -> requests.Session:
        """Create a requests session with client defaults."""
        return requests.Session()

    def check_requirements(self) -> None:
        super().check_requirements()
        if self.config.url_property is None:
            raise ConfigurationError("The destination configuration key url_property is required")

    def _build_request_kwargs(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Encode the body according to the configured format."""
        request_format = self.config.format or RequestFormat.FORM

        if request_format == RequestFormat.JSON:
            return {"json": values}
        if request_format == RequestFormat.MULTIPART:
            fields = flatten_form_fields(values)
            if not fields:
                # requests sends no body for an empty files list
                body, content_type = encode_multipart_formdata([])
                return {"data": body, "headers": {"Content-Type": content_type}}
            return {"files": [(name, (None, value)) for name, value in fields]}
        return {"data": flatten_form_fields(values)}

    def import_row(self, row: Row) -> ExportOutcome:
        """POST a row and interpret the response."""
        url = row.get_destination_property(self.config.url_property)
        values = row.get_destination()
        unset_value(values, self.config.url_property)

        logger.debug(f"POST {url} ({self.config.format.value}) for row {row.source_id}")
        response = self._session.post(url, **self._build_request_kwargs(values))

        if not str(response.status_code).startswith("2"):
            logger.warning(f"POST {url} returned {response.status_code} for row {row.source_id}")
            raise RemoteRejection(response.status_code, response.content)

        if self.config.expected_ids is None:
            return Success()

        body = decode_response_body(response.content)
        if isinstance(body, Unparseable):
            logger.warning(f"POST {url} response has no identifiers: {body.reason}")
            raise UnextractableIdentifier(body.reason, response.content)

        ids = extract_identifiers(body, self.config.expected_ids)
        if not ids:
            logger.warning(
                f"POST {url} response has none of the identifiers: "
                f"{', '.join(self.config.expected_ids)}"
            )
            raise UnextractableIdentifier("no declared identifiers in response", response.content)

        return IdentifierMap(ids)
