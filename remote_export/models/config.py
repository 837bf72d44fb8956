"""Configuration for the remote export destination."""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .schema import FieldDefinition, schema_to_dict
from ..errors import ConfigurationError


class RequestFormat(str, Enum):
    """Request body encodings."""
    JSON = "json"
    FORM = "form"
    MULTIPART = "multipart"


# Guzzle request option names used by older destination configs
FORMAT_ALIASES = {
    "form_params": RequestFormat.FORM,
}


@dataclass
class ExportConfig:
    """
    Resolved configuration for a RemoteDestination.

    The migration engine is expected to have merged any per-migration
    settings (endpoint URLs, credentials) into the row or this object
    before it reaches the destination.
    """
    url_property: Optional[str] = None
    format: RequestFormat = RequestFormat.FORM
    expected_ids: Optional[Dict[str, FieldDefinition]] = None
    fields: Dict[str, FieldDefinition] = field(default_factory=dict)
    migration_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "migration_id": self.migration_id,
            "url_property": self.url_property,
            "format": self.format.value,
            "ids": schema_to_dict(self.expected_ids) if self.expected_ids is not None else None,
            "fields": schema_to_dict(self.fields),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """Create from dictionary representation."""
        raw_format = data.get("format") or RequestFormat.FORM.value
        if raw_format in FORMAT_ALIASES:
            request_format = FORMAT_ALIASES[raw_format]
        else:
            try:
                request_format = RequestFormat(raw_format)
            except ValueError:
                raise ConfigurationError(
                    f"Unsupported format '{raw_format}', expected one of "
                    f"{', '.join(f.value for f in RequestFormat)}"
                )

        raw_ids = data.get("ids", data.get("expected_ids"))
        expected_ids = None
        if raw_ids is not None:
            if not isinstance(raw_ids, dict):
                raise ConfigurationError("ids must be a mapping of identifier name to type")
            expected_ids = {
                name: FieldDefinition.from_config(name, value)
                for name, value in raw_ids.items()
            }

        fields = {
            name: FieldDefinition.from_config(name, value, string_key="description")
            for name, value in (data.get("fields") or {}).items()
        }

        return cls(
            url_property=data.get("url_property"),
            format=request_format,
            expected_ids=expected_ids,
            fields=fields,
            migration_id=data.get("migration_id", data.get("id", "")),
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ExportConfig":
        """Load from a JSON configuration file."""
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return cls.from_dict(data)
