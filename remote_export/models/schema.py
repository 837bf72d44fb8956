"""Type descriptors for destination identifiers and fields."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from enum import Enum


KNOWN_KEYS = ("type", "description", "max_length", "unsigned")


class FieldType(str, Enum):
    """Supported field types."""
    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    DATE = "date"
    DATETIME = "datetime"
    OBJECT = "object"
    ARRAY = "array"
    JSON = "json"


FIELD_TYPE_VALUES = {t.value for t in FieldType}


@dataclass
class FieldDefinition:
    """Definition of a destination identifier or field."""
    name: str
    type: Union[FieldType, str] = FieldType.STRING
    description: str = ""
    max_length: Optional[int] = None
    unsigned: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)  # other descriptor keys, kept as configured

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result = {
            "type": self.type.value if isinstance(self.type, FieldType) else self.type,
        }
        if self.description:
            result["description"] = self.description
        if self.max_length is not None:
            result["max_length"] = self.max_length
        if self.unsigned:
            result["unsigned"] = self.unsigned
        result.update(self.extra)
        return result

    @classmethod
    def from_config(
        cls,
        name: str,
        value: Union[str, Dict[str, Any], None],
        string_key: str = "type"
    ) -> "FieldDefinition":
        """
        Create from a configuration value.

        Identifier descriptors are usually written as ``{"type": "string"}``
        and field descriptors as a plain label. A bare string is read as
        ``string_key`` ("type" or "description").

        Args:
            name: Identifier or field name
            value: Descriptor mapping, bare string, or None
            string_key: What a bare string value means
        """
        if isinstance(value, str):
            value = {string_key: value}
        data = value or {}

        field_type = data.get("type", "string")
        if field_type in FIELD_TYPE_VALUES:
            field_type = FieldType(field_type)

        return cls(
            name=name,
            type=field_type,
            description=data.get("description", ""),
            max_length=data.get("max_length"),
            unsigned=data.get("unsigned", False),
            extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
        )


def schema_to_dict(definitions: Dict[str, FieldDefinition]) -> Dict[str, Dict[str, Any]]:
    """Render a name -> FieldDefinition mapping as plain descriptors."""
    return {name: definition.to_dict() for name, definition in definitions.items()}
