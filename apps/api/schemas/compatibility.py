"""Pydantic models for the compatibility API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from calkinds.domain.kinds import CompatibilityEntry


class PropertyEntryModel(BaseModel):
    """Value type rules of one property."""

    property: str = Field(..., description="Property name", examples=["DTSTART"])
    value_types: List[str] = Field(..., description="Legal value types, sorted")
    default_value_type: str = Field(..., description="Value type assumed without a VALUE parameter")
    multivalue_element: Optional[str] = Field(None, description="List element type for list properties")
    separator: Optional[str] = Field(None, description="List separator for list properties")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entry(cls, entry: CompatibilityEntry) -> "PropertyEntryModel":
        return cls(
            property=entry.property.value,
            value_types=sorted(kind.value for kind in entry.valid_values),
            default_value_type=entry.default_value.value,
            multivalue_element=entry.multivalue_element.value if entry.multivalue_element else None,
            separator=entry.separator,
        )


class PropertyListModel(BaseModel):
    """All recognized properties."""

    properties: List[PropertyEntryModel]
    total: int


class PairingModel(BaseModel):
    """Answer for one property/value type pairing."""

    property: str
    value_type: str
    valid: bool
    default: bool
    emit_value_parameter: bool = Field(..., description="Whether a serializer must write VALUE=")
    multivalue_element: Optional[str] = None
    message: str = ""


class ResolveRequestModel(BaseModel):
    """Parser-side resolution request."""

    value_param: Optional[str] = Field(None, description="Raw VALUE parameter, omitted when absent", max_length=64)


class ResolveResponseModel(BaseModel):
    """Resolved value type of a parsed property."""

    property: str
    value_type: str
    explicit: bool = Field(..., description="True when the VALUE parameter was honoured")


class ErrorResponseModel(BaseModel):
    """Error payload."""

    code: str
    message: str
