"""Compatibility endpoints over the iCalendar kind table.

- GET  /properties - List every recognized property
- GET  /properties/{name} - Rules of one property
- GET  /properties/{name}/value-types/{value} - Check one pairing
- POST /properties/{name}/resolve - Resolve the value type of a parsed property

Extension (X-) property names are accepted by the pairing and resolve
endpoints and follow the permissive extension policy.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from calkinds.application.services import PropertyTypingService
from calkinds.domain.kinds import PropertyKind, ValueKind
from calkinds.shared.logging import get_logger

from apps.api.schemas.compatibility import (
    ErrorResponseModel,
    PairingModel,
    PropertyEntryModel,
    PropertyListModel,
    ResolveRequestModel,
    ResolveResponseModel,
)

logger = get_logger("apps.api.compatibility")
router = APIRouter()

_default_service = PropertyTypingService()


def get_property_typing_service() -> PropertyTypingService:
    """Get the PropertyTypingService; overridden by the application factory."""
    return _default_service


@router.get("", response_model=PropertyListModel)
def list_properties(
    service: PropertyTypingService = Depends(get_property_typing_service),
) -> PropertyListModel:
    entries = [PropertyEntryModel.from_entry(entry) for entry in service.table]
    return PropertyListModel(properties=entries, total=len(entries))


@router.get(
    "/{name}",
    response_model=PropertyEntryModel,
    responses={404: {"model": ErrorResponseModel}},
)
def get_property(
    name: str = Path(..., min_length=1, max_length=64, description="Property name, case-insensitive"),
    service: PropertyTypingService = Depends(get_property_typing_service),
) -> PropertyEntryModel:
    """Return the rules of a recognized property."""
    entry = service.table.entry(PropertyKind.from_name(name))
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Property {name.upper()} is not a recognized property",
        )
    return PropertyEntryModel.from_entry(entry)


@router.get("/{name}/value-types/{value}", response_model=PairingModel)
def check_pairing(
    name: str = Path(..., min_length=1, max_length=64, description="Property name, case-insensitive"),
    value: str = Path(..., min_length=1, max_length=64),
    service: PropertyTypingService = Depends(get_property_typing_service),
) -> PairingModel:
    """Check whether a value type is legal for a property."""
    result = service.check(name, value)
    value_type = result.value.value if result.value is not ValueKind.UNKNOWN else value.upper()

    return PairingModel(
        property=name.upper(),
        value_type=value_type,
        valid=result.is_valid,
        default=result.is_default,
        emit_value_parameter=not result.is_default,
        multivalue_element=result.multivalue_element.value if result.multivalue_element else None,
        message=result.message,
    )


@router.post(
    "/{name}/resolve",
    response_model=ResolveResponseModel,
    responses={422: {"model": ErrorResponseModel}},
)
def resolve_value_type(
    request: ResolveRequestModel,
    name: str = Path(..., min_length=1, max_length=64, description="Property name, case-insensitive"),
    service: PropertyTypingService = Depends(get_property_typing_service),
) -> ResolveResponseModel:
    """Resolve the value type a parser should use for a property."""
    resolved = service.resolve_value_kind(name, request.value_param)
    explicit = request.value_param is not None and ValueKind.from_name(request.value_param) is resolved

    logger.debug("value_type_resolved", property=name.upper(), value_type=resolved.value, explicit=explicit)
    return ResolveResponseModel(property=name.upper(), value_type=resolved.value, explicit=explicit)
