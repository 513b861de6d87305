"""
Router for unit registry lookups and conversion.
"""

from fastapi import APIRouter, HTTPException, Query

from ..schemas import (
    UnitConvertRequest,
    UnitConvertResponse,
    UnitDefinitionOut,
    UnitNormalizeResponse,
)
from ..services.unit_conversion import (
    UNITS_DB,
    convert_normalized,
    definition_of,
    normalize_unit,
    unit_kind,
)

router = APIRouter()


@router.get("/", response_model=list[UnitDefinitionOut])
def list_units():
    """All registered units with their dimension and base factor."""
    return [UnitDefinitionOut(**d.to_dict()) for d in UNITS_DB.values()]


@router.get("/normalize", response_model=UnitNormalizeResponse)
def normalize(unit: str = Query("", max_length=100)):
    normalized = normalize_unit(unit)
    definition = definition_of(normalized)
    return UnitNormalizeResponse(
        raw=unit,
        normalized=normalized,
        recognized=definition is not None,
        kind=unit_kind(unit),
    )


@router.get("/{key}", response_model=UnitDefinitionOut)
def get_unit(key: str):
    definition = definition_of(key)
    if not definition:
        raise HTTPException(status_code=404, detail=f"Unit '{key}' not found")
    return UnitDefinitionOut(**definition.to_dict())


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(req: UnitConvertRequest):
    """
    Convert a quantity from one unit to another.

    A conversion that cannot be done is still a 200: ok=false plus a reason.
    """
    norm_from = normalize_unit(req.from_unit)
    norm_to = normalize_unit(req.to_unit)
    converted = convert_normalized(req.qty, norm_from, norm_to)

    reason = None
    if converted is None:
        if definition_of(norm_from) is None or definition_of(norm_to) is None:
            reason = "unknown_unit"
        else:
            reason = "incompatible"

    return UnitConvertResponse(
        qty=req.qty,
        from_unit=norm_from,
        to_unit=norm_to,
        converted=converted,
        ok=converted is not None,
        reason=reason,
    )
