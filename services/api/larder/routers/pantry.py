from fastapi import APIRouter

from .. import schemas
from ..services.pantry_deduction import apply_deduction, preview_impact

router = APIRouter()


@router.post("/impact", response_model=list[schemas.PantryImpactItem])
def pantry_impact(request: schemas.PantryImpactRequest):
    """Preview what cooking the given ingredients takes from the pantry."""
    return preview_impact(request.pantry, request.ingredients, request.scale)


@router.post("/deduct", response_model=schemas.PantryDeductResponse)
def pantry_deduct(request: schemas.PantryDeductRequest):
    """Deduct (or with undo=true, restore) ingredients and return the new pantry."""
    pantry, skipped = apply_deduction(
        request.pantry,
        request.ingredients,
        scale=request.scale,
        undo=request.undo,
    )
    return schemas.PantryDeductResponse(pantry=pantry, skipped=skipped)
