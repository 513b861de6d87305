from fastapi import APIRouter

from .. import schemas
from ..services.shopping_aggregation import aggregate_ingredients

router = APIRouter()


@router.post("/aggregate", response_model=schemas.GroceryAggregateResponse)
def aggregate_grocery_list(request: schemas.GroceryAggregateRequest):
    """Consolidate the ingredients of the selected recipes into one list."""
    items = aggregate_ingredients(request.recipes)
    return schemas.GroceryAggregateResponse(items=items)
