"""Pydantic schemas for Larder API.

Request/response models for:
- Unit registry and conversion
- Pantry impact / deduction
- Grocery aggregation
"""

from typing import Optional, Literal

from pydantic import BaseModel, Field


# --- Units ---

class UnitDefinitionOut(BaseModel):
    key: str
    kind: Literal["mass", "volume", "count", "unknown"]
    base_factor: float
    aliases: list[str]


class UnitNormalizeResponse(BaseModel):
    raw: str
    normalized: str
    recognized: bool
    kind: Literal["mass", "volume", "count", "unknown"]


class UnitConvertRequest(BaseModel):
    qty: float = Field(..., allow_inf_nan=False)
    from_unit: str
    to_unit: str


class UnitConvertResponse(BaseModel):
    qty: float
    from_unit: str  # normalized
    to_unit: str  # normalized
    converted: Optional[float] = None
    ok: bool
    reason: Optional[Literal["unknown_unit", "incompatible"]] = None


# --- Pantry ---

class PantryItem(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    qty: float = Field(0.0, ge=0, allow_inf_nan=False)
    unit: Optional[str] = None


class IngredientLine(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    qty: float = Field(0.0, ge=0, allow_inf_nan=False)
    unit: Optional[str] = None


class PantryImpactRequest(BaseModel):
    pantry: list[PantryItem] = []
    ingredients: list[IngredientLine] = []
    scale: float = Field(1.0, gt=0, allow_inf_nan=False)


class PantryDeductRequest(PantryImpactRequest):
    undo: bool = False


class PantryImpactItem(BaseModel):
    ingredient_name: str
    qty_needed: float
    unit: Optional[str]
    status: Literal["ok", "unit_mismatch", "not_in_pantry"]
    pantry_item_name: Optional[str] = None
    pantry_unit: Optional[str] = None
    qty_available: Optional[float] = None
    deduct_qty: Optional[float] = None  # in pantry unit
    remaining_qty: Optional[float] = None


class PantryDeductResponse(BaseModel):
    pantry: list[PantryItem]
    skipped: list[PantryImpactItem] = []


# --- Grocery ---

class RecipeSelection(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    servings: float = Field(1.0, gt=0, allow_inf_nan=False)  # multiplier
    ingredients: list[IngredientLine] = []


class GroceryAggregateRequest(BaseModel):
    recipes: list[RecipeSelection] = []


class GroceryLine(BaseModel):
    name: str
    qty: float
    unit: str
    sources: list[str] = []


class GroceryAggregateResponse(BaseModel):
    items: list[GroceryLine]
