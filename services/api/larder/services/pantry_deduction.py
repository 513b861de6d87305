"""
Pantry deduction for cooked recipes.

Recipe ingredients are matched to pantry items by name and converted into the
pantry item's unit before being subtracted. Ingredients whose unit cannot be
converted are reported and left alone.
"""

import logging
from typing import Optional

from ..schemas import IngredientLine, PantryImpactItem, PantryItem
from .unit_conversion import convert_quantity

logger = logging.getLogger("larder.pantry")


def _name_key(name: str) -> str:
    return name.strip().lower()


def _find_pantry_index(pantry: list[PantryItem], name: str) -> Optional[int]:
    key = _name_key(name)
    for idx, item in enumerate(pantry):
        if _name_key(item.name) == key:
            return idx
    return None


def _impact_for(pantry: list[PantryItem], ing: IngredientLine, scale: float) -> tuple[Optional[int], PantryImpactItem]:
    qty_needed = ing.qty * scale
    idx = _find_pantry_index(pantry, ing.name)

    if idx is None:
        return None, PantryImpactItem(
            ingredient_name=ing.name,
            qty_needed=qty_needed,
            unit=ing.unit,
            status="not_in_pantry",
        )

    p_item = pantry[idx]
    converted = convert_quantity(qty_needed, ing.unit, p_item.unit)
    item = PantryImpactItem(
        ingredient_name=ing.name,
        qty_needed=qty_needed,
        unit=ing.unit,
        status="ok" if converted is not None else "unit_mismatch",
        pantry_item_name=p_item.name,
        pantry_unit=p_item.unit,
        qty_available=p_item.qty,
    )
    if converted is not None:
        item.deduct_qty = converted
        item.remaining_qty = max(0.0, p_item.qty - converted)
    return idx, item


def preview_impact(
    pantry: list[PantryItem],
    ingredients: list[IngredientLine],
    scale: float = 1.0,
) -> list[PantryImpactItem]:
    """What cooking these ingredients would take out of the pantry."""
    return [_impact_for(pantry, ing, scale)[1] for ing in ingredients]


def apply_deduction(
    pantry: list[PantryItem],
    ingredients: list[IngredientLine],
    scale: float = 1.0,
    undo: bool = False,
) -> tuple[list[PantryItem], list[PantryImpactItem]]:
    """
    Return a new pantry with the ingredients deducted (or restored if undo).

    Quantities never drop below zero. The input list is not mutated.
    Returns (new_pantry, skipped) where skipped holds every ingredient that
    was not applied.
    """
    updated = [p.model_copy() for p in pantry]
    skipped = []

    for ing in ingredients:
        idx, impact = _impact_for(updated, ing, scale)

        if impact.status == "unit_mismatch":
            logger.warning(
                f"Unit mismatch for {ing.name}: cannot convert {ing.unit!r} to "
                f"{impact.pantry_unit!r}, skipping deduction"
            )
            skipped.append(impact)
            continue
        if idx is None:
            skipped.append(impact)
            continue

        p_item = updated[idx]
        if undo:
            p_item.qty = p_item.qty + impact.deduct_qty
        else:
            p_item.qty = max(0.0, p_item.qty - impact.deduct_qty)

    return updated, skipped
