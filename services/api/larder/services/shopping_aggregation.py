"""Shopping list aggregation across selected recipes."""

import logging

from ..schemas import GroceryLine, RecipeSelection
from .unit_conversion import convert_normalized, normalize_unit

logger = logging.getLogger("larder.grocery")


def aggregate_ingredients(recipes: list[RecipeSelection]) -> list[GroceryLine]:
    """
    Consolidate ingredient lines from several recipes.

    Lines are grouped by name (case-insensitive). A line joins the first bucket
    of that name whose unit it converts into; otherwise it starts a new bucket
    in its own normalized unit.
    """
    aggregated = {}  # name_lower -> list of {name, qty, unit, sources}

    for recipe in recipes:
        for ing in recipe.ingredients:
            key = ing.name.strip().lower()
            qty = ing.qty * recipe.servings
            unit = normalize_unit(ing.unit)
            buckets = aggregated.setdefault(key, [])

            merged = False
            for bucket in buckets:
                # bucket["unit"] is already normalized, compare keys directly
                converted = convert_normalized(qty, unit, bucket["unit"])
                if converted is None:
                    continue
                bucket["qty"] += converted
                if recipe.title not in bucket["sources"]:
                    bucket["sources"].append(recipe.title)
                merged = True
                break

            if not merged:
                if buckets:
                    logger.info(
                        f"Keeping '{ing.name}' in {ing.unit!r} separate: "
                        f"no conversion to {[b['unit'] for b in buckets]}"
                    )
                buckets.append({
                    "name": ing.name.strip(),
                    "qty": qty,
                    "unit": unit,
                    "sources": [recipe.title],
                })

    items = [
        GroceryLine(
            name=bucket["name"],
            qty=round(bucket["qty"], 2),
            unit=bucket["unit"],
            sources=bucket["sources"],
        )
        for buckets in aggregated.values()
        for bucket in buckets
    ]
    items.sort(key=lambda x: (x.name.lower(), x.unit))
    return items
