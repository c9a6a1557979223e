"""
Recursive expansion of a recipe into the base ingredients it needs.

A required item is looked up as an ingredient first, then as a recipe. Nested
recipes are expanded and their quantities scaled by the quantity at which the
nested recipe was required; contributions to the same ingredient from
different paths are summed. Any unknown name anywhere in the tree fails the
whole resolution; no partial table is ever returned.
"""

from collections import defaultdict
from typing import Optional

from cookbook.errors import CyclicReferenceError, UnresolvableItemError
from cookbook.schemas.entry import Recipe
from cookbook.storage.catalog import CatalogStore


def resolve_ingredients(
    recipe: Recipe, store: CatalogStore, *, detect_cycles: bool = False
) -> dict[str, float]:
    """
    Return ingredient name -> total quantity for one unit of `recipe`.
    Raises UnresolvableItemError, or CyclicReferenceError when detect_cycles is set.
    Without detect_cycles a self-referencing recipe ends in RecursionError.
    """
    active: Optional[set[str]] = set() if detect_cycles else None
    return _expand(recipe, store, active)


def _expand(recipe: Recipe, store: CatalogStore, active: Optional[set[str]]) -> dict[str, float]:
    if active is not None:
        if recipe.name in active:
            raise CyclicReferenceError(recipe.name)
        active.add(recipe.name)

    table: dict[str, float] = defaultdict(float)
    for item in recipe.required_items:
        if store.get_ingredient(item.name) is not None:
            table[item.name] += item.quantity
            continue

        sub_recipe = store.get_recipe(item.name)
        if sub_recipe is None:
            raise UnresolvableItemError(item.name, recipe.name)

        for inner_name, inner_qty in _expand(sub_recipe, store, active).items():
            table[inner_name] += inner_qty * item.quantity

    if active is not None:
        # Diamonds (the same sub-recipe reached twice) are not cycles.
        active.discard(recipe.name)
    return dict(table)
