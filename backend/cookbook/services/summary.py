from cookbook.errors import NotARecipeError, RecipeNotFoundError
from cookbook.logging import get_logger
from cookbook.schemas.entry import Recipe
from cookbook.schemas.summary import Summary, SummaryIngredient
from cookbook.services.resolver import resolve_ingredients
from cookbook.storage.catalog import CatalogStore

logger = get_logger(__name__)


def build_summary(recipe: Recipe, store: CatalogStore, *, detect_cycles: bool = False) -> Summary:
    """Total cook time and flat ingredient list for `recipe`. Resolution errors propagate."""
    table = resolve_ingredients(recipe, store, detect_cycles=detect_cycles)
    cook_time = 0.0
    ingredients: list[SummaryIngredient] = []
    for name, quantity in table.items():
        # every key in a resolved table is a stored ingredient
        cook_time += store.get_ingredient(name).cook_time * quantity
        ingredients.append(SummaryIngredient(name=name, quantity=quantity))
    logger.info(
        "summary.built recipe=%s ingredients=%s cook_time=%s",
        recipe.name,
        len(ingredients),
        cook_time,
    )
    return Summary(name=recipe.name, cook_time=cook_time, ingredients=ingredients)


def summarize_recipe(name: str, store: CatalogStore, *, detect_cycles: bool = False) -> Summary:
    """Look `name` up as a recipe and summarize it."""
    if store.get_ingredient(name) is not None:
        raise NotARecipeError(name)
    recipe = store.get_recipe(name)
    if recipe is None:
        raise RecipeNotFoundError(name)
    return build_summary(recipe, store, detect_cycles=detect_cycles)
