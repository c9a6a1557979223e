from cookbook.errors import DuplicateNameError, DuplicateRequiredItemError
from cookbook.logging import get_logger
from cookbook.schemas.entry import Ingredient, Recipe
from cookbook.storage.catalog import CatalogStore

logger = get_logger(__name__)


def _first_duplicate_item(recipe: Recipe) -> str | None:
    seen: set[str] = set()
    for item in recipe.required_items:
        if item.name in seen:
            return item.name
        seen.add(item.name)
    return None


def register_entry(entry: Ingredient | Recipe, store: CatalogStore) -> None:
    """
    Validate an entry against the catalog and commit it.
    All checks run before the store is touched, so a rejected entry leaves it unchanged.
    """
    if store.has(entry.name):
        raise DuplicateNameError(entry.name)

    if entry.type == "recipe":
        duplicate = _first_duplicate_item(entry)
        if duplicate is not None:
            raise DuplicateRequiredItemError(entry.name, duplicate)
        store.put_recipe(entry)
    elif entry.type == "ingredient":
        store.put_ingredient(entry)
    else:
        raise ValueError(f"Unknown entry type: {entry.type}")

    logger.info("entry.registered type=%s name=%s", entry.type, entry.name)
