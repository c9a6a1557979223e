"""
Catalog stores: the authoritative name -> entity mapping.

Both implementations keep ingredients and recipes in separate keyspaces and
refuse to overwrite an existing name in either of them. They do no locking of
their own; CookbookService serializes access.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from sqlalchemy import Engine

from cookbook.errors import DuplicateNameError
from cookbook.schemas.entry import Ingredient, Recipe, RequiredItem
from cookbook.storage.db import get_session
from cookbook.storage.repositories import (
    count_entries,
    create_ingredient_record,
    create_recipe_record,
    get_ingredient_record,
    get_recipe_record,
    get_required_item_records,
)


class CatalogStore(ABC):
    backend: str = "abstract"

    @abstractmethod
    def get_ingredient(self, name: str) -> Optional[Ingredient]:
        pass

    @abstractmethod
    def get_recipe(self, name: str) -> Optional[Recipe]:
        pass

    @abstractmethod
    def put_ingredient(self, ingredient: Ingredient) -> None:
        pass

    @abstractmethod
    def put_recipe(self, recipe: Recipe) -> None:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def has(self, name: str) -> bool:
        return self.get_ingredient(name) is not None or self.get_recipe(name) is not None


# ------------------------------------------------------------------
class InMemoryCatalogStore(CatalogStore):
    backend = "memory"

    def __init__(self) -> None:
        self._ingredients: Dict[str, Ingredient] = {}
        self._recipes: Dict[str, Recipe] = {}

    def has(self, name: str) -> bool:
        return name in self._ingredients or name in self._recipes

    def get_ingredient(self, name: str) -> Optional[Ingredient]:
        return self._ingredients.get(name)

    def get_recipe(self, name: str) -> Optional[Recipe]:
        return self._recipes.get(name)

    def put_ingredient(self, ingredient: Ingredient) -> None:
        if self.has(ingredient.name):
            raise DuplicateNameError(ingredient.name)
        self._ingredients[ingredient.name] = ingredient

    def put_recipe(self, recipe: Recipe) -> None:
        if self.has(recipe.name):
            raise DuplicateNameError(recipe.name)
        self._recipes[recipe.name] = recipe

    def __len__(self) -> int:
        return len(self._ingredients) + len(self._recipes)


# ------------------------------------------------------------------
class SqlCatalogStore(CatalogStore):
    """SQLModel-backed store. One short-lived session per call."""

    backend = "sql"

    def __init__(self, engine: Engine):
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_ingredient(self, name: str) -> Optional[Ingredient]:
        with get_session(self._engine) as session:
            record = get_ingredient_record(session, name)
            if record is None:
                return None
            return Ingredient(name=record.name, cook_time=record.cook_time)

    def get_recipe(self, name: str) -> Optional[Recipe]:
        with get_session(self._engine) as session:
            record = get_recipe_record(session, name)
            if record is None:
                return None
            items = get_required_item_records(session, name)
            return Recipe(
                name=record.name,
                required_items=tuple(RequiredItem(name=i.name, quantity=i.quantity) for i in items),
            )

    def put_ingredient(self, ingredient: Ingredient) -> None:
        if self.has(ingredient.name):
            raise DuplicateNameError(ingredient.name)
        with get_session(self._engine) as session:
            create_ingredient_record(session, ingredient.name, ingredient.cook_time)

    def put_recipe(self, recipe: Recipe) -> None:
        if self.has(recipe.name):
            raise DuplicateNameError(recipe.name)
        with get_session(self._engine) as session:
            create_recipe_record(
                session,
                recipe.name,
                [(item.name, item.quantity) for item in recipe.required_items],
            )

    def __len__(self) -> int:
        with get_session(self._engine) as session:
            return count_entries(session)
