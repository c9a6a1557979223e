from sqlalchemy import func
from sqlmodel import Session, select

from cookbook.logging import get_logger
from cookbook.storage.models import IngredientRecord, RecipeRecord, RequiredItemRecord

logger = get_logger(__name__)


def get_ingredient_record(session: Session, name: str) -> IngredientRecord | None:
    return session.get(IngredientRecord, name)


def get_recipe_record(session: Session, name: str) -> RecipeRecord | None:
    return session.get(RecipeRecord, name)


def get_required_item_records(session: Session, recipe_name: str) -> list[RequiredItemRecord]:
    return list(
        session.exec(
            select(RequiredItemRecord)
            .where(RequiredItemRecord.recipe_name == recipe_name)
            .order_by(RequiredItemRecord.position)
        )
    )


def create_ingredient_record(session: Session, name: str, cook_time: float) -> IngredientRecord:
    record = IngredientRecord(name=name, cook_time=cook_time)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info("ingredient.created name=%s cook_time=%s", record.name, record.cook_time)
    return record


def create_recipe_record(
    session: Session, name: str, required_items: list[tuple[str, float]]
) -> RecipeRecord:
    """Insert the recipe row and its required items in one commit."""
    record = RecipeRecord(name=name)
    session.add(record)
    session.add_all(
        RequiredItemRecord(recipe_name=name, position=i, name=item_name, quantity=quantity)
        for i, (item_name, quantity) in enumerate(required_items)
    )
    session.commit()
    session.refresh(record)
    logger.info("recipe.created name=%s required_items=%s", record.name, len(required_items))
    return record


def count_entries(session: Session) -> int:
    ingredients = session.exec(select(func.count()).select_from(IngredientRecord)).one()
    recipes = session.exec(select(func.count()).select_from(RecipeRecord)).one()
    return ingredients + recipes
