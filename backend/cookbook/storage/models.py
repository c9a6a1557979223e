from typing import Optional

from sqlmodel import Field, SQLModel


class IngredientRecord(SQLModel, table=True):
    __tablename__ = "ingredient"

    name: str = Field(primary_key=True)
    cook_time: float


class RecipeRecord(SQLModel, table=True):
    __tablename__ = "recipe"

    name: str = Field(primary_key=True)


class RequiredItemRecord(SQLModel, table=True):
    __tablename__ = "requireditem"

    id: Optional[int] = Field(default=None, primary_key=True)
    recipe_name: str = Field(foreign_key="recipe.name", index=True)
    position: int  # declared order within the recipe
    name: str
    quantity: float
