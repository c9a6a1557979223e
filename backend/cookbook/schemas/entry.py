from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RequiredItem(_Frozen):
    name: str
    quantity: float = Field(ge=0, strict=True)


class Ingredient(_Frozen):
    type: Literal["ingredient"] = "ingredient"
    name: str
    cook_time: float = Field(alias="cookTime", ge=0, strict=True)


class Recipe(_Frozen):
    type: Literal["recipe"] = "recipe"
    name: str
    required_items: tuple[RequiredItem, ...] = Field(alias="requiredItems")


# Tagged on `type`; anything else is rejected before it reaches the registrar.
CookbookEntry = Annotated[Union[Recipe, Ingredient], Field(discriminator="type")]

_entry_adapter: TypeAdapter[Recipe | Ingredient] = TypeAdapter(CookbookEntry)


def parse_entry(data: Any) -> Recipe | Ingredient:
    """Validate a raw mapping into an Ingredient or Recipe. Raises pydantic.ValidationError."""
    return _entry_adapter.validate_python(data)
