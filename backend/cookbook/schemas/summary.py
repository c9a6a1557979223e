from pydantic import BaseModel, ConfigDict, Field


class SummaryIngredient(BaseModel):
    name: str
    quantity: float


class Summary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    cook_time: float = Field(alias="cookTime")
    ingredients: list[SummaryIngredient] = []
