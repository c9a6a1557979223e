import pytest
from pydantic import ValidationError

from cookbook.schemas.entry import Ingredient, Recipe, parse_entry


def test_parse_ingredient():
    entry = parse_entry({"type": "ingredient", "name": "egg", "cookTime": 5})
    assert isinstance(entry, Ingredient)
    assert entry.cook_time == 5


def test_parse_recipe():
    entry = parse_entry(
        {
            "type": "recipe",
            "name": "batter",
            "requiredItems": [{"name": "egg", "quantity": 2}, {"name": "flour", "quantity": 1}],
        }
    )
    assert isinstance(entry, Recipe)
    assert [i.name for i in entry.required_items] == ["egg", "flour"]


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "ingredient", "name": "egg", "cookTime": -1},
        {"type": "ingredient", "name": "egg"},
        {"type": "recipe", "name": "batter", "requiredItems": [{"name": "egg", "quantity": -2}]},
        {"type": "recipe", "name": "batter"},
        {"type": "sauce", "name": "gravy"},
        {"name": "egg", "cookTime": 5},
        {"type": "ingredient", "cookTime": 5},
        {"type": "ingredient", "name": "egg", "cookTime": "5"},
        {"type": "ingredient", "name": "egg", "cookTime": True},
        {"type": "recipe", "name": "batter", "requiredItems": [{"name": "egg", "quantity": "2"}]},
        {"type": "recipe", "name": "batter", "requiredItems": [{"name": "egg", "quantity": False}]},
    ],
)
def test_parse_rejects_malformed(payload):
    with pytest.raises(ValidationError):
        parse_entry(payload)


def test_entries_are_immutable():
    entry = parse_entry({"type": "ingredient", "name": "egg", "cookTime": 5})
    with pytest.raises(ValidationError):
        entry.cook_time = 10


def test_dump_uses_wire_names():
    entry = Recipe(name="toast", required_items=[{"name": "bread", "quantity": 1}])
    dumped = entry.model_dump(by_alias=True)
    assert dumped["type"] == "recipe"
    assert dumped["requiredItems"][0] == {"name": "bread", "quantity": 1}


def test_integral_numbers_accepted():
    entry = parse_entry({"type": "recipe", "name": "toast", "requiredItems": [{"name": "bread", "quantity": 2}]})
    assert entry.required_items[0].quantity == 2
    assert parse_entry({"type": "ingredient", "name": "bread", "cookTime": 0}).cook_time == 0
