import pytest

from catalog_factories import ingredient, recipe
from cookbook.errors import (
    CatalogLookupError,
    NotARecipeError,
    RecipeNotFoundError,
    ResolutionError,
    UnresolvableItemError,
)
from cookbook.services.registrar import register_entry
from cookbook.services.summary import build_summary, summarize_recipe


@pytest.fixture(name="bakery")
def bakery_fixture(store):
    register_entry(ingredient("egg", 5), store)
    register_entry(ingredient("flour", 2), store)
    register_entry(recipe("batter", {"egg": 2, "flour": 1}), store)
    return store


def _quantities(summary):
    return {i.name: i.quantity for i in summary.ingredients}


def test_summary_for_flat_recipe(bakery):
    summary = summarize_recipe("batter", bakery)
    assert summary.name == "batter"
    assert summary.cook_time == 12
    assert _quantities(summary) == {"egg": 2, "flour": 1}


def test_summary_for_nested_recipe(bakery):
    register_entry(recipe("cake", {"batter": 3, "egg": 1}), bakery)
    summary = summarize_recipe("cake", bakery)
    assert summary.cook_time == 41
    assert _quantities(summary) == {"egg": 7, "flour": 3}
    assert len(summary.ingredients) == 2


def test_summary_of_ingredient_name_rejected(bakery):
    with pytest.raises(NotARecipeError):
        summarize_recipe("egg", bakery)


def test_summary_of_unknown_name_rejected(bakery):
    with pytest.raises(RecipeNotFoundError) as exc_info:
        summarize_recipe("croissant", bakery)
    assert isinstance(exc_info.value, LookupError)
    assert isinstance(exc_info.value, CatalogLookupError)


def test_summary_with_unregistered_reference_rejected(bakery):
    register_entry(recipe("souffle", {"egg": 4, "gruyere": 1}), bakery)
    with pytest.raises(UnresolvableItemError) as exc_info:
        summarize_recipe("souffle", bakery)
    assert isinstance(exc_info.value, ResolutionError)


def test_build_summary_of_empty_recipe(memory_store):
    register_entry(recipe("nothing", {}), memory_store)
    summary = build_summary(memory_store.get_recipe("nothing"), memory_store)
    assert summary.cook_time == 0
    assert summary.ingredients == []


def test_build_summary_fractional_quantities(memory_store):
    register_entry(ingredient("yeast", 10), memory_store)
    register_entry(ingredient("water", 0), memory_store)
    register_entry(recipe("starter", {"yeast": 0.5, "water": 3}), memory_store)
    register_entry(recipe("loaf", {"starter": 0.5}), memory_store)
    summary = build_summary(memory_store.get_recipe("loaf"), memory_store)
    assert summary.cook_time == 2.5
    assert _quantities(summary) == {"yeast": 0.25, "water": 1.5}


def test_summary_serializes_with_wire_names(bakery):
    payload = summarize_recipe("batter", bakery).model_dump(by_alias=True)
    assert set(payload) == {"name", "cookTime", "ingredients"}
    assert {"name": "egg", "quantity": 2} in payload["ingredients"]
