"""Catalog core: resolution, summaries, and entry registration."""

from cookbook.services.cookbook import CookbookService
from cookbook.services.registrar import register_entry
from cookbook.services.resolver import resolve_ingredients
from cookbook.services.summary import build_summary, summarize_recipe

__all__ = [
    "CookbookService",
    "build_summary",
    "register_entry",
    "resolve_ingredients",
    "summarize_recipe",
]
