from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from cookbook.api.deps import get_cookbook
from cookbook.errors import CookbookError
from cookbook.logging import get_logger
from cookbook.schemas.entry import parse_entry
from cookbook.services.cookbook import CookbookService

router = APIRouter()
logger = get_logger(__name__)


@router.post("/entry")
def create_entry(
    payload: dict[str, Any] = Body(...),
    cookbook: CookbookService = Depends(get_cookbook),
) -> dict:
    """
    Add an ingredient or a recipe to the cookbook.
    Expects: { "type": "ingredient", "name", "cookTime" }
          or { "type": "recipe", "name", "requiredItems": [ { "name", "quantity" } ] }
    """
    try:
        entry = parse_entry(payload)
    except ValidationError as e:
        logger.warning("entry.malformed errors=%s", e.error_count())
        raise HTTPException(status_code=400, detail=f"Improperly formatted payload: {e}")

    try:
        cookbook.register(entry)
    except CookbookError as e:
        logger.warning("entry.rejected name=%s reason=%s", entry.name, type(e).__name__)
        raise HTTPException(status_code=400, detail=e.detail)
    return {}
