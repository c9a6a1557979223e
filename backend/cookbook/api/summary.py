from fastapi import APIRouter, Depends, HTTPException, Query

from cookbook.api.deps import get_cookbook
from cookbook.errors import CookbookError
from cookbook.logging import get_logger
from cookbook.schemas.summary import Summary
from cookbook.services.cookbook import CookbookService

router = APIRouter()
logger = get_logger(__name__)


@router.get("/summary", response_model=Summary)
def get_summary(
    name: str | None = Query(default=None),
    cookbook: CookbookService = Depends(get_cookbook),
) -> Summary:
    """Total cook time and flattened base ingredients for the recipe called `name`."""
    if name is None:
        raise HTTPException(status_code=400, detail="Query parameter 'name' must be a string!")
    try:
        return cookbook.summarize(name)
    except CookbookError as e:
        logger.warning("summary.failed name=%s reason=%s", name, type(e).__name__)
        raise HTTPException(status_code=400, detail=e.detail)
