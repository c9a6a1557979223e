from fastapi import APIRouter, Depends

from cookbook.api.deps import get_cookbook
from cookbook.schemas.api import HealthResponse
from cookbook.services.cookbook import CookbookService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(cookbook: CookbookService = Depends(get_cookbook)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        catalog_backend=cookbook.store.backend,
        entries=cookbook.entry_count(),
    )
