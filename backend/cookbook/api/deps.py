from fastapi import Request

from cookbook.services.cookbook import CookbookService


def get_cookbook(request: Request) -> CookbookService:
    """The service built by create_app(); there is no module-level catalog."""
    return request.app.state.cookbook
