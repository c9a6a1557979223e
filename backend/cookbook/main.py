from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cookbook.api.routes import router as api_router
from cookbook.config import settings
from cookbook.logging import configure_logging, get_logger
from cookbook.services.cookbook import CookbookService
from cookbook.storage.catalog import CatalogStore, InMemoryCatalogStore, SqlCatalogStore
from cookbook.storage.db import build_engine, create_db_and_tables

logger = get_logger(__name__)


def build_store() -> CatalogStore:
    if settings.catalog_backend == "sql":
        engine = build_engine(settings.database_url)
        return SqlCatalogStore(engine)
    return InMemoryCatalogStore()


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed requests are client errors like any other rejected entry.
    return JSONResponse(
        status_code=400,
        content={"detail": f"Improperly formatted payload: {exc.errors()}"},
    )


def create_app(cookbook: CookbookService | None = None) -> FastAPI:
    app = FastAPI(title="Cookbook API")
    app.state.cookbook = CookbookService(build_store()) if cookbook is None else cookbook

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    @app.on_event("startup")
    def on_startup() -> None:
        configure_logging()
        store = app.state.cookbook.store
        if isinstance(store, SqlCatalogStore):
            create_db_and_tables(store.engine)
        logger.info(
            "startup: catalog backend=%s detect_cycles=%s",
            app.state.cookbook.store.backend,
            app.state.cookbook.detect_cycles,
        )

    app.include_router(api_router)
    return app


app = create_app()
