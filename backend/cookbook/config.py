from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "cookbook"
    env: str = "local"
    log_level: str = "INFO"

    # "memory" keeps the catalog in process; "sql" persists it through SQLModel.
    catalog_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./cookbook.db"

    # Off by default: a recipe that requires itself recurses until RecursionError.
    # Set DETECT_CYCLES=true to reject such recipes with a CyclicReferenceError instead.
    detect_cycles: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
