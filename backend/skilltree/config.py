import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    medal_catalog_path: Optional[str] = Field(None, alias="SKILLTREE_MEDAL_CATALOG")
    default_layout_id: str = Field("timeline", alias="SKILLTREE_DEFAULT_LAYOUT")
    debug_endpoints: bool = Field(False, alias="SKILLTREE_DEBUG_ENDPOINTS")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[arg-type]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid backend configuration: {exc}") from exc
