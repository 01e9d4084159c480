# tagcontent/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from tagcontent.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "tagcontent"
    user: str = "tagcontent"
    password: str = "tagcontent"
    schema_name: str = Field(default="tagcontent", alias="DB_SCHEMA")
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"

    @computed_field  # type: ignore[misc]
    @property
    def is_sqlite(self) -> bool:
        return self.effective_url.startswith("sqlite")


class ResolutionConfig(BaseModel):
    default_language: str = "en"
    primary_image_tag: str = "hero_image"
    default_size: str = "large"
    video_host_patterns: List[str] = Field(
        default_factory=lambda: ["youtube.com", "youtu.be", "vimeo.com", "wistia.com"]
    )
    cache_ttl_sec: int = Field(300, ge=0, description="0 disables the resolution cache")
    cache_max_entries: int = Field(1000, ge=1)

    @field_validator("video_host_patterns", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return [p.lower() for p in csv_to_list(v)]

    @field_validator("default_language", mode="before")
    @classmethod
    def _lower(cls, v):
        return (str(v or "en").strip().lower() or "en")


class PlatformConfig(BaseModel):
    api_base: str = "https://app.ecwid.com/api/v3"
    store_id: str = ""
    token: str = ""
    timeout_sec: float = 10.0


class TranslationConfig(BaseModel):
    enabled: bool = True
    namespace: str = "Ecwid Shopping Cart"

    @field_validator("enabled", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "tagcontent"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    resolution: ResolutionConfig = ResolutionConfig()
    platform: PlatformConfig = PlatformConfig()
    translation: TranslationConfig = TranslationConfig()

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> Optional[str]:
        # SQLite has no schemas; "public" is the Postgres default anyway.
        if self.db.is_sqlite or not self.db.schema_name or self.db.schema_name.lower() == "public":
            return None
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from tagcontent.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
