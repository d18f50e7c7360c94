from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_ALLOWED_ORIGINS = ",".join(
    [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]
)


@dataclass(frozen=True)
class BaseSettings:
    region: str
    allowed_origin: str


@dataclass(frozen=True)
class NewsSettings(BaseSettings):
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    table_name: str
    replace_function: str
    admin_token: Optional[str]


@dataclass(frozen=True)
class HealthSettings(BaseSettings):
    service_name: str = "newsroom"


@dataclass(frozen=True)
class RouterSettings(BaseSettings):
    api_prefix: str
    assets_bucket: Optional[str]
    assets_prefix: str
    index_document: str


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is not None:
        return value
    return default


def _get_secret(name: str) -> Optional[str]:
    value = (_get_env(name) or "").strip()
    return value or None


# Settings are rebuilt on every call so each request sees the current environment.
def get_news_settings() -> NewsSettings:
    return NewsSettings(
        region=_get_env("AWS_REGION", "us-west-1"),
        allowed_origin=_get_env("ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGINS),
        supabase_url=_get_secret("SUPABASE_URL"),
        supabase_key=_get_secret("SUPABASE_SERVICE_ROLE_KEY"),
        table_name=_get_env("SUPABASE_TABLE") or "news_posts",
        replace_function=_get_env("SUPABASE_REPLACE_FN") or "replace_news_posts",
        admin_token=_get_secret("ADMIN_TOKEN"),
    )


def get_health_settings() -> HealthSettings:
    return HealthSettings(
        region=_get_env("AWS_REGION", "us-west-1"),
        allowed_origin=_get_env("ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGINS),
        service_name=_get_env("SERVICE_NAME", "newsroom"),
    )


def get_router_settings() -> RouterSettings:
    return RouterSettings(
        region=_get_env("AWS_REGION", "us-west-1"),
        allowed_origin=_get_env("ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGINS),
        api_prefix=_get_env("API_PREFIX", "/api/"),
        assets_bucket=_get_secret("ASSETS_BUCKET"),
        assets_prefix=_get_env("ASSETS_PREFIX", ""),
        index_document=_get_env("INDEX_DOCUMENT", "index.html"),
    )
