from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client

from ..config.settings import NewsSettings
from ..domain.errors import ConfigurationError
from .news_store import SupabaseNewsStore


@lru_cache(maxsize=4)
def get_supabase_client(url: str, key: str) -> Client:
    return create_client(url, key)


def get_news_store(settings: NewsSettings) -> SupabaseNewsStore:
    if not settings.supabase_url or not settings.supabase_key:
        raise ConfigurationError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY in environment")
    client = get_supabase_client(settings.supabase_url, settings.supabase_key)
    return SupabaseNewsStore(client, settings.table_name, settings.replace_function)
