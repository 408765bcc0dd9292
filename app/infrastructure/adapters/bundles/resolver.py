from __future__ import annotations

from functools import lru_cache
from types import SimpleNamespace

from app.application.interfaces import IKeywordTable, IResolverAdapters
from app.infrastructure.adapters import StaticKeywordTable, UnsplashImageSearch
from app.core.config import settings


@lru_cache(maxsize=1)
def get_keyword_table() -> IKeywordTable:
    """Build the process-wide keyword table on first use.

    Loaded from KEYWORD_TABLE_PATH when set, otherwise from the built-in table.
    """
    if settings.keyword_table_path:
        return StaticKeywordTable.from_json_file(settings.keyword_table_path)
    return StaticKeywordTable()


def get_resolver_adapter_bundle() -> IResolverAdapters:
    """Provide the adapters container for the resolver."""
    return SimpleNamespace(
        keyword_table=get_keyword_table(),
        image_search=UnsplashImageSearch(),
    )
