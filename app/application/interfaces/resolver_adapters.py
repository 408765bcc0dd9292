from __future__ import annotations

from typing import Protocol, runtime_checkable

from .image_search import IImageSearch
from .keyword_table import IKeywordTable


@runtime_checkable
class IResolverAdapters(Protocol):
    keyword_table: IKeywordTable
    image_search: IImageSearch
