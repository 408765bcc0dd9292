from .image_search import IImageSearch
from .keyword_table import IKeywordTable
from .resolver_adapters import IResolverAdapters

__all__ = [
    "IImageSearch",
    "IKeywordTable",
    "IResolverAdapters",
]
