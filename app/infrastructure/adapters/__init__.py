from .image_search_unsplash import UnsplashImageSearch
from .keyword_table_static import StaticKeywordTable

__all__ = [
    "UnsplashImageSearch",
    "StaticKeywordTable",
]
