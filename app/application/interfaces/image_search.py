from __future__ import annotations

from typing import Protocol

from app.core.pyd_schemas import PhotoResult


class IImageSearch(Protocol):
    """Adapter for picking a photo that matches a keyword.

    Implementations may call Unsplash, Pixabay, etc. The application layer should
    not know about concrete providers.
    """

    async def random_photo(self, query: str) -> PhotoResult:
        """Return one photo matching `query`.

        Raises NetworkError when the provider is unreachable and
        UpstreamResponseError when its answer is unusable.
        """
        ...
