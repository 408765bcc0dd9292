from __future__ import annotations

import logging
import random
from typing import Callable, Mapping, Optional

from app.application.interfaces import IResolverAdapters
from app.core.config import settings
from app.core.pyd_schemas import ResolutionResult

logger = logging.getLogger(__name__)


class ResolveImageUseCase:
    """Turn a keyword and display options into a ResolutionResult.

    Keywords found in the local keyword table resolve to one of their images
    without touching the network. Anything else is sent to the image search
    adapter; its errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        adapters: IResolverAdapters,
        *,
        random_source: Callable[[], float] = random.random,
        default_chars: Optional[str] = None,
    ) -> None:
        self._adapters = adapters
        self._random = random_source
        self._default_chars = default_chars

    async def resolve(
        self, raw_keyword: str, query_params: Optional[Mapping[str, str]] = None
    ) -> ResolutionResult:
        keyword = raw_keyword.lower()
        chars = (query_params or {}).get("chars") or (
            self._default_chars or settings.default_display_chars
        )

        table = self._adapters.keyword_table
        if table.contains(keyword):
            images = table.lookup(keyword)
            image = images[self._pick_index(len(images))]
            logger.debug("Local hit for %r -> %s", keyword, image)
            return ResolutionResult(
                image=image,
                alt=f"{keyword} (local)",
                matched_keyword=keyword,
                display_chars=chars,
            )

        logger.debug("Local miss for %r; querying image search", keyword)
        photo = await self._adapters.image_search.random_photo(keyword)
        return ResolutionResult(
            image=photo.url,
            alt=photo.description if photo.description is not None else keyword,
            matched_keyword=keyword,
            display_chars=chars,
        )

    def _pick_index(self, length: int) -> int:
        # floor(random() * n), clamped in case the source returns 1.0
        return min(int(self._random() * length), length - 1)
