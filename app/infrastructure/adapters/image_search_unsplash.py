from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp
from pydantic import BaseModel, ValidationError, field_validator

from app.application.interfaces import IImageSearch
from app.core.config import settings
from app.core.exceptions import NetworkError, UpstreamResponseError
from app.core.pyd_schemas import PhotoResult

logger = logging.getLogger(__name__)


class UnsplashUrls(BaseModel):
    regular: str


class UnsplashPhoto(BaseModel):
    """The part of a /photos/random payload we rely on; the rest is ignored."""

    urls: UnsplashUrls
    alt_description: Optional[str] = None

    @field_validator("alt_description", mode="before")
    @classmethod
    def non_string_alt_is_missing(cls, v):
        # Only urls.regular is required; a malformed alt text falls back like an absent one
        return v if isinstance(v, str) else None


class UnsplashImageSearch(IImageSearch):
    """IImageSearch implementation using the Unsplash random-photo API.

    One GET per call, no retries. The API key is read from settings on every
    call unless one is passed explicitly.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._api_key = api_key
        self.api_url = api_url or settings.unsplash_api_url
        self.timeout = timeout if timeout is not None else settings.unsplash_timeout

    async def random_photo(self, query: str) -> PhotoResult:
        api_key = self._api_key if self._api_key is not None else settings.unsplash_key
        if not api_key:
            logger.warning("UnsplashImageSearch: UNSPLASH_KEY is not set")
        params = {"query": query, "client_id": api_key or ""}

        session_kwargs = {}
        if self.timeout:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.get(self.api_url, params=params) as response:
                    status = response.status
                    if not 200 <= status < 300:
                        logger.error(
                            "Unsplash returned HTTP %d for query %r", status, query
                        )
                        raise UpstreamResponseError(
                            f"Unsplash returned HTTP {status}", status_code=status
                        )
                    try:
                        payload = await response.json(content_type=None)
                    except ValueError as e:
                        raise UpstreamResponseError(
                            f"Unsplash returned a non-JSON body: {e}",
                            status_code=status,
                        ) from e
        except aiohttp.ClientError as e:
            logger.error("Failed to reach Unsplash for query %r: %s", query, e)
            raise NetworkError(
                f"Failed to reach Unsplash: {e}", url=self.api_url
            ) from e
        except asyncio.TimeoutError as e:
            logger.error("Unsplash request timed out for query %r", query)
            raise NetworkError("Unsplash request timed out", url=self.api_url) from e

        try:
            photo = UnsplashPhoto.model_validate(payload)
        except ValidationError as e:
            logger.error("Unexpected Unsplash payload for query %r: %s", query, e)
            raise UpstreamResponseError(
                "Unsplash response lacks urls.regular", status_code=status
            ) from e

        return PhotoResult(url=photo.urls.regular, description=photo.alt_description)
