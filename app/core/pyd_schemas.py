from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PhotoResult(BaseModel):
    """One photo picked by an image search provider."""

    url: str
    description: Optional[str] = None


class ResolutionResult(BaseModel):
    """Data handed to the ASCII renderer for one page load.

    Serialized with camelCase keys (``matchedKeyword``, ``displayChars``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    image: str
    alt: str
    matched_keyword: str
    display_chars: str
