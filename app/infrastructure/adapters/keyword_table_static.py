from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple, Union

from app.application.interfaces import IKeywordTable
from app.core.exceptions import ConfigurationError, NotFoundError

logger = logging.getLogger(__name__)

IMAGE_PATH_PREFIX = "/images/"

# keyword -> local image paths; every path starts with /images/
LOCAL_IMAGES: Dict[str, List[str]] = {
    "river": [
        "/images/river/river01.jpg",
        "/images/river/river02.jpg",
        "/images/river/river03.jpg",
        "/images/river/river04.jpg",
    ],
    "mountain": ["/images/mountain/mountain01.jpg"],
    "moon": ["/images/moon/moon01.jpg"],
    "wanpi": [
        "/images/wanpi/wanpi01.jpg",
        "/images/wanpi/wanpi02.jpg",
    ],
    "plane": ["/images/plane/plane01.jpg"],
    "tete": [
        "/images/tete/tete01.jpg",
        "/images/tete/tete02.jpg",
    ],
}


class StaticKeywordTable(IKeywordTable):
    """Immutable keyword table built once from a literal definition.

    Entries are validated on construction and frozen into a read-only mapping
    of tuples, so one instance can be shared by every request.
    """

    def __init__(self, entries: Mapping[str, Sequence[str]] = LOCAL_IMAGES) -> None:
        frozen: Dict[str, Tuple[str, ...]] = {}
        for keyword, paths in entries.items():
            frozen[keyword] = _validate_entry(keyword, paths)
        self._entries = MappingProxyType(frozen)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "StaticKeywordTable":
        """Load a table from a JSON object of ``{"keyword": ["/images/..."]}``."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read keyword table {path}: {e}", "keyword_table_path"
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Keyword table {path} must be a JSON object", "keyword_table_path"
            )
        table = cls(data)
        logger.info("Loaded %d keywords from %s", len(table), path)
        return table

    def contains(self, keyword: str) -> bool:
        return keyword in self._entries

    def lookup(self, keyword: str) -> Tuple[str, ...]:
        try:
            return self._entries[keyword]
        except KeyError:
            raise NotFoundError(keyword) from None

    def keywords(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _validate_entry(keyword: object, paths: object) -> Tuple[str, ...]:
    if not isinstance(keyword, str) or not keyword or keyword != keyword.lower():
        raise ConfigurationError(
            f"Keyword table keys must be non-empty lowercase strings, got {keyword!r}"
        )
    if isinstance(paths, str) or not isinstance(paths, Sequence) or not paths:
        raise ConfigurationError(
            f"Keyword {keyword!r} must map to a non-empty list of image paths"
        )
    for p in paths:
        if not isinstance(p, str) or not p.startswith(IMAGE_PATH_PREFIX):
            raise ConfigurationError(
                f"Image path for {keyword!r} must start with {IMAGE_PATH_PREFIX}: {p!r}"
            )
    return tuple(paths)
