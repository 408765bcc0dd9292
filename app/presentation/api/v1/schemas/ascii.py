from typing import List

from pydantic import BaseModel


class KeywordListResponse(BaseModel):
    keywords: List[str]
