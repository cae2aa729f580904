from datetime import datetime
from typing import Any, Dict, Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

ContentType = Literal["idea", "validation", "promotion"]
CONTENT_TYPE_VALUES = ("idea", "validation", "promotion")


class GeneratedContentCreate(BaseModel):
    session_id: str
    type: ContentType
    niche: str
    country: str
    language: str = "en"
    content: Dict[str, Any]  # wraps the normalized result

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class GeneratedContentRecord(GeneratedContentCreate):
    id: int
    created_at: datetime

    def to_response(self):
        return self.model_dump(mode="json", by_alias=True)

    def to_document(self):
        """Snake-case document as persisted in MongoDB."""
        return self.model_dump()
