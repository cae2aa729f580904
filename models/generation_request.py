from enum import Enum
from typing import ClassVar, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

Language = Literal["en", "pt"]


class OperationKind(str, Enum):
    GENERATE_IDEAS = "generate_ideas"
    VALIDATE_IDEA = "validate_idea"
    GENERATE_PROMOTION_KIT = "generate_promotion_kit"

    @property
    def content_type(self) -> str:
        return CONTENT_TYPES[self]


CONTENT_TYPES = {
    OperationKind.GENERATE_IDEAS: "idea",
    OperationKind.VALIDATE_IDEA: "validation",
    OperationKind.GENERATE_PROMOTION_KIT: "promotion",
}


class GenerationRequest(BaseModel):
    operation_kind: OperationKind
    niche: str
    idea_text: Optional[str] = None
    country: Optional[str] = None
    display_language: Language = "en"


class GenerateIdeasRequest(BaseModel):
    """Body of POST /api/generate-ideas."""

    niche: str = Field(min_length=1)
    language: Language = "en"
    country: Optional[str] = None
    session_id: Optional[str] = None

    operation_kind: ClassVar[OperationKind] = OperationKind.GENERATE_IDEAS

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        str_strip_whitespace = True

    def idea_text(self) -> Optional[str]:
        return None

    def to_generation_request(self) -> GenerationRequest:
        return GenerationRequest(
            operation_kind=self.operation_kind,
            niche=self.niche,
            idea_text=self.idea_text(),
            country=self.country or None,
            display_language=self.language,
        )


class IdeaRequest(GenerateIdeasRequest):
    """A body that carries the idea text being validated or promoted."""

    idea: str = Field(min_length=1)

    def idea_text(self) -> Optional[str]:
        return self.idea


class ValidateIdeaRequest(IdeaRequest):
    """Body of POST /api/validate-idea."""

    operation_kind: ClassVar[OperationKind] = OperationKind.VALIDATE_IDEA


class PromotionKitRequest(IdeaRequest):
    """Body of POST /api/generate-promotion-kit."""

    operation_kind: ClassVar[OperationKind] = OperationKind.GENERATE_PROMOTION_KIT
