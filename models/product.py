from typing import List

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_response(self):
        return self.model_dump(mode="json", by_alias=True)


class ProductIdea(CamelModel):
    title: str = ""
    description: str = ""
    target_audience: str = ""
    price_range: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list)


class IdeaValidation(CamelModel):
    market_potential: int = Field(default=5, ge=1, le=10)
    competition_level: int = Field(default=5, ge=1, le=10)
    feasibility_score: int = Field(default=5, ge=1, le=10)
    strengths: List[str] = Field(default_factory=list)
    challenges: List[str] = Field(default_factory=list)
    recommendation: str = ""


class EmailCampaign(CamelModel):
    subject: str = ""
    content: str = ""


class AffiliateResources(CamelModel):
    commission_rate: str = "30%"
    cookie_duration: str = "60 days"
    average_order_value: str = "$87"
    sales_copy: str = ""


class PromotionKit(CamelModel):
    email_campaign: EmailCampaign = Field(default_factory=EmailCampaign)
    social_media_posts: List[str] = Field(default_factory=list)
    affiliate_resources: AffiliateResources = Field(default_factory=AffiliateResources)
