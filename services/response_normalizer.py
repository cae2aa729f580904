import json
import logging
import math
import re

from models.generation_request import OperationKind
from models.product import AffiliateResources, EmailCampaign, IdeaValidation, ProductIdea, PromotionKit
from utils.errors import InvalidJson, MalformedResponse

logger = logging.getLogger(__name__)

SCORE_MIN = 1
SCORE_MAX = 10
SCORE_DEFAULT = 5


def extract_possible_json(text):
    """
    Return the span from the first '{' to the last '}' in the text, or None.
    """
    match = re.search(r'({.*})', text, re.DOTALL)
    if match:
        return match.group(1).strip()
    return None


def extract_json_object(raw_text):
    """
    Parse the JSON object the model returned, tolerating prose or markdown
    fences around it.

    Raises MalformedResponse when no {...} span exists and InvalidJson when the
    span does not parse.
    """
    text = (raw_text or "").strip()

    # JSON output mode usually hands back a bare object
    try:
        parsed = json.loads(text)
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    extracted = extract_possible_json(text)
    if extracted is None:
        logger.warning("No JSON object found in model response: %.200s", text)
        raise MalformedResponse("Invalid JSON response from model: no JSON object found")

    try:
        parsed = json.loads(extracted)
    except json.JSONDecodeError as e:
        logger.warning("Could not parse JSON span from model response: %s", e)
        raise InvalidJson(f"Invalid JSON response from model: {e.msg}") from e

    if not isinstance(parsed, dict):
        raise MalformedResponse("Invalid JSON response from model: expected an object")
    return parsed


def clamp_score(value, default=SCORE_DEFAULT):
    """Coerce a raw score into [1, 10]. Missing or non-numeric values become the default."""
    if isinstance(value, bool):
        number = default
    elif isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = default
    else:
        number = default

    if isinstance(number, float):
        if math.isnan(number):
            number = default
        elif not math.isinf(number):
            number = round(number)

    return int(max(SCORE_MIN, min(SCORE_MAX, number)))


def _as_text(value, default=""):
    if value is None or isinstance(value, (dict, list)):
        return default
    text = str(value)
    return text if text else default


def _as_text_list(value):
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and not isinstance(item, (dict, list))]


def _as_object(value):
    return value if isinstance(value, dict) else {}


def normalize_ideas(parsed):
    ideas = parsed.get("ideas")
    if not isinstance(ideas, list):
        return []

    return [
        ProductIdea(
            title=_as_text(idea.get("title")),
            description=_as_text(idea.get("description")),
            target_audience=_as_text(idea.get("targetAudience")),
            price_range=_as_text(idea.get("priceRange")),
            category=_as_text(idea.get("category")),
            tags=_as_text_list(idea.get("tags")),
        )
        for idea in ideas
        if isinstance(idea, dict)
    ]


def normalize_validation(parsed):
    return IdeaValidation(
        market_potential=clamp_score(parsed.get("marketPotential")),
        competition_level=clamp_score(parsed.get("competitionLevel")),
        feasibility_score=clamp_score(parsed.get("feasibilityScore")),
        strengths=_as_text_list(parsed.get("strengths")),
        challenges=_as_text_list(parsed.get("challenges")),
        recommendation=_as_text(parsed.get("recommendation")),
    )


def normalize_promotion_kit(parsed):
    email = _as_object(parsed.get("emailCampaign"))
    affiliate = _as_object(parsed.get("affiliateResources"))
    defaults = AffiliateResources()

    return PromotionKit(
        email_campaign=EmailCampaign(
            subject=_as_text(email.get("subject")),
            content=_as_text(email.get("content")),
        ),
        social_media_posts=_as_text_list(parsed.get("socialMediaPosts")),
        affiliate_resources=AffiliateResources(
            commission_rate=_as_text(affiliate.get("commissionRate"), defaults.commission_rate),
            cookie_duration=_as_text(affiliate.get("cookieDuration"), defaults.cookie_duration),
            average_order_value=_as_text(affiliate.get("averageOrderValue"), defaults.average_order_value),
            sales_copy=_as_text(affiliate.get("salesCopy")),
        ),
    )


NORMALIZERS = {
    OperationKind.GENERATE_IDEAS: normalize_ideas,
    OperationKind.VALIDATE_IDEA: normalize_validation,
    OperationKind.GENERATE_PROMOTION_KIT: normalize_promotion_kit,
}


def normalize(operation_kind, raw_text):
    """Extract and repair the model output for an operation kind."""
    parsed = extract_json_object(raw_text)
    return NORMALIZERS[OperationKind(operation_kind)](parsed)
