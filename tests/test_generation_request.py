from models.generation_request import (
    GenerateIdeasRequest,
    OperationKind,
    PromotionKitRequest,
    ValidateIdeaRequest,
)


def test_ideas_body_has_no_idea_text():
    request = GenerateIdeasRequest.model_validate({"niche": "fitness", "country": ""}).to_generation_request()

    assert request.operation_kind == OperationKind.GENERATE_IDEAS
    assert request.idea_text is None
    assert request.country is None
    assert request.display_language == "en"


def test_validate_body_carries_idea_text():
    body = ValidateIdeaRequest.model_validate({"idea": " Meal plan PDF ", "niche": "fitness", "language": "pt"})
    request = body.to_generation_request()

    assert request.operation_kind == OperationKind.VALIDATE_IDEA
    assert request.idea_text == "Meal plan PDF"
    assert request.display_language == "pt"


def test_promotion_kit_body_carries_idea_text_and_session():
    body = PromotionKitRequest.model_validate({"idea": "Yoga course", "niche": "wellness", "sessionId": "s1"})
    request = body.to_generation_request()

    assert body.session_id == "s1"
    assert request.operation_kind == OperationKind.GENERATE_PROMOTION_KIT
    assert request.idea_text == "Yoga course"
