import logging
import uuid

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from models.generated_content import CONTENT_TYPE_VALUES
from models.generation_request import GenerateIdeasRequest, PromotionKitRequest, ValidateIdeaRequest
from services.cultural_context import list_countries
from utils.errors import IdeaLabError, RequestValidationError

logger = logging.getLogger(__name__)

generation_bp = Blueprint('generation', __name__)


def _content_store():
    return current_app.extensions["content_store"]


def _generation_service():
    return current_app.extensions["generation_service"]


def _parse_body(model):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError.from_pydantic(e) from e


def _error_response(error, action):
    if isinstance(error, IdeaLabError):
        logger.error(f"Error {action}: {error.message}")
        return jsonify({"success": False, "error": error.message}), error.status_code

    logger.exception(f"Unexpected error {action}")
    return jsonify({"success": False, "error": f"Failed {action}: {error}"}), 500


def _run_generation(body_model, result_field, action, build_content):
    """Validate the body, generate, store the record and shape the response."""
    try:
        body = _parse_body(body_model)
        generation_request = body.to_generation_request()
        service = _generation_service()
        session_id = body.session_id or uuid.uuid4().hex

        result = service.run(generation_request)
        payload = [item.to_response() for item in result] if isinstance(result, list) else result.to_response()

        record = _content_store().create(
            session_id=session_id,
            type=generation_request.operation_kind.content_type,
            niche=body.niche,
            country=service.resolve_country(body.country),
            language=body.language,
            content=build_content(body, payload),
        )

        return jsonify({
            "success": True,
            result_field: payload,
            "contentId": record.id,
            "sessionId": session_id,
        }), 200

    except Exception as e:
        return _error_response(e, action)


@generation_bp.route('/generate-ideas', methods=['POST'])
def generate_ideas():
    return _run_generation(
        GenerateIdeasRequest, "ideas", "generating ideas",
        lambda body, ideas: {"ideas": ideas},
    )


@generation_bp.route('/validate-idea', methods=['POST'])
def validate_idea():
    return _run_generation(
        ValidateIdeaRequest, "validation", "validating idea",
        lambda body, validation: {"idea": body.idea, "validation": validation},
    )


@generation_bp.route('/generate-promotion-kit', methods=['POST'])
def generate_promotion_kit():
    return _run_generation(
        PromotionKitRequest, "promotionKit", "generating promotion kit",
        lambda body, kit: {"idea": body.idea, "promotionKit": kit},
    )


@generation_bp.route('/content/<session_id>', methods=['GET'])
def get_session_content(session_id: str):
    """
    Return the session's generated content in creation order, optionally
    filtered with ?type=idea|validation|promotion.
    """
    try:
        content_type = request.args.get('type')
        store = _content_store()

        if content_type:
            if content_type not in CONTENT_TYPE_VALUES:
                raise RequestValidationError(
                    f"Invalid content type '{content_type}'. Expected one of: {', '.join(CONTENT_TYPE_VALUES)}"
                )
            records = store.list_by_session_and_type(session_id, content_type)
        else:
            records = store.list_by_session(session_id)

        return jsonify({"success": True, "contents": [record.to_response() for record in records]}), 200

    except Exception as e:
        return _error_response(e, "fetching content")


@generation_bp.route('/countries', methods=['GET'])
def get_countries():
    language = request.args.get('language', 'en')
    return jsonify({"success": True, "countries": list_countries(language)}), 200
