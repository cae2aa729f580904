import logging
import time

from models.generation_request import GenerationRequest, OperationKind
from services.llm_gateway import CompletionOptions, LLMGateway
from services.prompt_builder import build_prompt, build_system_message
from services.response_normalizer import normalize

logger = logging.getLogger(__name__)

TEMPERATURES = {
    OperationKind.GENERATE_IDEAS: 0.8,
    OperationKind.VALIDATE_IDEA: 0.7,
    OperationKind.GENERATE_PROMOTION_KIT: 0.8,
}


class GenerationService:
    """Runs one generation flow: prompt, model call, normalization."""

    def __init__(self, gateway: LLMGateway, country_aware=True, structured_output=True, default_country="United States"):
        self.gateway = gateway
        self.country_aware = country_aware
        self.structured_output = structured_output
        self.default_country = default_country

    @classmethod
    def from_config(cls, gateway, config):
        return cls(
            gateway,
            country_aware=config.get("COUNTRY_AWARE_PROMPTING", True),
            structured_output=config.get("STRUCTURED_OUTPUT", True),
            default_country=config.get("DEFAULT_COUNTRY") or "United States",
        )

    def resolve_country(self, country):
        return country or self.default_country

    def run(self, request: GenerationRequest):
        start_time = time.time()
        kind = request.operation_kind
        prompt = build_prompt(
            kind,
            request.niche,
            idea_text=request.idea_text,
            country=self.resolve_country(request.country),
            display_language=request.display_language,
            country_aware=self.country_aware,
            default_country=self.default_country,
        )
        options = CompletionOptions(
            temperature=TEMPERATURES[kind],
            json_mode=self.structured_output,
            system_message=build_system_message(kind, request.display_language),
        )

        raw_text = self.gateway.complete(prompt, options)
        result = normalize(kind, raw_text)
        logger.info("%s for niche '%s' completed in %.2fs", kind.value, request.niche, time.time() - start_time)
        return result
