import pytest

from models.generation_request import OperationKind
from services.cultural_context import CULTURAL_CONTEXTS
from services.prompt_builder import (
    IDEAS_SCHEMA,
    PROMOTION_KIT_SCHEMA,
    VALIDATION_SCHEMA,
    build_prompt,
    build_system_message,
)

SCHEMAS = {
    OperationKind.GENERATE_IDEAS: IDEAS_SCHEMA,
    OperationKind.VALIDATE_IDEA: VALIDATION_SCHEMA,
    OperationKind.GENERATE_PROMOTION_KIT: PROMOTION_KIT_SCHEMA,
}

PAIRS = [(country, language) for country, texts in CULTURAL_CONTEXTS.items() for language in texts]


@pytest.mark.parametrize("country,language", PAIRS)
@pytest.mark.parametrize("kind", list(OperationKind))
def test_prompt_contains_niche_context_and_schema(kind, country, language):
    prompt = build_prompt(kind, "pet care", idea_text="Dog training course", country=country, display_language=language)

    assert prompt
    assert "pet care" in prompt
    assert CULTURAL_CONTEXTS[country][language] in prompt
    assert prompt.endswith(SCHEMAS[kind])


def test_idea_text_is_interpolated_for_validation_and_kit():
    for kind in (OperationKind.VALIDATE_IDEA, OperationKind.GENERATE_PROMOTION_KIT):
        prompt = build_prompt(kind, "fitness", idea_text="Home workout app", country="Germany")
        assert '"Home workout app"' in prompt


def test_unknown_country_uses_default_context():
    prompt = build_prompt(OperationKind.GENERATE_IDEAS, "fitness", country="Atlantis", display_language="pt")

    assert CULTURAL_CONTEXTS["United States"]["pt"] in prompt
    assert "mercado de Atlantis" in prompt


def test_missing_country_resolves_to_default_country():
    prompt = build_prompt(OperationKind.GENERATE_IDEAS, "fitness")
    assert "for the United States market" in prompt


def test_portuguese_brazil_phrasing():
    prompt = build_prompt(OperationKind.VALIDATE_IDEA, "finanças", idea_text="Planilha", country="Brazil", display_language="pt")

    assert "mercado brasileiro" in prompt
    assert "específicas do Brasil" in prompt
    assert "Potencial de mercado no Brasil" in prompt
    assert "Retorne APENAS um objeto JSON válido" in prompt


def test_country_agnostic_prompt_omits_cultural_context():
    prompt = build_prompt(OperationKind.GENERATE_IDEAS, "fitness", country="Brazil", country_aware=False)

    assert "fitness" in prompt
    assert "Brazil" not in prompt
    assert "Cultural Context" not in prompt
    assert prompt.endswith(IDEAS_SCHEMA)


def test_unsupported_language_falls_back_to_english():
    prompt = build_prompt(OperationKind.GENERATE_IDEAS, "fitness", country="Brazil", display_language="de")
    assert prompt.startswith("Generate 3 innovative digital product ideas")


def test_accepts_operation_kind_value_strings():
    assert build_prompt("generate_ideas", "fitness") == build_prompt(OperationKind.GENERATE_IDEAS, "fitness")


def test_unknown_operation_kind_raises():
    with pytest.raises(ValueError):
        build_prompt("summarize", "fitness")


def test_system_message_per_kind_and_language():
    assert "strategist" in build_system_message(OperationKind.GENERATE_IDEAS, "en")
    assert "analista" in build_system_message(OperationKind.VALIDATE_IDEA, "pt")
    assert "marketing" in build_system_message(OperationKind.GENERATE_PROMOTION_KIT, "xx")
