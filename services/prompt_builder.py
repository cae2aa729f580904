from models.generation_request import OperationKind
from services.cultural_context import DEFAULT_COUNTRY, get_country_context

IDEAS_SCHEMA = '{"ideas": [{"title": "string", "description": "string", "targetAudience": "string", "priceRange": "string", "category": "string", "tags": ["string"]}]}'
VALIDATION_SCHEMA = '{"marketPotential": number, "competitionLevel": number, "feasibilityScore": number, "strengths": ["string"], "challenges": ["string"], "recommendation": "string"}'
PROMOTION_KIT_SCHEMA = '{"emailCampaign": {"subject": "string", "content": "string"}, "socialMediaPosts": ["string"], "affiliateResources": {"commissionRate": "string", "cookieDuration": "string", "averageOrderValue": "string", "salesCopy": "string"}}'

SYSTEM_MESSAGES = {
    OperationKind.GENERATE_IDEAS: {
        "en": "You are an expert digital product strategist. Generate practical, marketable digital product ideas.",
        "pt": "Você é um estrategista especialista em produtos digitais. Gere ideias práticas e comercializáveis de produtos digitais.",
    },
    OperationKind.VALIDATE_IDEA: {
        "en": "You are a market research analyst specializing in digital products. Provide realistic, data-driven assessments.",
        "pt": "Você é um analista de pesquisa de mercado especializado em produtos digitais. Forneça avaliações realistas e baseadas em dados.",
    },
    OperationKind.GENERATE_PROMOTION_KIT: {
        "en": "You are a digital marketing expert specializing in product launches and affiliate marketing. Create compelling, conversion-focused content.",
        "pt": "Você é um especialista em marketing digital especializado em lançamentos de produtos e marketing de afiliados. Crie conteúdo atrativo e focado em conversão.",
    },
}


def _pt_country_forms(country):
    """Portuguese phrasings of the target market, e.g. 'mercado brasileiro'."""
    if country == "Brazil":
        return {"market": "brasileiro", "name": "o Brasil", "of": "do Brasil", "in": "no Brasil"}
    return {"market": f"de {country}", "name": country, "of": f"de {country}", "in": f"em {country}"}


def _ideas_prompt(niche, country, context, language):
    if language == "pt":
        pt = _pt_country_forms(country)
        return f"""Gere 3 ideias inovadoras de produtos digitais para o nicho "{niche}", especificamente adaptadas para o mercado {pt['market']}.

Contexto Cultural: {context}

Para cada ideia, forneça:
- Um título atrativo e apropriado para o mercado
- Descrição detalhada (2-3 frases)
- Público-alvo específico para {pt['name']}
- Faixa de preço realista no contexto local
- Categoria apropriada
- Tags relevantes

Retorne APENAS um objeto JSON válido neste formato exato:
{IDEAS_SCHEMA}"""

    return f"""Generate 3 innovative digital product ideas for the "{niche}" niche, specifically tailored for the {country} market.

Cultural Context: {context}

For each idea, provide:
- A compelling, market-appropriate title
- Detailed description (2-3 sentences)
- Specific target audience for {country}
- Realistic price range in local context
- Appropriate category
- Relevant tags

Return ONLY a valid JSON object in this exact format:
{IDEAS_SCHEMA}"""


def _validation_prompt(niche, idea, country, context, language):
    if language == "pt":
        pt = _pt_country_forms(country)
        return f"""Analise a viabilidade desta ideia de produto digital: "{idea}" no nicho "{niche}" para o mercado {pt['market']}.

Contexto Cultural: {context}

Considere condições de mercado local, concorrência, regulamentações e preferências culturais específicas {pt['of']}.

Forneça pontuações (1-10) para:
- Potencial de mercado {pt['in']}
- Nível de concorrência
- Pontuação de viabilidade considerando limitações locais

Também forneça pelo menos 3 pontos fortes, 3 desafios e uma recomendação geral.

Retorne APENAS um objeto JSON válido:
{VALIDATION_SCHEMA}"""

    return f"""Analyze the viability of this digital product idea: "{idea}" in the "{niche}" niche for the {country} market.

Cultural Context: {context}

Consider local market conditions, competition, regulations, and cultural preferences specific to {country}.

Provide scores (1-10) for:
- Market potential in {country}
- Competition level
- Feasibility score considering local constraints

Also provide at least 3 strengths, 3 challenges, and an overall recommendation.

Return ONLY a valid JSON object:
{VALIDATION_SCHEMA}"""


def _promotion_kit_prompt(niche, idea, country, context, language):
    if language == "pt":
        pt = _pt_country_forms(country)
        return f"""Crie um kit promocional abrangente para este produto digital: "{idea}" no nicho "{niche}", especificamente para o mercado {pt['market']}.

Contexto Cultural: {context}

Gere conteúdo culturalmente apropriado incluindo:
1. Campanha de email (assunto + conteúdo)
2. 3 posts para redes sociais adaptados para o público {pt['market']}
3. Recursos para afiliados com considerações do mercado local

Use linguagem, referências e abordagens de marketing apropriadas para {pt['name']}.

Retorne APENAS um objeto JSON válido:
{PROMOTION_KIT_SCHEMA}"""

    return f"""Create a comprehensive promotion kit for this digital product: "{idea}" in the "{niche}" niche, specifically for the {country} market.

Cultural Context: {context}

Generate culturally appropriate content including:
1. Email campaign (subject + content)
2. 3 social media posts adapted for {country} audience
3. Affiliate resources with local market considerations

Use appropriate language, references, and marketing approaches for {country}.

Return ONLY a valid JSON object:
{PROMOTION_KIT_SCHEMA}"""


# Country-agnostic variants, used when country-aware prompting is switched off.
def _plain_prompt(operation_kind, niche, idea, language):
    if operation_kind == OperationKind.GENERATE_IDEAS:
        if language == "pt":
            return f'Gere 3 ideias inovadoras de produtos digitais para o nicho "{niche}". Foque em produtos que podem ser criados e vendidos online (apps, cursos, software, ferramentas digitais, etc.). Para cada ideia, forneça um título atrativo, descrição detalhada, público-alvo, faixa de preço realista, categoria e tags relevantes. Retorne APENAS um objeto JSON válido neste formato exato: {IDEAS_SCHEMA}'
        return f'Generate 3 innovative digital product ideas for the "{niche}" niche. Focus on products that can be created and sold online (apps, courses, software, digital tools, etc.). For each idea, provide a compelling title, detailed description, target audience, realistic price range, category, and relevant tags. Return ONLY a valid JSON object in this exact format: {IDEAS_SCHEMA}'

    if operation_kind == OperationKind.VALIDATE_IDEA:
        if language == "pt":
            return f'Analise a viabilidade desta ideia de produto digital: "{idea}" no nicho "{niche}". Forneça uma validação abrangente incluindo potencial de mercado (1-10), nível de concorrência (1-10), pontuação de viabilidade (1-10), pelo menos 3 pontos fortes, pelo menos 3 desafios e uma recomendação geral. Retorne APENAS um objeto JSON válido neste formato: {VALIDATION_SCHEMA}'
        return f'Analyze the viability of this digital product idea: "{idea}" in the "{niche}" niche. Provide a comprehensive validation including market potential (1-10), competition level (1-10), feasibility score (1-10), at least 3 strengths, at least 3 challenges, and an overall recommendation. Return ONLY a valid JSON object in this format: {VALIDATION_SCHEMA}'

    if language == "pt":
        return f'Crie um kit promocional abrangente para este produto digital: "{idea}" no nicho "{niche}". Gere: 1) Campanha de email com assunto e conteúdo, 2) 3 posts para redes sociais, 3) Recursos para afiliados incluindo taxa de comissão, duração do cookie, valor médio do pedido e texto de vendas. Retorne APENAS um objeto JSON válido: {PROMOTION_KIT_SCHEMA}'
    return f'Create a comprehensive promotion kit for this digital product: "{idea}" in the "{niche}" niche. Generate: 1) Email campaign with subject and content, 2) 3 social media posts, 3) Affiliate resources including commission rate, cookie duration, average order value, and sales copy. Return ONLY a valid JSON object: {PROMOTION_KIT_SCHEMA}'


def build_prompt(operation_kind, niche, idea_text=None, country=None, display_language="en",
                 country_aware=True, default_country=DEFAULT_COUNTRY):
    """
    Build the user prompt for one generation flow.

    The prompt always ends with the JSON shape the response normalizer expects
    for the operation kind.
    """
    operation_kind = OperationKind(operation_kind)
    language = display_language if display_language in ("en", "pt") else "en"
    idea = idea_text or ""

    if not country_aware:
        return _plain_prompt(operation_kind, niche, idea, language)

    country = country or default_country
    context = get_country_context(country, language, default_country)

    if operation_kind == OperationKind.GENERATE_IDEAS:
        return _ideas_prompt(niche, country, context, language)
    if operation_kind == OperationKind.VALIDATE_IDEA:
        return _validation_prompt(niche, idea, country, context, language)
    return _promotion_kit_prompt(niche, idea, country, context, language)


def build_system_message(operation_kind, display_language="en"):
    messages = SYSTEM_MESSAGES[OperationKind(operation_kind)]
    return messages.get(display_language) or messages["en"]
