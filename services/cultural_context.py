DEFAULT_COUNTRY = "United States"

# Guidance injected into country-aware prompts, keyed by country then language.
CULTURAL_CONTEXTS = {
    "United States": {
        "en": 'Focus on side hustles, SaaS products, online courses, and digital marketing tools. Use American business terminology like "monetize", "scale", and "passive income". Popular formats include newsletters, mobile apps, and subscription services.',
        "pt": 'Foque em trabalhos extras, produtos SaaS, cursos online e ferramentas de marketing digital. Use terminologia de negócios americana como "monetizar", "escalar" e "renda passiva". Formatos populares incluem newsletters, aplicativos móveis e serviços de assinatura.',
    },
    "Brazil": {
        "en": "Focus on WhatsApp business solutions, Instagram marketing, local e-commerce, and extra income opportunities. Use Brazilian Portuguese expressions and consider PIX payments, local marketplaces like Mercado Livre, and social selling strategies.",
        "pt": "Foque em soluções de negócios para WhatsApp, marketing no Instagram, e-commerce local e oportunidades de renda extra. Use expressões do português brasileiro e considere pagamentos PIX, marketplaces locais como Mercado Livre e estratégias de venda social.",
    },
    "Namibia": {
        "en": "Focus on accessible, low-cost digital products like simple PDFs with video tutorials, basic mobile solutions, and community-driven content. Prioritize motivational and educational content that works with limited internet connectivity.",
        "pt": "Foque em produtos digitais acessíveis e de baixo custo como PDFs simples com tutoriais em vídeo, soluções móveis básicas e conteúdo comunitário. Priorize conteúdo motivacional e educativo que funcione com conectividade limitada à internet.",
    },
    "United Kingdom": {
        "en": "Focus on professional development tools, fintech solutions, and premium content. Use British terminology and consider compliance with UK regulations. Popular formats include webinars, professional certifications, and B2B tools.",
        "pt": "Foque em ferramentas de desenvolvimento profissional, soluções fintech e conteúdo premium. Use terminologia britânica e considere conformidade com regulamentações do Reino Unido. Formatos populares incluem webinars, certificações profissionais e ferramentas B2B.",
    },
    "Germany": {
        "en": "Focus on engineering solutions, productivity tools, and privacy-focused products. Consider GDPR compliance and German preference for quality and precision. Popular formats include technical courses, software tools, and detailed guides.",
        "pt": "Foque em soluções de engenharia, ferramentas de produtividade e produtos focados em privacidade. Considere conformidade GDPR e preferência alemã por qualidade e precisão. Formatos populares incluem cursos técnicos, ferramentas de software e guias detalhados.",
    },
}

# Countries offered to the client, in display order.
SUPPORTED_COUNTRIES = [
    {"code": "United States", "flag": "🇺🇸", "name": {"en": "United States", "pt": "Estados Unidos"}},
    {"code": "Brazil", "flag": "🇧🇷", "name": {"en": "Brazil", "pt": "Brasil"}},
    {"code": "United Kingdom", "flag": "🇬🇧", "name": {"en": "United Kingdom", "pt": "Reino Unido"}},
    {"code": "Germany", "flag": "🇩🇪", "name": {"en": "Germany", "pt": "Alemanha"}},
    {"code": "Canada", "flag": "🇨🇦", "name": {"en": "Canada", "pt": "Canadá"}},
    {"code": "Australia", "flag": "🇦🇺", "name": {"en": "Australia", "pt": "Austrália"}},
    {"code": "France", "flag": "🇫🇷", "name": {"en": "France", "pt": "França"}},
    {"code": "Namibia", "flag": "🇳🇦", "name": {"en": "Namibia", "pt": "Namíbia"}},
    {"code": "South Africa", "flag": "🇿🇦", "name": {"en": "South Africa", "pt": "África do Sul"}},
    {"code": "Mexico", "flag": "🇲🇽", "name": {"en": "Mexico", "pt": "México"}},
]


def get_country_context(country, language="en", default_country=DEFAULT_COUNTRY):
    """
    Return the cultural guidance for a country in the given display language.
    Unknown countries fall back to the default country's text.
    """
    contexts = CULTURAL_CONTEXTS.get(country) or CULTURAL_CONTEXTS.get(default_country) or CULTURAL_CONTEXTS[DEFAULT_COUNTRY]
    return contexts.get(language) or contexts["en"]


def list_countries(language="en"):
    return [
        {
            "code": country["code"],
            "flag": country["flag"],
            "name": country["name"].get(language) or country["name"]["en"],
        }
        for country in SUPPORTED_COUNTRIES
    ]
