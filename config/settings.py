import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    # LLM backend: "openai", "azure_openai" or "gemini"
    LLM_BACKEND = os.getenv("LLM_BACKEND", "openai").lower()
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
    AZURE_OPENAI_API_KEY = os.getenv("AZURE_OPENAI_API_KEY")
    AZURE_OPENAI_ENDPOINT = os.getenv("AZURE_OPENAI_ENDPOINT")
    AZURE_DEPLOYMENT_NAME = os.getenv("AZURE_DEPLOYMENT_NAME")
    AZURE_OPENAI_API_VERSION = os.getenv("AZURE_OPENAI_API_VERSION", "2024-08-01-preview")
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    LLM_TIMEOUT = int(os.getenv("LLM_TIMEOUT", "60"))  # seconds
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "2000"))
    STRUCTURED_OUTPUT = _env_flag("STRUCTURED_OUTPUT", "true")

    # Prompting
    COUNTRY_AWARE_PROMPTING = _env_flag("COUNTRY_AWARE_PROMPTING", "true")
    DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "United States")

    # Content store: "memory" or "mongo"
    CONTENT_STORE = os.getenv("CONTENT_STORE", "memory").lower()
    MONGO_URI = os.getenv("MONGO_URI")
    MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "idea_lab")

    FLASK_DEBUG = _env_flag("FLASK_DEBUG")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS Configuration
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    CORS_METHODS = os.getenv("CORS_METHODS", "GET,POST,OPTIONS").split(",")


class TestConfig(Config):
    __test__ = False

    TESTING = True
    LLM_BACKEND = "openai"
    OPENAI_API_KEY = "test-key"
    STRUCTURED_OUTPUT = True
    COUNTRY_AWARE_PROMPTING = True
    DEFAULT_COUNTRY = "United States"
    CONTENT_STORE = "memory"
