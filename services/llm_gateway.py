import logging
import time
from typing import Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import AzureChatOpenAI, ChatOpenAI
from openai import APIConnectionError, APIError, APITimeoutError, AuthenticationError, RateLimitError
from pydantic import BaseModel

from utils.errors import ConfigurationError, GenerationFailed

logger = logging.getLogger(__name__)


class CompletionOptions(BaseModel):
    temperature: float = 0.7
    json_mode: bool = False
    system_message: Optional[str] = None
    model: Optional[str] = None


class LLMGateway:
    """A backend that turns a prompt into raw model text."""

    name = "base"

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        raise NotImplementedError


class ChatCompletionGateway(LLMGateway):
    """OpenAI-style chat completions through LangChain, with JSON output mode."""

    name = "chat"

    def __init__(self, llm):
        self.llm = llm

    @classmethod
    def from_config(cls, config):
        if config.get("LLM_BACKEND") == "azure_openai":
            missing = [key for key in ("AZURE_OPENAI_API_KEY", "AZURE_OPENAI_ENDPOINT", "AZURE_DEPLOYMENT_NAME") if not config.get(key)]
            if missing:
                raise ConfigurationError(f"Azure OpenAI settings are missing: {', '.join(missing)}")
            llm = AzureChatOpenAI(
                azure_endpoint=config["AZURE_OPENAI_ENDPOINT"],
                openai_api_version=config.get("AZURE_OPENAI_API_VERSION"),
                deployment_name=config["AZURE_DEPLOYMENT_NAME"],
                openai_api_key=config["AZURE_OPENAI_API_KEY"],
                max_tokens=config.get("LLM_MAX_TOKENS"),
                timeout=config.get("LLM_TIMEOUT"),
                max_retries=0,
            )
            return cls(llm)

        if not config.get("OPENAI_API_KEY"):
            raise ConfigurationError("OPENAI_API_KEY is missing or invalid!")
        llm = ChatOpenAI(
            model=config.get("OPENAI_MODEL"),
            api_key=config["OPENAI_API_KEY"],
            max_tokens=config.get("LLM_MAX_TOKENS"),
            timeout=config.get("LLM_TIMEOUT"),
            max_retries=0,
        )
        return cls(llm)

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        start_time = time.time()
        messages = []
        if options.system_message:
            messages.append(SystemMessage(content=options.system_message))
        messages.append(HumanMessage(content=prompt))

        call_kwargs = {"temperature": options.temperature}
        if options.json_mode:
            call_kwargs["response_format"] = {"type": "json_object"}
        if options.model:
            call_kwargs["model"] = options.model

        try:
            response = self.llm.bind(**call_kwargs).invoke(messages)
        except AuthenticationError as e:
            raise GenerationFailed(f"authentication with the LLM provider failed: {e}") from e
        except RateLimitError as e:
            raise GenerationFailed(f"LLM provider rate limit exceeded: {e}") from e
        except APITimeoutError as e:
            raise GenerationFailed(f"LLM request timed out: {e}") from e
        except APIConnectionError as e:
            raise GenerationFailed(f"could not reach the LLM provider: {e}") from e
        except APIError as e:
            raise GenerationFailed(f"LLM provider error: {e}") from e
        except Exception as e:
            logger.error("Unexpected chat completion error: %s - %s", type(e).__name__, e)
            raise GenerationFailed(str(e)) from e

        content = response.content if isinstance(response.content, str) else ""
        usage = (getattr(response, "response_metadata", None) or {}).get("token_usage") or {}
        logger.info(
            "Chat completion finished in %.2fs (prompt tokens: %s, completion tokens: %s)",
            time.time() - start_time,
            usage.get("prompt_tokens", 0),
            usage.get("completion_tokens", 0),
        )
        if not content.strip():
            raise GenerationFailed("empty response from model")
        return content


class GeminiGateway(LLMGateway):
    """Google Gemini text generation."""

    name = "gemini"

    def __init__(self, client, model):
        self.client = client
        self.model = model

    @classmethod
    def from_config(cls, config):
        api_key = config.get("GOOGLE_API_KEY")
        if not api_key:
            raise ConfigurationError("GOOGLE_API_KEY not set")
        client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(config.get("LLM_TIMEOUT") or 60) * 1000),
        )
        return cls(client, config.get("GEMINI_MODEL"))

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        start_time = time.time()
        model = options.model or self.model
        generation_config = types.GenerateContentConfig(
            temperature=options.temperature,
            system_instruction=options.system_message,
            response_mime_type="application/json" if options.json_mode else None,
        )

        try:
            response = self.client.models.generate_content(
                model=model,
                contents=prompt,
                config=generation_config,
            )
        except genai_errors.APIError as e:
            if e.code in (401, 403):
                reason = f"authentication with the LLM provider failed: {e}"
            elif e.code == 429:
                reason = f"LLM provider rate limit exceeded: {e}"
            else:
                reason = f"LLM provider error: {e}"
            raise GenerationFailed(reason) from e
        except Exception as e:
            logger.error("Unexpected Gemini error: %s - %s", type(e).__name__, e)
            raise GenerationFailed(str(e)) from e

        text = response.text or ""
        logger.info("Gemini (%s) completion finished in %.2fs", model, time.time() - start_time)
        if not text.strip():
            raise GenerationFailed("empty response from model")
        return text


GATEWAYS = {
    "openai": ChatCompletionGateway,
    "azure_openai": ChatCompletionGateway,
    "gemini": GeminiGateway,
}


def build_gateway(config) -> LLMGateway:
    """Construct the LLM backend named by LLM_BACKEND."""
    backend = (config.get("LLM_BACKEND") or "openai").lower()
    gateway_class = GATEWAYS.get(backend)
    if gateway_class is None:
        raise ConfigurationError(f"Unknown LLM_BACKEND '{backend}'. Expected one of: {', '.join(GATEWAYS)}")
    gateway = gateway_class.from_config(config)
    logger.info("Using %s LLM backend", backend)
    return gateway
