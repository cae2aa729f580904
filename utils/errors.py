from pydantic import ValidationError


class IdeaLabError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class RequestValidationError(IdeaLabError):
    status_code = 400

    @classmethod
    def from_pydantic(cls, error: ValidationError):
        return cls("; ".join(_describe(err) for err in error.errors()))


class GenerationFailed(IdeaLabError):
    """The LLM backend could not produce a completion."""

    status_code = 502

    def __init__(self, reason):
        super().__init__(f"Generation failed: {reason}")
        self.reason = reason


class MalformedResponse(IdeaLabError):
    """No JSON object could be located in the model output."""

    status_code = 502


class InvalidJson(MalformedResponse):
    """A JSON-looking span was found but it does not parse."""


class StoreError(IdeaLabError):
    status_code = 500


class ConfigurationError(Exception):
    pass


def _describe(err):
    loc = [str(part) for part in err.get("loc", ()) if part != "__root__"]
    field = loc[-1] if loc else "body"
    if err.get("type") in ("missing", "string_too_short"):
        return f"{field[:1].upper()}{field[1:]} is required"
    return f"{'.'.join(loc) or field}: {err.get('msg')}"
