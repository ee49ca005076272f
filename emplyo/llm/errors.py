"""
Errors raised by the LLM layer.

Each carries the HTTP status the API answers with; the application-level
exception handler renders them as ``{"error": message}``.
"""


class LLMError(Exception):
    """Base class for model-gateway failures."""
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class LLMConfigurationError(LLMError):
    """The gateway credential is missing. Raised before any network call."""


class LLMRateLimitError(LLMError):
    status_code = 429


class LLMPaymentRequiredError(LLMError):
    status_code = 402


class LLMGenerationError(LLMError):
    """Non-success upstream status or a missing/invalid structured payload."""
