"""
OpenAI-compatible gateway provider.

The model gateway speaks the OpenAI chat-completions protocol, so the
official SDK is pointed at it through ``base_url``.
"""
import logging
from typing import Optional, Dict, Any, List
from openai import AsyncOpenAI, APIError, APIStatusError, RateLimitError

from emplyo.core import config
from emplyo.llm.errors import (
    LLMConfigurationError,
    LLMGenerationError,
    LLMPaymentRequiredError,
    LLMRateLimitError,
)
from emplyo.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
PAYMENT_REQUIRED_MESSAGE = "Payment required. Please add credits to your AI workspace."


class OpenAIProvider(LLMProvider):
    """Async provider built on the official OpenAI SDK."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None, client=None):
        self.api_key = api_key or config.LLM_GATEWAY_API_KEY
        if not self.api_key:
            raise LLMConfigurationError("LLM_GATEWAY_API_KEY is not configured")
        # No retries: the operator re-invokes on failure
        self.client = client or AsyncOpenAI(
            api_key=self.api_key,
            base_url=base_url or config.LLM_GATEWAY_BASE_URL,
            max_retries=0,
        )

    async def chat(
        self,
        messages: List[Dict[str, str]],
        model: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_choice: Optional[Dict[str, Any]] = None,
    ) -> LLMResponse:
        """Generate a chat completion."""
        kwargs: Dict[str, Any] = {"model": model, "messages": messages}
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if tools:
            kwargs["tools"] = tools
        if tool_choice:
            kwargs["tool_choice"] = tool_choice

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except RateLimitError as e:
            logger.warning(f"AI gateway rate limited: {e}")
            raise LLMRateLimitError(RATE_LIMIT_MESSAGE) from e
        except APIStatusError as e:
            if e.status_code == 402:
                logger.warning("AI gateway requires payment")
                raise LLMPaymentRequiredError(PAYMENT_REQUIRED_MESSAGE) from e
            logger.error(f"AI gateway error: {e.status_code} {e.message}", exc_info=True)
            raise LLMGenerationError(f"AI gateway returned status {e.status_code}") from e
        except APIError as e:
            logger.error(f"AI gateway request failed: {e}", exc_info=True)
            raise LLMGenerationError("AI gateway request failed") from e

        if not response.choices:
            raise LLMGenerationError("AI gateway returned no choices")

        message = response.choices[0].message
        tool_arguments = None
        if message.tool_calls:
            tool_arguments = message.tool_calls[0].function.arguments

        usage = response.usage
        return LLMResponse(
            content=message.content or "",
            tool_arguments=tool_arguments,
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=model,
            metadata={"finish_reason": response.choices[0].finish_reason},
        )


def get_llm_provider() -> LLMProvider:
    """
    Request-scoped provider dependency.

    Raises LLMConfigurationError when the gateway credential is absent,
    before any network call is made.
    """
    return OpenAIProvider()
