"""
LLM Provider interface for abstracting LLM implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field


@dataclass
class ToolSpec:
    """A function the model is forced to call, used for structured output."""
    name: str
    description: str
    parameters: Dict[str, Any]

    def as_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def as_tool_choice(self) -> Dict[str, Any]:
        return {"type": "function", "function": {"name": self.name}}


@dataclass
class LLMResponse:
    """Standardized LLM response."""
    content: str = ""
    tool_arguments: Optional[str] = None
    tokens_in: int = 0
    tokens_out: int = 0
    model: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def chat(
        self,
        messages: List[Dict[str, str]],
        model: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_choice: Optional[Dict[str, Any]] = None,
    ) -> LLMResponse:
        """
        Generate a chat completion.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Model identifier
            temperature: Sampling temperature (provider default when None)
            max_tokens: Maximum tokens to generate
            tools: Tool definitions offered to the model
            tool_choice: Forces a specific tool call

        Returns:
            LLMResponse with content, tool-call arguments and metadata

        Raises:
            LLMRateLimitError: Upstream answered 429
            LLMPaymentRequiredError: Upstream answered 402
            LLMGenerationError: Any other upstream failure
        """

    async def call_tool(
        self,
        messages: List[Dict[str, str]],
        model: str,
        tool: ToolSpec,
    ) -> LLMResponse:
        """Generate a completion constrained to a single forced tool call."""
        return await self.chat(
            messages=messages,
            model=model,
            tools=[tool.as_tool()],
            tool_choice=tool.as_tool_choice(),
        )
