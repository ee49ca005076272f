"""
Strict decoding of structured model output.

Tool-call arguments arrive as a JSON string. They are decoded and validated
against a pydantic model, producing either ``Valid(payload)`` or
``Invalid(reason)``; nothing malformed is passed on.
"""
import json
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Invalid:
    reason: str


DecodeResult = Union[Valid, Invalid]


def decode_tool_arguments(raw: Optional[str], schema: Type[T]) -> DecodeResult:
    if raw is None:
        return Invalid("No tool call in response")
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        return Invalid(f"Tool arguments are not valid JSON: {e}")
    try:
        return Valid(schema.model_validate(data))
    except ValidationError as e:
        return Invalid(f"Tool arguments do not match {schema.__name__}: {e.error_count()} error(s)")
