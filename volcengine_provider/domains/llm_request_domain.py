# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Provider-agnostic LLM request/response contracts (no business logic).

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from volcengine_provider.domains.domain_base import DomainModel


class LlmRole(str, Enum):
    system = "system"
    user = "user"
    assistant = "assistant"
    tool = "tool"


class LlmOutputFormat(str, Enum):
    text = "text"
    json = "json"


class StreamEventType(str, Enum):
    delta_text = "delta.text"
    delta_reasoning = "delta.reasoning"
    tool_call = "tool.call"
    completed = "response.completed"
    error = "error"


class ToolCall(DomainModel):
    id: str = Field(...)
    name: str = Field(...)
    # Raw JSON string exactly as returned by the API.
    arguments: str = Field(default="")


class LlmMessage(DomainModel):
    role: LlmRole = Field(...)
    content: str = Field("")
    # assistant messages may carry tool calls, tool messages answer one by id.
    tool_calls: List[ToolCall] = Field(default_factory=list)
    tool_call_id: Optional[str] = Field(default=None)


class ToolDefinition(DomainModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = Field(default=None)
    # JSON schema of the function parameters.
    parameters: Dict[str, Any] = Field(default_factory=lambda: {"type": "object", "properties": {}})


class LlmRequest(DomainModel):
    """Provider-agnostic request.

    Either `prompt` (single user turn) or `messages` is used; when both are set the
    prompt is appended as the last user message.
    """

    prompt: Optional[str] = Field(default=None)
    system_prompt: Optional[str] = Field(default=None)
    messages: List[LlmMessage] = Field(default_factory=list)

    tools: List[ToolDefinition] = Field(default_factory=list)
    # "auto" | "none" | "required" | a tool name
    tool_choice: Optional[str] = Field(default=None)

    output_format: LlmOutputFormat = Field(default=LlmOutputFormat.text)

    max_tokens: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[float] = Field(default=None)
    top_p: Optional[float] = Field(default=None)
    frequency_penalty: Optional[float] = Field(default=None)
    presence_penalty: Optional[float] = Field(default=None)
    seed: Optional[int] = Field(default=None)
    stop: List[str] = Field(default_factory=list)

    # Merged over the provider headers for this request only.
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout_seconds: Optional[int] = Field(default=None, ge=1)


class LlmUsage(DomainModel):
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)


class LlmResponse(DomainModel):
    provider: str = Field(...)
    model: str = Field(...)
    latency_ms: int = Field(default=0, ge=0)
    text: Optional[str] = Field(default=None)
    reasoning: Optional[str] = Field(default=None)
    tool_calls: List[ToolCall] = Field(default_factory=list)
    finish_reason: Optional[str] = Field(default=None)
    usage: LlmUsage = Field(default_factory=LlmUsage)
    raw: Dict[str, Any] = Field(default_factory=dict)


class StreamEvent(DomainModel):
    type: StreamEventType = Field(...)
    delta: Optional[str] = Field(default=None)
    tool_call: Optional[ToolCall] = Field(default=None)
    finish_reason: Optional[str] = Field(default=None)
    usage: Optional[LlmUsage] = Field(default=None)
    raw: Dict[str, Any] = Field(default_factory=dict)
