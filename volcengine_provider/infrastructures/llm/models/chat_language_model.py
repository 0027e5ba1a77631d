# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Chat model over OpenAI-compatible `/chat/completions`.

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, List, Optional

from volcengine_provider.domains.llm_model_settings_domain import ChatSettings
from volcengine_provider.domains.llm_request_domain import (
    LlmOutputFormat,
    LlmRequest,
    LlmResponse,
    LlmRole,
    LlmUsage,
    StreamEvent,
    StreamEventType,
    ToolCall,
)
from volcengine_provider.infrastructures.llm.models.model_base import LanguageModelBase, parse_usage

_TOOL_CHOICE_KEYWORDS = ("auto", "none", "required")


def _reasoning_of(obj: Dict[str, Any]) -> Optional[str]:
    # OpenRouter uses `reasoning`, Ark uses `reasoning_content`.
    value = obj.get("reasoning") or obj.get("reasoning_content")
    return str(value) if value else None


class VolcEngineChatLanguageModel(LanguageModelBase[ChatSettings]):
    default_object_generation_mode = "tool"
    settings_class = ChatSettings

    # -----------------------------
    # Payload builders
    # -----------------------------

    def _build_messages(self, req: LlmRequest) -> List[Dict[str, Any]]:
        msgs: List[Dict[str, Any]] = []

        if req.system_prompt:
            msgs.append({"role": "system", "content": str(req.system_prompt)})

        for m in req.messages:
            if m.role == LlmRole.tool:
                msgs.append({"role": "tool", "tool_call_id": m.tool_call_id, "content": m.content})
                continue

            msg: Dict[str, Any] = {"role": m.role.value, "content": m.content}
            if m.role == LlmRole.assistant and m.tool_calls:
                msg["tool_calls"] = [
                    {
                        "id": tc.id,
                        "type": "function",
                        "function": {"name": tc.name, "arguments": tc.arguments},
                    }
                    for tc in m.tool_calls
                ]
            msgs.append(msg)

        if req.prompt:
            msgs.append({"role": "user", "content": req.prompt})

        return msgs

    @staticmethod
    def _build_tools(req: LlmRequest) -> Dict[str, Any]:
        if not req.tools:
            return {}

        out: Dict[str, Any] = {
            "tools": [
                {
                    "type": "function",
                    "function": {
                        "name": t.name,
                        "description": t.description,
                        "parameters": t.parameters,
                    },
                }
                for t in req.tools
            ]
        }

        choice = req.tool_choice
        if choice in _TOOL_CHOICE_KEYWORDS:
            out["tool_choice"] = choice
        elif choice:
            out["tool_choice"] = {"type": "function", "function": {"name": choice}}
        return out

    def _settings_fields(self) -> Dict[str, Any]:
        s = self.settings
        fields: Dict[str, Any] = {}
        if s.logit_bias:
            fields["logit_bias"] = dict(s.logit_bias)
        # bool is checked first: True/False are ints too
        if isinstance(s.logprobs, bool):
            if s.logprobs:
                fields["logprobs"] = True
        elif isinstance(s.logprobs, int):
            fields["logprobs"] = True
            fields["top_logprobs"] = s.logprobs
        if s.user is not None:
            fields["user"] = s.user
        if s.parallel_tool_calls is not None:
            fields["parallel_tool_calls"] = s.parallel_tool_calls
        if s.models:
            fields["models"] = list(s.models)
        if s.include_reasoning is not None:
            fields["include_reasoning"] = s.include_reasoning
        return fields

    def build_payload(self, req: LlmRequest, *, stream: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": self.model_id,
            "messages": self._build_messages(req),
        }
        payload.update(self._settings_fields())
        payload.update(self._sampling_options(req))

        if req.output_format == LlmOutputFormat.json:
            payload["response_format"] = {"type": "json_object"}

        payload.update(self._build_tools(req))

        if stream:
            payload["stream"] = True
            # Older compatible backends reject stream_options.
            if self.config.compatibility == "strict":
                payload["stream_options"] = {"include_usage": True}

        return self._merge_extra_body(payload)

    # -----------------------------
    # Response mapping
    # -----------------------------

    @staticmethod
    def _parse_tool_calls(message: Dict[str, Any]) -> List[ToolCall]:
        calls: List[ToolCall] = []
        for tc in message.get("tool_calls") or []:
            if not isinstance(tc, dict):
                continue
            fn = tc.get("function") or {}
            calls.append(
                ToolCall(
                    id=str(tc.get("id") or ""),
                    name=str(fn.get("name") or ""),
                    arguments=str(fn.get("arguments") or ""),
                )
            )
        return calls

    async def generate(self, req: LlmRequest) -> LlmResponse:
        payload = self.build_payload(req)
        resp = await self._client().post_json(
            "/chat/completions",
            payload=payload,
            headers=req.headers,
            timeout_seconds=req.timeout_seconds,
        )

        raw = resp.raw
        choices = raw.get("choices") or []
        c0 = (choices[0] or {}) if choices else {}
        message = c0.get("message") or {}
        content = message.get("content")

        return LlmResponse(
            provider=self.provider,
            model=str(raw.get("model") or self.model_id),
            latency_ms=int(resp.latency_ms),
            text=str(content) if content is not None else None,
            reasoning=_reasoning_of(message),
            tool_calls=self._parse_tool_calls(message),
            finish_reason=c0.get("finish_reason"),
            usage=parse_usage(raw) or LlmUsage(),
            raw=raw,
        )

    async def stream(self, req: LlmRequest) -> AsyncIterator[StreamEvent]:
        payload = self.build_payload(req, stream=True)

        # tool call fragments keyed by index: first fragment carries id + name
        pending: Dict[int, Dict[str, str]] = {}
        finish_reason: Optional[str] = None
        usage = None

        async for chunk in self._client().stream_json(
            "/chat/completions",
            payload=payload,
            headers=req.headers,
            timeout_seconds=req.timeout_seconds,
        ):
            if chunk.get("error"):
                err = chunk["error"]
                message = err.get("message") if isinstance(err, dict) else str(err)
                yield StreamEvent(type=StreamEventType.error, delta=str(message or ""), raw=chunk)
                continue

            usage = parse_usage(chunk) or usage

            choices = chunk.get("choices") or []
            if not choices:
                continue
            c0 = choices[0] or {}
            delta = c0.get("delta") or {}

            reasoning = _reasoning_of(delta)
            if reasoning:
                yield StreamEvent(type=StreamEventType.delta_reasoning, delta=reasoning, raw=chunk)

            text = delta.get("content")
            if text:
                yield StreamEvent(type=StreamEventType.delta_text, delta=str(text), raw=chunk)

            for frag in delta.get("tool_calls") or []:
                if not isinstance(frag, dict):
                    continue
                idx = int(frag.get("index") or 0)
                fn = frag.get("function") or {}
                slot = pending.setdefault(idx, {"id": "", "name": "", "arguments": ""})
                if frag.get("id"):
                    slot["id"] = str(frag["id"])
                if fn.get("name"):
                    slot["name"] = str(fn["name"])
                if fn.get("arguments"):
                    slot["arguments"] += str(fn["arguments"])

            if c0.get("finish_reason"):
                finish_reason = c0["finish_reason"]

        for idx in sorted(pending):
            yield StreamEvent(type=StreamEventType.tool_call, tool_call=ToolCall(**pending[idx]))

        yield StreamEvent(type=StreamEventType.completed, finish_reason=finish_reason, usage=usage)
