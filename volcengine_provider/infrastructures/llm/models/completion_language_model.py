# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Completion model over OpenAI-compatible `/completions`.

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from volcengine_provider.domains.llm_model_settings_domain import CompletionSettings
from volcengine_provider.domains.llm_request_domain import (
    LlmOutputFormat,
    LlmRequest,
    LlmResponse,
    LlmRole,
    LlmUsage,
    StreamEvent,
    StreamEventType,
)
from volcengine_provider.infrastructures.llm.errors import LlmBadRequestError, LlmUnsupportedFunctionalityError
from volcengine_provider.infrastructures.llm.models.model_base import LanguageModelBase, parse_usage


class VolcEngineCompletionLanguageModel(LanguageModelBase[CompletionSettings]):
    settings_class = CompletionSettings

    # -----------------------------
    # Payload builders
    # -----------------------------

    def _to_prompt(self, req: LlmRequest) -> Tuple[str, List[str]]:
        """Flatten the request into a completion prompt and extra stop sequences.

        A lone user turn is sent verbatim. Anything else becomes a
        `user:` / `assistant:` transcript that ends with an open assistant turn.
        """

        turns: List[Tuple[LlmRole, str]] = []
        if req.system_prompt:
            turns.append((LlmRole.system, req.system_prompt))
        for m in req.messages:
            if m.role == LlmRole.tool:
                raise LlmUnsupportedFunctionalityError("tool messages", provider=self.provider)
            if m.tool_calls:
                raise LlmUnsupportedFunctionalityError("tool-call messages", provider=self.provider)
            turns.append((m.role, m.content))
        if req.prompt:
            turns.append((LlmRole.user, req.prompt))

        if len(turns) == 1 and turns[0][0] == LlmRole.user:
            return turns[0][1], []

        text = ""
        for i, (role, content) in enumerate(turns):
            if role == LlmRole.system:
                if i != 0:
                    raise LlmBadRequestError(
                        "system message is only allowed as the first message",
                        provider=self.provider,
                    )
                text += f"{content}\n\n"
            else:
                text += f"{role.value}:\n{content}\n\n"
        text += "assistant:\n"

        return text, ["\nuser:"]

    def _settings_fields(self) -> Dict[str, Any]:
        s = self.settings
        fields: Dict[str, Any] = {}
        if s.echo is not None:
            fields["echo"] = s.echo
        if s.logit_bias:
            fields["logit_bias"] = dict(s.logit_bias)
        # completions take a count: True means 0 (sampled token only)
        if isinstance(s.logprobs, bool):
            if s.logprobs:
                fields["logprobs"] = 0
        elif isinstance(s.logprobs, int):
            fields["logprobs"] = s.logprobs
        if s.suffix is not None:
            fields["suffix"] = s.suffix
        if s.user is not None:
            fields["user"] = s.user
        if s.models:
            fields["models"] = list(s.models)
        if s.include_reasoning is not None:
            fields["include_reasoning"] = s.include_reasoning
        return fields

    def build_payload(self, req: LlmRequest, *, stream: bool = False) -> Dict[str, Any]:
        if req.tools:
            raise LlmUnsupportedFunctionalityError("tools", provider=self.provider)
        if req.tool_choice:
            raise LlmUnsupportedFunctionalityError("tool_choice", provider=self.provider)
        if req.output_format == LlmOutputFormat.json:
            raise LlmUnsupportedFunctionalityError("json response format", provider=self.provider)

        prompt, stop = self._to_prompt(req)
        payload: Dict[str, Any] = {
            "model": self.model_id,
            "prompt": prompt,
        }
        payload.update(self._settings_fields())
        payload.update(self._sampling_options(req))

        all_stop = list(req.stop) + [s for s in stop if s not in req.stop]
        if all_stop:
            payload["stop"] = all_stop

        if stream:
            payload["stream"] = True
            if self.config.compatibility == "strict":
                payload["stream_options"] = {"include_usage": True}

        return self._merge_extra_body(payload)

    # -----------------------------
    # Response mapping
    # -----------------------------

    async def generate(self, req: LlmRequest) -> LlmResponse:
        payload = self.build_payload(req)
        resp = await self._client().post_json(
            "/completions",
            payload=payload,
            headers=req.headers,
            timeout_seconds=req.timeout_seconds,
        )

        raw = resp.raw
        choices = raw.get("choices") or []
        c0 = (choices[0] or {}) if choices else {}
        text = c0.get("text")

        return LlmResponse(
            provider=self.provider,
            model=str(raw.get("model") or self.model_id),
            latency_ms=int(resp.latency_ms),
            text=str(text) if text is not None else None,
            reasoning=c0.get("reasoning") or None,
            finish_reason=c0.get("finish_reason"),
            usage=parse_usage(raw) or LlmUsage(),
            raw=raw,
        )

    async def stream(self, req: LlmRequest) -> AsyncIterator[StreamEvent]:
        payload = self.build_payload(req, stream=True)
        finish_reason: Optional[str] = None
        usage = None

        async for chunk in self._client().stream_json(
            "/completions",
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

            if c0.get("reasoning"):
                yield StreamEvent(type=StreamEventType.delta_reasoning, delta=str(c0["reasoning"]), raw=chunk)
            if c0.get("text"):
                yield StreamEvent(type=StreamEventType.delta_text, delta=str(c0["text"]), raw=chunk)
            if c0.get("finish_reason"):
                finish_reason = c0["finish_reason"]

        yield StreamEvent(type=StreamEventType.completed, finish_reason=finish_reason, usage=usage)
