# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Shared base for VolcEngine language models (config contract + payload helpers).

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Callable, Dict, Generic, Optional, Type, TypeVar, Union

import httpx
from pydantic import ValidationError

from volcengine_provider.domains.domain_base import DomainModel
from volcengine_provider.domains.llm_request_domain import LlmRequest, LlmResponse, LlmUsage, StreamEvent
from volcengine_provider.infrastructures.llm.clients.openai_compatible_client import OpenAICompatibleClient
from volcengine_provider.infrastructures.llm.errors import LlmConfigError

SettingsT = TypeVar("SettingsT", bound=DomainModel)


@dataclass(frozen=True)
class ModelConfig:
    """Everything a model needs from its provider.

    `headers` is called on every request and returns a fresh dict each time.
    """

    provider: str
    url: Callable[[str], str]
    headers: Callable[[], Dict[str, str]]
    compatibility: str = "compatible"
    fetch: Optional[httpx.AsyncBaseTransport] = None
    extra_body: Dict[str, Any] = field(default_factory=dict)


def parse_usage(raw: Dict[str, Any]) -> Optional[LlmUsage]:
    u = raw.get("usage")
    if not isinstance(u, dict):
        return None
    try:
        inp = int(u.get("prompt_tokens") or 0)
    except (TypeError, ValueError):
        inp = 0
    try:
        out = int(u.get("completion_tokens") or 0)
    except (TypeError, ValueError):
        out = 0
    try:
        tot = int(u.get("total_tokens") or (inp + out))
    except (TypeError, ValueError):
        tot = inp + out
    return LlmUsage(input_tokens=inp, output_tokens=out, total_tokens=tot)


class LanguageModelBase(ABC, Generic[SettingsT]):
    """Base for chat/completion models.

    A model is a cheap value object: it holds its id, a private copy of its
    settings and the provider config. HTTP happens only in generate()/stream().
    """

    specification_version = "v1"
    default_object_generation_mode: Optional[str] = None
    settings_class: Type[SettingsT]

    def __init__(
        self,
        model_id: str,
        settings: Union[SettingsT, Dict[str, Any], None],
        config: ModelConfig,
    ) -> None:
        self.model_id = model_id
        self.settings: SettingsT = self._copy_settings(settings)
        self.config = config

    @classmethod
    def _copy_settings(cls, settings: Union[SettingsT, Dict[str, Any], None]) -> SettingsT:
        if settings is None:
            return cls.settings_class()
        if isinstance(settings, cls.settings_class):
            return settings.model_copy(deep=True)
        try:
            return cls.settings_class.model_validate(settings)
        except ValidationError as e:
            raise LlmConfigError(f"invalid {cls.settings_class.__name__}", details={"errors": e.errors()}) from e

    @property
    def provider(self) -> str:
        return self.config.provider

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model_id={self.model_id!r}, provider={self.provider!r})"

    def _client(self) -> OpenAICompatibleClient:
        return OpenAICompatibleClient(
            url=self.config.url,
            headers=self.config.headers,
            provider_tag=self.provider,
            transport=self.config.fetch,
        )

    @staticmethod
    def _sampling_options(req: LlmRequest) -> Dict[str, Any]:
        opts: Dict[str, Any] = {
            "max_tokens": req.max_tokens,
            "temperature": req.temperature,
            "top_p": req.top_p,
            "frequency_penalty": req.frequency_penalty,
            "presence_penalty": req.presence_penalty,
            "seed": req.seed,
            "stop": list(req.stop) or None,
        }
        return {k: v for k, v in opts.items() if v is not None}

    def _merge_extra_body(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        # provider extra_body first, model extra_body last
        payload.update(self.config.extra_body or {})
        payload.update(getattr(self.settings, "extra_body", None) or {})
        return payload

    @abstractmethod
    def build_payload(self, req: LlmRequest, *, stream: bool = False) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def generate(self, req: LlmRequest) -> LlmResponse:
        raise NotImplementedError

    @abstractmethod
    def stream(self, req: LlmRequest) -> AsyncIterator[StreamEvent]:
        raise NotImplementedError
