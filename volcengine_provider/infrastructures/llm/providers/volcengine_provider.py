# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: VolcEngine provider factory (config assembly + model construction).

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from volcengine_provider.domains.llm_model_settings_domain import (
    COMPLETION_MODEL_ID,
    ChatSettings,
    CompletionSettings,
)
from volcengine_provider.domains.provider_settings_domain import ProviderSettings
from volcengine_provider.infrastructures.llm.api_key import load_api_key, without_trailing_slash
from volcengine_provider.infrastructures.llm.errors import LlmConfigError, LlmUsageError
from volcengine_provider.infrastructures.llm.models import (
    ModelConfig,
    VolcEngineChatLanguageModel,
    VolcEngineCompletionLanguageModel,
)
from volcengine_provider.infrastructures.vlogger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://ark.cn-beijing.volces.com/api/v3"
API_KEY_ENV_VAR = "VOLCENGINE_API_KEY"
DEFAULT_COMPATIBILITY = "compatible"

CHAT_PROVIDER_TAG = "openrouter.chat"
COMPLETION_PROVIDER_TAG = "openrouter.completion"

SettingsInput = Union[ProviderSettings, Mapping[str, Any], None]


def coerce_provider_settings(settings: SettingsInput) -> ProviderSettings:
    if settings is None:
        return ProviderSettings()
    if isinstance(settings, ProviderSettings):
        return settings
    try:
        return ProviderSettings.model_validate(dict(settings))
    except ValidationError as e:
        raise LlmConfigError("invalid VolcEngine provider settings", details={"errors": e.errors()}) from e


def make_header_supplier(api_key: Optional[str], headers: Mapping[str, str]) -> Callable[[], Dict[str, str]]:
    """Build the per-request header function.

    The key is looked up on every call; caller headers are applied after
    Authorization, so an explicit `Authorization` entry wins.
    """

    custom = dict(headers)

    def get_headers() -> Dict[str, str]:
        key = load_api_key(
            api_key=api_key,
            environment_variable_name=API_KEY_ENV_VAR,
            description="VolcEngine",
        )
        return {"Authorization": f"Bearer {key}", **custom}

    return get_headers


@dataclass(frozen=True)
class ResolvedConfig:
    base_url: str
    compatibility: str
    headers: Callable[[], Dict[str, str]]
    fetch: Optional[httpx.AsyncBaseTransport] = None
    extra_body: Dict[str, Any] = field(default_factory=dict)

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def model_config(self, provider_tag: str) -> ModelConfig:
        return ModelConfig(
            provider=provider_tag,
            url=self.url,
            headers=self.headers,
            compatibility=self.compatibility,
            fetch=self.fetch,
            extra_body=dict(self.extra_body),
        )


def resolve_provider_config(settings: ProviderSettings) -> ResolvedConfig:
    """Shared by the factory and the legacy class so their defaults cannot drift."""

    base_url = without_trailing_slash(settings.base_url or settings.base_url_deprecated) or DEFAULT_BASE_URL
    return ResolvedConfig(
        base_url=base_url,
        compatibility=settings.compatibility or DEFAULT_COMPATIBILITY,
        headers=make_header_supplier(settings.api_key, settings.headers),
        fetch=settings.fetch,
        extra_body=dict(settings.extra_body),
    )


class VolcEngineProvider:
    """Callable provider returned by `create_volcengine`.

    `provider(model_id)` and `provider.language_model(model_id)` are the same:
    `openai/gpt-3.5-turbo-instruct` gets a completion model, every other id a chat model.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise LlmUsageError(
            "The VolcEngine provider cannot be instantiated directly. "
            "Use create_volcengine() and call the returned provider instead."
        )

    @classmethod
    def _from_config(cls, config: ResolvedConfig) -> "VolcEngineProvider":
        self = object.__new__(cls)
        self._config = config
        return self

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def compatibility(self) -> str:
        return self._config.compatibility

    def __call__(
        self,
        model_id: str,
        settings: Union[ChatSettings, CompletionSettings, Dict[str, Any], None] = None,
    ) -> Union[VolcEngineChatLanguageModel, VolcEngineCompletionLanguageModel]:
        return self.language_model(model_id, settings)

    def language_model(
        self,
        model_id: str,
        settings: Union[ChatSettings, CompletionSettings, Dict[str, Any], None] = None,
    ) -> Union[VolcEngineChatLanguageModel, VolcEngineCompletionLanguageModel]:
        if model_id == COMPLETION_MODEL_ID:
            return self.completion(model_id, settings)
        return self.chat(model_id, settings)

    def chat(
        self,
        model_id: str,
        settings: Union[ChatSettings, Dict[str, Any], None] = None,
    ) -> VolcEngineChatLanguageModel:
        return VolcEngineChatLanguageModel(model_id, settings, self._config.model_config(CHAT_PROVIDER_TAG))

    def completion(
        self,
        model_id: str,
        settings: Union[CompletionSettings, Dict[str, Any], None] = None,
    ) -> VolcEngineCompletionLanguageModel:
        return VolcEngineCompletionLanguageModel(
            model_id, settings, self._config.model_config(COMPLETION_PROVIDER_TAG)
        )

    def __repr__(self) -> str:
        return f"VolcEngineProvider(base_url={self.base_url!r}, compatibility={self.compatibility!r})"


def create_volcengine(settings: SettingsInput = None) -> VolcEngineProvider:
    """Create a VolcEngine provider instance.

    No network or environment access happens here; the API key is resolved
    when a model builds its request headers.
    """

    config = resolve_provider_config(coerce_provider_settings(settings))
    logger.debug("volcengine provider created base_url=%s compatibility=%s", config.base_url, config.compatibility)
    return VolcEngineProvider._from_config(config)


# Default instance; the key comes from VOLCENGINE_API_KEY at request time.
volcengine = create_volcengine()
