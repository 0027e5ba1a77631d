# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Deprecated class-style VolcEngine provider (kept for backward compatibility).

from __future__ import annotations

import warnings
from typing import Any, Dict, Optional, Union

from volcengine_provider.domains.llm_model_settings_domain import ChatSettings, CompletionSettings
from volcengine_provider.infrastructures.llm.models import (
    VolcEngineChatLanguageModel,
    VolcEngineCompletionLanguageModel,
)
from volcengine_provider.infrastructures.llm.providers.volcengine_provider import (
    CHAT_PROVIDER_TAG,
    COMPLETION_PROVIDER_TAG,
    ResolvedConfig,
    SettingsInput,
    coerce_provider_settings,
    resolve_provider_config,
)


class VolcEngine:
    """Deprecated: use `create_volcengine` instead.

    Same defaults as the factory. The header supplier is rebuilt for every
    model, and there is no callable form or completion-id routing.
    """

    def __init__(self, settings: SettingsInput = None) -> None:
        warnings.warn(
            "VolcEngine is deprecated, use create_volcengine() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        self._settings = coerce_provider_settings(settings)

        resolved = resolve_provider_config(self._settings)
        self.base_url: str = resolved.base_url
        self.api_key: Optional[str] = self._settings.api_key
        self.headers: Dict[str, str] = dict(self._settings.headers)

    @property
    def _base_config(self) -> ResolvedConfig:
        current = self._settings.model_copy(
            update={"base_url": self.base_url, "api_key": self.api_key, "headers": dict(self.headers)}
        )
        return resolve_provider_config(current)

    def chat(
        self,
        model_id: str,
        settings: Union[ChatSettings, Dict[str, Any], None] = None,
    ) -> VolcEngineChatLanguageModel:
        return VolcEngineChatLanguageModel(model_id, settings, self._base_config.model_config(CHAT_PROVIDER_TAG))

    def completion(
        self,
        model_id: str,
        settings: Union[CompletionSettings, Dict[str, Any], None] = None,
    ) -> VolcEngineCompletionLanguageModel:
        return VolcEngineCompletionLanguageModel(
            model_id, settings, self._base_config.model_config(COMPLETION_PROVIDER_TAG)
        )
