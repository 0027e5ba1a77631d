# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Provider entry points.

from volcengine_provider.infrastructures.llm.providers.volcengine_provider import (
    API_KEY_ENV_VAR,
    DEFAULT_BASE_URL,
    ResolvedConfig,
    VolcEngineProvider,
    create_volcengine,
    resolve_provider_config,
    volcengine,
)
from volcengine_provider.infrastructures.llm.providers.volcengine_facade import VolcEngine

__all__ = [
    "API_KEY_ENV_VAR",
    "DEFAULT_BASE_URL",
    "ResolvedConfig",
    "VolcEngine",
    "VolcEngineProvider",
    "create_volcengine",
    "resolve_provider_config",
    "volcengine",
]
