# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: VolcEngine (OpenAI-compatible) provider adapter.

from volcengine_provider.domains.llm_model_settings_domain import (
    COMPLETION_MODEL_ID,
    ChatSettings,
    CompletionSettings,
)
from volcengine_provider.domains.llm_request_domain import (
    LlmMessage,
    LlmOutputFormat,
    LlmRequest,
    LlmResponse,
    LlmRole,
    LlmUsage,
    StreamEvent,
    StreamEventType,
    ToolCall,
    ToolDefinition,
)
from volcengine_provider.domains.provider_settings_domain import ProviderSettings
from volcengine_provider.infrastructures.llm.errors import (
    LlmAuthError,
    LlmBadRequestError,
    LlmConfigError,
    LlmError,
    LlmProviderError,
    LlmRateLimitError,
    LlmTimeoutError,
    LlmUnsupportedFunctionalityError,
    LlmUsageError,
)
from volcengine_provider.infrastructures.llm.models import (
    VolcEngineChatLanguageModel,
    VolcEngineCompletionLanguageModel,
)
from volcengine_provider.infrastructures.llm.providers import (
    API_KEY_ENV_VAR,
    DEFAULT_BASE_URL,
    VolcEngine,
    VolcEngineProvider,
    create_volcengine,
    volcengine,
)
from volcengine_provider.infrastructures.vlogger import init_logging, init_logging_from_config

__all__ = [
    "API_KEY_ENV_VAR",
    "COMPLETION_MODEL_ID",
    "DEFAULT_BASE_URL",
    "ChatSettings",
    "CompletionSettings",
    "LlmAuthError",
    "LlmBadRequestError",
    "LlmConfigError",
    "LlmError",
    "LlmMessage",
    "LlmOutputFormat",
    "LlmProviderError",
    "LlmRateLimitError",
    "LlmRequest",
    "LlmResponse",
    "LlmRole",
    "LlmTimeoutError",
    "LlmUnsupportedFunctionalityError",
    "LlmUsage",
    "LlmUsageError",
    "ProviderSettings",
    "StreamEvent",
    "StreamEventType",
    "ToolCall",
    "ToolDefinition",
    "VolcEngine",
    "VolcEngineChatLanguageModel",
    "VolcEngineCompletionLanguageModel",
    "VolcEngineProvider",
    "create_volcengine",
    "init_logging",
    "init_logging_from_config",
    "volcengine",
]
