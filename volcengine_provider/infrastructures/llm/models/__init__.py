# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Language models (chat / completion).

from volcengine_provider.infrastructures.llm.models.model_base import LanguageModelBase, ModelConfig
from volcengine_provider.infrastructures.llm.models.chat_language_model import VolcEngineChatLanguageModel
from volcengine_provider.infrastructures.llm.models.completion_language_model import (
    VolcEngineCompletionLanguageModel,
)

__all__ = [
    "LanguageModelBase",
    "ModelConfig",
    "VolcEngineChatLanguageModel",
    "VolcEngineCompletionLanguageModel",
]
