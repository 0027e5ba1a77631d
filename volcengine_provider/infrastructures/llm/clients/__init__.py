# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: LLM HTTP clients (infrastructure only).

from volcengine_provider.infrastructures.llm.clients.openai_compatible_client import (
    OpenAICompatibleClient,
    OpenAICompatResponse,
)

__all__ = [
    "OpenAICompatibleClient",
    "OpenAICompatResponse",
]
