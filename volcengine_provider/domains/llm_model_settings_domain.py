# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Per-model settings for chat / completion language models.

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import ConfigDict, Field

from volcengine_provider.domains.domain_base import DomainModel

# The only model id routed to the completion endpoint by the provider callable.
COMPLETION_MODEL_ID = "openai/gpt-3.5-turbo-instruct"


class _ModelSettingsBase(DomainModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        protected_namespaces=(),
    )

    # token id -> bias (-100..100)
    logit_bias: Dict[str, float] = Field(default_factory=dict, alias="logitBias")

    # True returns logprobs of sampled tokens; an int returns the top-N logprobs.
    logprobs: Optional[Union[bool, int]] = Field(default=None)

    # End-user identifier forwarded for abuse monitoring.
    user: Optional[str] = Field(default=None)

    # Fallback model list for routing gateways.
    models: List[str] = Field(default_factory=list)
    include_reasoning: Optional[bool] = Field(default=None, alias="includeReasoning")

    # Merged into the request body after the provider-level extra_body.
    extra_body: Dict[str, Any] = Field(default_factory=dict, alias="extraBody")


class ChatSettings(_ModelSettingsBase):
    parallel_tool_calls: Optional[bool] = Field(default=None, alias="parallelToolCalls")


class CompletionSettings(_ModelSettingsBase):
    # Echo back the prompt in addition to the completion.
    echo: Optional[bool] = Field(default=None)
    # Text appended after the generated completion.
    suffix: Optional[str] = Field(default=None)
