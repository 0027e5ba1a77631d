# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Provider-level settings contract (base URL / key / headers / compatibility).

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

import httpx
from pydantic import ConfigDict, Field

from volcengine_provider.domains.domain_base import DomainModel

Compatibility = Literal["strict", "compatible"]


class ProviderSettings(DomainModel):
    """Settings accepted by `create_volcengine` and the legacy `VolcEngine` class.

    Both snake_case names and the camelCase aliases (`baseURL`, `apiKey`,
    `extraBody`, ...) are accepted, so a dict copied from a JS config works as-is.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        protected_namespaces=(),
        arbitrary_types_allowed=True,
    )

    # Base URL for API calls, e.g. a proxy. Trailing slashes are stripped by the provider.
    base_url: Optional[str] = Field(default=None, alias="baseURL")
    # Deprecated spelling, only used when `base_url` is absent.
    base_url_deprecated: Optional[str] = Field(default=None, alias="baseUrl")

    # Sent as `Authorization: Bearer ...`. Falls back to VOLCENGINE_API_KEY at request time.
    api_key: Optional[str] = Field(default=None, alias="apiKey")
    headers: Dict[str, str] = Field(default_factory=dict)

    # `strict` sends newer fields such as stream_options; `compatible` omits them.
    compatibility: Optional[Compatibility] = Field(default=None)

    # Custom transport, e.g. httpx.MockTransport in tests or a proxying transport.
    fetch: Optional[httpx.AsyncBaseTransport] = Field(default=None)

    extra_body: Dict[str, Any] = Field(default_factory=dict, alias="extraBody")
