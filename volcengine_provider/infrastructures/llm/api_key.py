# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: API key lookup and URL helpers shared by providers.

from __future__ import annotations

import os
from typing import Optional

from volcengine_provider.infrastructures.llm.errors import LlmConfigError


def load_api_key(
    *,
    api_key: Optional[str],
    environment_variable_name: str,
    description: str,
) -> str:
    """Return the explicit key, else the env var value read right now.

    Called from header suppliers, so a missing key surfaces at request time.
    """

    if isinstance(api_key, str):
        return api_key

    if api_key is not None:
        raise LlmConfigError(f"{description} API key must be a string.")

    env_value = os.getenv(environment_variable_name)
    if env_value is None:
        raise LlmConfigError(
            f"{description} API key is missing. Pass it using the 'api_key' parameter "
            f"or the {environment_variable_name} environment variable.",
            details={"environment_variable": environment_variable_name},
        )
    return env_value


def without_trailing_slash(url: Optional[str]) -> Optional[str]:
    if url is None:
        return None
    return url.rstrip("/")
