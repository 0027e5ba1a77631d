# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: LLM infrastructure error types (no business logic).

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class LlmError(Exception):
    """Base error for the provider adapter.

    Callers decide how to map it (HTTP status, retry, user message).
    """

    code: str
    message: str
    retryable: bool = False
    provider: Optional[str] = None
    http_status: int = 400
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}"


class LlmConfigError(LlmError):
    """Settings are invalid or the API key cannot be resolved."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="llm.config_error",
            message=message,
            retryable=False,
            http_status=400,
            details=details,
        )


class LlmUsageError(LlmError):
    """The public API was used in a way it does not support."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="llm.usage_error",
            message=message,
            retryable=False,
            http_status=400,
            details=details,
        )


class LlmProviderError(LlmError):
    def __init__(
        self,
        message: str,
        *,
        provider: Optional[str] = None,
        code: str = "llm.provider_error",
        retryable: bool = False,
        http_status: int = 502,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            retryable=retryable,
            provider=provider,
            http_status=http_status,
            details=details,
        )


class LlmTimeoutError(LlmProviderError):
    def __init__(self, message: str = "LLM request timed out", *, provider: Optional[str] = None):
        super().__init__(
            message,
            provider=provider,
            code="llm.timeout",
            retryable=True,
            http_status=504,
        )


class LlmAuthError(LlmProviderError):
    def __init__(self, message: str = "LLM authentication failed", *, provider: Optional[str] = None):
        super().__init__(
            message,
            provider=provider,
            code="llm.auth_failed",
            retryable=False,
            http_status=401,
        )


class LlmRateLimitError(LlmProviderError):
    def __init__(self, message: str = "LLM rate limited", *, provider: Optional[str] = None):
        super().__init__(
            message,
            provider=provider,
            code="llm.rate_limited",
            retryable=True,
            http_status=429,
        )


class LlmBadRequestError(LlmProviderError):
    def __init__(self, message: str = "LLM bad request", *, provider: Optional[str] = None, details=None):
        super().__init__(
            message,
            provider=provider,
            code="llm.bad_request",
            retryable=False,
            http_status=400,
            details=details,
        )


class LlmUnsupportedFunctionalityError(LlmProviderError):
    def __init__(self, functionality: str, *, provider: Optional[str] = None, details=None):
        super().__init__(
            f"'{functionality}' is not supported by this model",
            provider=provider,
            code="llm.unsupported_functionality",
            retryable=False,
            http_status=400,
            details=details,
        )
