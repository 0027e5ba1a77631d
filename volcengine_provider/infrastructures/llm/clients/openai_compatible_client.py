# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: OpenAI-compatible HTTP client (chat/completions + completions).

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable, Dict, Optional

import httpx

from volcengine_provider.infrastructures.llm.errors import (
    LlmAuthError,
    LlmBadRequestError,
    LlmError,
    LlmProviderError,
    LlmRateLimitError,
    LlmTimeoutError,
)
from volcengine_provider.infrastructures.vconfig import get_config
from volcengine_provider.infrastructures.vlogger import get_logger

logger = get_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class OpenAICompatResponse:
    raw: Dict[str, Any]
    latency_ms: int


class OpenAICompatibleClient:
    """Minimal OpenAI-compatible client driven by a model config.

    Notes:
      - URL and headers come from callables, so the API key is resolved per request.
      - One httpx.AsyncClient per request; nothing is pooled across calls.
      - `transport` replaces the network layer (httpx.MockTransport in tests).
    """

    def __init__(
        self,
        *,
        url: Callable[[str], str],
        headers: Callable[[], Dict[str, str]],
        provider_tag: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_seconds: Optional[int] = None,
    ) -> None:
        self._url = url
        self._headers_supplier = headers
        self.provider_tag = provider_tag
        self._transport = transport
        self.timeout_seconds = max(1, int(timeout_seconds or get_config().timeout_seconds))

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        h = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        h.update(self._headers_supplier())
        if extra:
            h.update(extra)
        return h

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport)

    def _raise_for_status(self, status_code: int, body: str) -> None:
        if status_code in (401, 403):
            raise LlmAuthError(provider=self.provider_tag)
        if status_code == 429:
            raise LlmRateLimitError(provider=self.provider_tag)
        if 400 <= status_code < 500:
            try:
                j = json.loads(body)
            except ValueError:
                j = {"text": body[:5000]}
            raise LlmBadRequestError("bad request", provider=self.provider_tag, details=j)
        if status_code >= 500:
            raise LlmProviderError(
                f"upstream error: {status_code}",
                provider=self.provider_tag,
                retryable=True,
                http_status=502,
                details={"status_code": status_code, "text": body[:5000]},
            )

    def _log_request(self, url: str, status: Any, t0: int) -> None:
        if get_config().log_requests:
            logger.info("http POST %s -> %s %sms", url, status, _now_ms() - t0)

    async def post_json(
        self,
        path: str,
        *,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        timeout_seconds: Optional[int] = None,
    ) -> OpenAICompatResponse:
        url = self._url(path)
        # Built before any I/O so a missing key raises LlmConfigError unwrapped.
        req_headers = self._headers(headers)
        timeout = httpx.Timeout(float(timeout_seconds or self.timeout_seconds))

        t0 = _now_ms()
        try:
            async with self._client() as client:
                resp = await client.post(url, headers=req_headers, json=payload, timeout=timeout)
        except httpx.TimeoutException as e:
            raise LlmTimeoutError(provider=self.provider_tag) from e
        except httpx.HTTPError as e:
            raise LlmProviderError(str(e), provider=self.provider_tag, retryable=True) from e

        self._log_request(url, resp.status_code, t0)
        self._raise_for_status(resp.status_code, resp.text)

        try:
            j = resp.json()
        except ValueError as e:
            raise LlmProviderError(
                "invalid json from upstream",
                provider=self.provider_tag,
                retryable=True,
                details={"text": resp.text[:5000]},
            ) from e

        if not isinstance(j, dict):
            raise LlmProviderError(
                "unexpected json shape from upstream",
                provider=self.provider_tag,
                details={"text": resp.text[:5000]},
            )

        return OpenAICompatResponse(raw=j, latency_ms=_now_ms() - t0)

    async def stream_json(
        self,
        path: str,
        *,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        timeout_seconds: Optional[int] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Yield JSON chunks from an OpenAI-compatible SSE stream.

        Each yielded element is the parsed JSON dict for a single SSE `data:` line.
        """

        url = self._url(path)
        req_headers = self._headers(headers)
        timeout = httpx.Timeout(float(timeout_seconds or self.timeout_seconds), read=None)

        t0 = _now_ms()
        try:
            async with self._client() as client:
                async with client.stream("POST", url, headers=req_headers, json=payload, timeout=timeout) as resp:
                    self._log_request(url, resp.status_code, t0)
                    if resp.status_code >= 400:
                        txt = (await resp.aread()).decode("utf-8", errors="ignore")
                        self._raise_for_status(resp.status_code, txt)

                    # SSE is line-based; aiter_lines also flushes a final frame without a trailing newline.
                    async for line in resp.aiter_lines():
                        line = line.strip()
                        if not line or not line.startswith("data:"):
                            continue
                        data = line[len("data:") :].strip()
                        if not data:
                            continue
                        if data == "[DONE]":
                            return
                        try:
                            parsed = json.loads(data)
                        except ValueError:
                            # Some gateways send keep-alive or partial lines; skip them.
                            logger.debug("skip non-json sse line: %s", data[:200])
                            continue
                        if not isinstance(parsed, dict):
                            logger.debug("skip non-object sse chunk: %s", data[:200])
                            continue
                        yield parsed
        except LlmError:
            raise
        except httpx.TimeoutException as e:
            raise LlmTimeoutError(provider=self.provider_tag) from e
        except httpx.HTTPError as e:
            raise LlmProviderError(str(e), provider=self.provider_tag, retryable=True) from e
