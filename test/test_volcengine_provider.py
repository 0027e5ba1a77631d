# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Provider factory: base URL, routing, lazy API key, usage guard.

from __future__ import annotations

import pytest

from volcengine_provider import (
    COMPLETION_MODEL_ID,
    DEFAULT_BASE_URL,
    ChatSettings,
    LlmConfigError,
    LlmUsageError,
    ProviderSettings,
    VolcEngineChatLanguageModel,
    VolcEngineCompletionLanguageModel,
    VolcEngineProvider,
    create_volcengine,
    volcengine,
)


@pytest.fixture
def no_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VOLCENGINE_API_KEY", raising=False)


def test_default_base_url() -> None:
    provider = create_volcengine()
    model = provider.chat("doubao-pro-32k")

    assert provider.base_url == DEFAULT_BASE_URL
    assert model.config.url("/x") == DEFAULT_BASE_URL + "/x"


@pytest.mark.parametrize("raw", ["https://proxy.local/v1/", "https://proxy.local/v1///"])
def test_trailing_slashes_are_stripped(raw: str) -> None:
    provider = create_volcengine({"baseURL": raw})
    model = provider.chat("m")

    assert provider.base_url == "https://proxy.local/v1"
    assert model.config.url("/chat/completions") == "https://proxy.local/v1/chat/completions"
    assert "//chat" not in model.config.url("/chat/completions")


def test_deprecated_base_url_alias_is_used_as_fallback() -> None:
    assert create_volcengine({"baseUrl": "https://old.local/"}).base_url == "https://old.local"
    assert (
        create_volcengine({"baseURL": "https://new.local", "baseUrl": "https://old.local"}).base_url
        == "https://new.local"
    )


def test_reserved_model_id_routes_to_completion() -> None:
    provider = create_volcengine()

    assert isinstance(provider(COMPLETION_MODEL_ID), VolcEngineCompletionLanguageModel)
    assert isinstance(provider.language_model(COMPLETION_MODEL_ID), VolcEngineCompletionLanguageModel)
    assert provider(COMPLETION_MODEL_ID).provider == "openrouter.completion"


@pytest.mark.parametrize("model_id", ["doubao-pro-32k", "openai/gpt-4o", "openai/gpt-3.5-turbo"])
def test_other_model_ids_route_to_chat(model_id: str) -> None:
    provider = create_volcengine()

    assert isinstance(provider(model_id), VolcEngineChatLanguageModel)
    assert isinstance(provider.language_model(model_id), VolcEngineChatLanguageModel)
    assert provider(model_id).provider == "openrouter.chat"


def test_explicit_entry_points_ignore_routing() -> None:
    provider = create_volcengine()

    assert isinstance(provider.chat(COMPLETION_MODEL_ID), VolcEngineChatLanguageModel)
    assert isinstance(provider.completion("doubao-pro-32k"), VolcEngineCompletionLanguageModel)


def test_api_key_is_resolved_lazily(monkeypatch: pytest.MonkeyPatch, no_env_key: None) -> None:
    provider = create_volcengine()
    model = provider.chat("any-id")

    monkeypatch.setenv("VOLCENGINE_API_KEY", "env-key")

    assert model.config.headers()["Authorization"] == "Bearer env-key"


def test_missing_api_key_fails_only_when_headers_are_built(no_env_key: None) -> None:
    provider = create_volcengine()
    model = provider("any-id")

    with pytest.raises(LlmConfigError) as exc_info:
        model.config.headers()

    assert "VOLCENGINE_API_KEY" in exc_info.value.message


def test_explicit_api_key_wins_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VOLCENGINE_API_KEY", "env-key")
    model = create_volcengine({"apiKey": "explicit"}).chat("m")

    assert model.config.headers()["Authorization"] == "Bearer explicit"


def test_custom_headers_are_merged_after_authorization() -> None:
    provider = create_volcengine({"apiKey": "k", "headers": {"X-Trace": "1"}})
    headers = provider.chat("m").config.headers()

    assert headers == {"Authorization": "Bearer k", "X-Trace": "1"}

    overridden = create_volcengine({"apiKey": "k", "headers": {"Authorization": "Custom abc"}})
    assert overridden.chat("m").config.headers()["Authorization"] == "Custom abc"


def test_compatibility_defaults_to_compatible() -> None:
    assert create_volcengine().compatibility == "compatible"
    assert create_volcengine().chat("m").config.compatibility == "compatible"
    assert create_volcengine({"compatibility": "strict"}).chat("m").config.compatibility == "strict"


def test_invalid_settings_raise_config_error() -> None:
    with pytest.raises(LlmConfigError):
        create_volcengine({"compatibility": "loose"})

    with pytest.raises(LlmConfigError):
        create_volcengine({"unknown_option": True})


def test_invalid_model_settings_raise_config_error() -> None:
    provider = create_volcengine()

    with pytest.raises(LlmConfigError) as exc_info:
        provider.chat("m", {"bogus": 1})
    assert "errors" in exc_info.value.details

    with pytest.raises(LlmConfigError):
        provider.completion("m", {"echo": "not-a-bool"})
    with pytest.raises(LlmConfigError):
        provider(COMPLETION_MODEL_ID, {"bogus": 1})


def test_settings_model_is_accepted() -> None:
    provider = create_volcengine(ProviderSettings(base_url="https://a.local/", api_key="k"))

    assert provider.base_url == "https://a.local"


@pytest.mark.parametrize("model_id", [COMPLETION_MODEL_ID, "doubao-pro-32k"])
def test_direct_instantiation_is_rejected(model_id: str) -> None:
    with pytest.raises(LlmUsageError):
        VolcEngineProvider(model_id)

    provider = create_volcengine()
    with pytest.raises(LlmUsageError):
        type(provider)(model_id)


def test_models_are_fresh_and_independent() -> None:
    provider = create_volcengine({"apiKey": "k", "extraBody": {"a": 1}})
    settings = ChatSettings(user="u1")

    m1 = provider.chat("m", settings)
    m2 = provider.chat("m", settings)

    assert m1 is not m2
    assert m1.settings is not m2.settings
    assert m1.settings == m2.settings

    h1 = m1.config.headers()
    h1["X-Mutated"] = "yes"
    assert "X-Mutated" not in m2.config.headers()

    m1.config.extra_body["b"] = 2
    assert m2.config.extra_body == {"a": 1}


def test_default_instance_reads_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VOLCENGINE_API_KEY", "default-key")

    model = volcengine("doubao-pro-32k")

    assert model.config.url("/chat/completions") == DEFAULT_BASE_URL + "/chat/completions"
    assert model.config.headers()["Authorization"] == "Bearer default-key"
