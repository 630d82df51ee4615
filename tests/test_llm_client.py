# tests/test_llm_client.py

from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest

from zenith_tasker.llm.client import OpenRouterLLMClient, friendly_llm_error_message


def _settings(**overrides) -> SimpleNamespace:
    base = dict(
        openrouter_api_key="sk-test",
        openrouter_base_url="https://openrouter.example/api/v1",
        llm_models=["first/model", "second/model"],
        extra_headers={"X-Title": "Zenith Tasker"},
        llm_connect_timeout=1.0,
        llm_read_timeout=2.0,
    )
    base.update(overrides)
    return SimpleNamespace(**base)


def _chunk(text: str | None) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])


def _status_error(cls: type[openai.APIStatusError], code: int) -> openai.APIStatusError:
    request = httpx.Request("POST", "https://openrouter.example/api/v1/chat/completions")
    return cls("error", response=httpx.Response(code, request=request), body=None)


class _FakeCompletions:
    def __init__(self, outcomes: dict[str, object]) -> None:
        self.outcomes = outcomes
        self.models: list[str] = []

    def create(self, *, model: str, **kwargs):
        self.models.append(model)
        outcome = self.outcomes[model]
        if isinstance(outcome, Exception):
            raise outcome
        return iter(outcome)


def _client_with(outcomes: dict[str, object], **overrides) -> tuple[OpenRouterLLMClient, _FakeCompletions]:
    client = OpenRouterLLMClient(_settings(**overrides))
    completions = _FakeCompletions(outcomes)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


def test_missing_key_raises_config_error() -> None:
    with pytest.raises(RuntimeError) as exc:
        OpenRouterLLMClient(_settings(openrouter_api_key="  "))
    assert "missing API key" in friendly_llm_error_message(exc.value)


def test_complete_joins_chunks() -> None:
    client, completions = _client_with({"first/model": [_chunk("- a"), _chunk(None), _chunk("\n- b")]})
    assert client.complete("tasks") == "- a\n- b"
    assert completions.models == ["first/model"]


def test_falls_back_after_not_found_and_skips_model_afterwards() -> None:
    client, completions = _client_with(
        {
            "first/model": _status_error(openai.NotFoundError, 404),
            "second/model": [_chunk("ok")],
        }
    )

    assert client.complete("x") == "ok"
    assert client.complete("y") == "ok"
    assert completions.models == ["first/model", "second/model", "second/model"]


def test_auth_error_fails_fast() -> None:
    client, completions = _client_with(
        {
            "first/model": _status_error(openai.AuthenticationError, 401),
            "second/model": [_chunk("never")],
        }
    )

    with pytest.raises(RuntimeError, match="authentication failed"):
        client.complete("x")
    assert completions.models == ["first/model"]


def test_all_models_rate_limited() -> None:
    client, _ = _client_with(
        {
            "first/model": _status_error(openai.RateLimitError, 429),
            "second/model": _status_error(openai.RateLimitError, 429),
        }
    )
    with pytest.raises(RuntimeError, match="rate-limited"):
        client.complete("x")


def test_empty_model_list() -> None:
    client, _ = _client_with({}, llm_models=[])
    with pytest.raises(RuntimeError) as exc:
        client.complete("x")
    assert "no models" in friendly_llm_error_message(exc.value)
