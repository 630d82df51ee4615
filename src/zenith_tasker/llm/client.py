# src/zenith_tasker/llm/client.py

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

import httpx
import openai
from openai import OpenAI

from ..core.ports import ChatMessage

logger = logging.getLogger(__name__)

# How long a model that answered 404 is skipped.
BAD_MODEL_COOLDOWN_SECONDS = 3600.0


def _is_auth_error(exc: Exception) -> bool:
    return isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError))


def _is_rate_limit_error(exc: Exception) -> bool:
    return isinstance(exc, openai.RateLimitError)


def _is_connection_error(exc: Exception) -> bool:
    # APITimeoutError is a subclass of APIConnectionError.
    return isinstance(exc, (openai.APIConnectionError, httpx.TimeoutException))


def _is_not_found_error(exc: Exception) -> bool:
    return isinstance(exc, openai.NotFoundError)


def friendly_llm_error_message(err: Exception) -> str:
    msg = str(err).strip() or "LLM error."
    if "LLM API key is not set" in msg:
        return "LLM is not configured (missing API key). Set ZENITH_OPENROUTER_API_KEY in .env."
    if "LLM model list is empty" in msg:
        return "LLM is not configured (no models). Set ZENITH_LLM_MODELS in .env."
    if "LLM base URL is not set" in msg:
        return "LLM is not configured (missing base URL). Set ZENITH_OPENROUTER_BASE_URL in .env."
    return msg


def _close_stream(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if callable(close):
        try:
            close()
        except Exception:
            logger.debug("Stream close failed.", exc_info=True)


class OpenRouterLLMClient:
    """
    OpenAI-compatible chat client (OpenRouter by default).

    Models from settings.llm_models are tried in order:
    - 404 (model not available) -> skip it for an hour, try next
    - rate limit / network issues -> try next
    - auth issues -> fail fast

    The SDK's own retries are disabled so fallback across models is quick.
    """

    def __init__(self, settings: Any) -> None:
        api_key = getattr(settings, "openrouter_api_key", None)
        base_url = str(getattr(settings, "openrouter_base_url", "") or "")

        if not api_key or not str(api_key).strip():
            raise RuntimeError("LLM API key is not set. Set ZENITH_OPENROUTER_API_KEY in your .env.")
        if not base_url.strip():
            raise RuntimeError("LLM base URL is not set. Set ZENITH_OPENROUTER_BASE_URL in your .env.")

        connect_s = float(getattr(settings, "llm_connect_timeout", 5.0))
        read_s = float(getattr(settings, "llm_read_timeout", 60.0))

        self._models: list[str] = [m.strip() for m in getattr(settings, "llm_models", []) or [] if m.strip()]
        self._headers: dict[str, str] = dict(getattr(settings, "extra_headers", {}) or {})
        self._bad_models: dict[str, float] = {}  # model -> retry_at (monotonic)
        self._client = OpenAI(
            base_url=base_url,
            api_key=str(api_key),
            timeout=httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s),
            max_retries=0,
        )

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        """
        Stream the response in text chunks, falling back across models.

        Raises RuntimeError when no model produced content.
        """
        if not self._models:
            raise RuntimeError("LLM model list is empty. Set ZENITH_LLM_MODELS in your .env.")

        full_messages: list[ChatMessage] = list(messages)
        if system_prompt:
            full_messages.insert(0, {"role": "system", "content": system_prompt})

        last_error: Exception | None = None
        now = time.monotonic()

        for model in self._models:
            retry_at = self._bad_models.get(model)
            if retry_at is not None and retry_at > now:
                continue

            logger.info("LLM: trying model=%s", model)
            t0 = time.monotonic()
            stream = None
            used_any = False

            try:
                stream = self._client.chat.completions.create(
                    model=model,
                    stream=True,
                    extra_headers=self._headers or None,
                    messages=full_messages,
                )

                for chunk in stream:
                    if not chunk.choices:
                        continue
                    delta = chunk.choices[0].delta
                    content = delta.content if delta is not None else None
                    if content:
                        if not used_any:
                            logger.info("LLM: first token from model=%s (%.2fs)", model, time.monotonic() - t0)
                        used_any = True
                        yield content

                if used_any:
                    logger.debug("LLM: completed with model=%s", model)
                    return

                last_error = RuntimeError(f"Model returned no content: {model}")

            except Exception as e:
                last_error = e

                if _is_auth_error(e):
                    raise RuntimeError(
                        "LLM authentication failed. Check your API key (ZENITH_OPENROUTER_API_KEY)."
                    ) from e

                if _is_not_found_error(e):
                    self._bad_models[model] = time.monotonic() + BAD_MODEL_COOLDOWN_SECONDS
                    logger.info("LLM: model not available (404): %s", model)
                elif _is_rate_limit_error(e):
                    logger.info("LLM: rate-limited on model=%s, trying next", model)
                elif _is_connection_error(e):
                    logger.info("LLM: network/timeout error on model=%s, trying next", model)
                else:
                    logger.info("LLM: error on model=%s (%s), trying next", model, e.__class__.__name__)

                if used_any:
                    # Partial output already went out; switching models would garble it.
                    raise RuntimeError(f"LLM stream broke on model {model}.") from e

            finally:
                if stream is not None:
                    _close_stream(stream)

        if last_error is not None:
            if _is_rate_limit_error(last_error):
                raise RuntimeError("LLM is rate-limited. Try again later.") from last_error
            if _is_connection_error(last_error):
                raise RuntimeError("LLM network/timeout error. Try again later or change models.") from last_error
            raise RuntimeError("All LLM models failed.") from last_error

        raise RuntimeError("All LLM models failed.")

    def complete(self, prompt: str, system_prompt: str = "") -> str:
        """Send a single user prompt and return the whole reply."""
        return "".join(self.stream_chat([{"role": "user", "content": prompt}], system_prompt))
