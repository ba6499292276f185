"""
LLM Service - unified interface to the text-generation backends via LiteLLM.

Responsibilities:
  • Route a chat completion to DeepSeek, Ollama or Hugging Face via LiteLLM
  • Resolve credentials and endpoints from server settings (never from the request)
  • Classify provider failures into the enhancement error taxonomy
  • Probe the local Ollama server for availability
  • Describe the backend registry to the frontend without exposing secrets
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import litellm
from litellm import acompletion

from resume_studio.config import BACKENDS, PROMPT_CONFIG, settings
from resume_studio.utils.errors import (
    BackendAuthFailure,
    BackendQuotaExceeded,
    BackendUnavailable,
    EnhancementError,
    GenericEnhancementFailure,
)

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True


# ── Helpers ──────────────────────────────────────────────────────────────────

# Message fragments used when a provider reports failure without a usable status code
_QUOTA_MARKERS = ("insufficient balance", "insufficient_quota", "quota", "payment required", "402")
_AUTH_MARKERS = ("invalid api key", "invalid_api_key", "authentication", "unauthorized", "401")
_UNAVAILABLE_MARKERS = ("connection", "timeout", "timed out", "unreachable", "503")


def _backend_entry(backend: str) -> dict[str, Any]:
    entry = BACKENDS.get(backend)
    if not entry:
        raise BackendUnavailable(f"Unknown backend: {backend}", backend=backend)
    return entry


def backend_credential(backend: str) -> str | None:
    """API key configured for `backend`, or None when it needs none / has none."""
    field = _backend_entry(backend)["credential"]
    return getattr(settings, field, None) if field else None


def is_configured(backend: str) -> bool:
    """True when the backend's credential (or, for Ollama, its enable flag) is set."""
    if backend == "ollama":
        return settings.ollama_enabled
    return bool(backend_credential(backend))


def _build_backend_kwargs(backend: str) -> dict[str, Any]:
    if backend == "ollama":
        return {"api_base": settings.ollama_base_url}
    key = backend_credential(backend)
    return {"api_key": key} if key else {}


# ── Error Classification ─────────────────────────────────────────────────────


def classify_backend_error(exc: Exception, backend: str | None = None) -> EnhancementError:
    """Map a LiteLLM / httpx exception onto the enhancement error taxonomy."""
    if isinstance(exc, EnhancementError):
        return exc

    status = getattr(exc, "status_code", None)
    message = str(exc).lower()

    if status == 402 or any(m in message for m in _QUOTA_MARKERS):
        return BackendQuotaExceeded(backend=backend)
    if status == 401 or isinstance(exc, litellm.AuthenticationError) or any(m in message for m in _AUTH_MARKERS):
        return BackendAuthFailure(backend=backend)
    if isinstance(exc, (litellm.APIConnectionError, litellm.Timeout, litellm.ServiceUnavailableError, httpx.HTTPError)):
        return BackendUnavailable(str(exc), backend=backend)
    if status in (429, 503) or any(m in message for m in _UNAVAILABLE_MARKERS):
        return BackendUnavailable(str(exc), backend=backend)
    return GenericEnhancementFailure(backend=backend)


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    backend: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """
    Send a chat completion request via LiteLLM.

    Args:
        backend:     "deepseek" | "ollama" | "huggingface"
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)

    Returns:
        The assistant's response text, stripped.

    Raises:
        EnhancementError subclass describing the failure.
    """
    model_id = _backend_entry(backend)["model_id"]

    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.7)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 300)

    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "temperature": temp,
        "max_tokens": tokens,
        "timeout": settings.backend_timeout_seconds,
        **_build_backend_kwargs(backend),
    }

    logger.info(f"LLM call: backend={backend} model={model_id} temp={temp} tokens={tokens}")

    try:
        response = await acompletion(**kwargs)
    except Exception as e:
        error = classify_backend_error(e, backend)
        logger.error(f"LLM error ({backend}): {type(error).__name__}: {e}")
        raise error from e

    content = (response.choices[0].message.content or "").strip()
    if not content:
        raise GenericEnhancementFailure("No enhancement received from AI", backend=backend)
    logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
    return content


# ── Availability ─────────────────────────────────────────────────────────────


async def probe_ollama() -> bool:
    """True when the local Ollama server answers its model listing endpoint."""
    url = f"{settings.ollama_base_url.rstrip('/')}/api/tags"
    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            response = await client.get(url)
        return response.status_code == 200
    except httpx.HTTPError as e:
        logger.warning(f"Ollama probe failed at {url}: {e}")
        return False


async def is_available(backend: str) -> bool:
    if not is_configured(backend):
        return False
    if backend == "ollama":
        return await probe_ollama()
    return True


# ── Backend Info ─────────────────────────────────────────────────────────────


def get_backends_info() -> list[dict[str, Any]]:
    """
    Return a list of backend info dicts for the frontend.
    No secrets are exposed, only names, model ids and whether each is configured.
    """
    return [
        {
            "id": key,
            "name": info["name"],
            "model_id": info["model_id"],
            "description": info["description"],
            "configured": is_configured(key),
        }
        for key, info in BACKENDS.items()
    ]
