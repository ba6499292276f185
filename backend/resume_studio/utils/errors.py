"""
Enhancement error taxonomy.

Backend-calling code raises these; the HTTP layer maps `status_code` onto the
response. The orchestrator converts them into its local fallback instead.
"""

from __future__ import annotations


class EnhancementError(Exception):
    """Base class for every failure the enhancement subsystem reports."""

    status_code: int = 500
    message: str = "Failed to enhance text. Please try again later."

    def __init__(self, detail: str | None = None, *, backend: str | None = None):
        self.detail = detail or self.message
        self.backend = backend
        super().__init__(self.detail)


class InputError(EnhancementError, ValueError):
    """Empty or missing text; rejected before any enhancement runs."""

    status_code = 400
    message = "Text is required for enhancement"


class BackendUnavailable(EnhancementError):
    """No backend configured, or the configured one could not be reached."""

    status_code = 503
    message = "AI service not configured or unreachable"


class BackendQuotaExceeded(EnhancementError):
    status_code = 402
    message = "AI service temporarily unavailable. Please check your API balance or try again later."


class BackendAuthFailure(EnhancementError):
    status_code = 401
    message = "AI service authentication failed. Please check API configuration."


class GenericEnhancementFailure(EnhancementError):
    status_code = 500
