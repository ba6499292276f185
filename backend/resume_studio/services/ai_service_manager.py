"""
AI Service Manager - one entry point over the configured text-generation backends.

Responsibilities:
  • Discover which backends are usable (credentials set, local server reachable)
  • Send enhancement, skill, summary and achievement prompts to the first usable backend
  • Report failures as typed errors, or as an explicit BackendFailure result
  • Expose service status for the health and status endpoints

The manager never falls back to rule-based text on its own; callers decide.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Union

from resume_studio.config import BACKENDS, settings
from resume_studio.content.industry_defaults import INDUSTRY_DEFAULTS
from resume_studio.models.enhancement_models import EnhancementContext
from resume_studio.prompts import (
    achievements,
    career_summary,
    cover_letter,
    enhance_text,
    quantified_enhance,
    skill_suggestions,
)
from resume_studio.services import llm_service
from resume_studio.services.rule_based_enhancer import RuleBasedEnhancer
from resume_studio.utils.errors import BackendUnavailable, EnhancementError, InputError
from resume_studio.utils.industry import resolve_industry_key
from resume_studio.utils.text_cleanup import clean_llm_response, split_bullets, split_suggestion_list

logger = logging.getLogger(__name__)

RULE_BASED = "rule-based"
_TEST_TEXT = "I helped customers with their problems"

Completion = Callable[..., Awaitable[str]]
Probe = Callable[[str], Awaitable[bool]]


# ── Result Variant ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BackendSuccess:
    text: str
    backend: str


@dataclass(frozen=True)
class BackendFailure:
    error: EnhancementError
    backend: str | None = None


BackendResult = Union[BackendSuccess, BackendFailure]


def parse_priority(priority: str | list[str]) -> list[str]:
    """Turn "deepseek, ollama" or a list into validated backend names."""
    names = priority.split(",") if isinstance(priority, str) else list(priority)
    order = [n.strip().lower() for n in names if n and n.strip()]
    unknown = [n for n in order if n not in BACKENDS]
    if unknown:
        raise ValueError(f"Unknown backend(s): {', '.join(unknown)}")
    return order


# ── Manager ──────────────────────────────────────────────────────────────────


class AIServiceManager:
    def __init__(
        self,
        priority: str | list[str] | None = None,
        *,
        completion: Completion | None = None,
        probe: Probe | None = None,
        rule_based: RuleBasedEnhancer | None = None,
    ):
        self._priority = parse_priority(priority if priority is not None else settings.ai_priority)
        self._completion = completion or llm_service.complete
        self._probe = probe or llm_service.is_available
        self._rule_based = rule_based or RuleBasedEnhancer()
        self._status: dict[str, bool] = {name: False for name in BACKENDS}
        self._initialized = False
        self._init_lock = asyncio.Lock()

    # ── Discovery ────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Probe every backend once; later calls are no-ops."""
        if self._initialized:
            return
        async with self._init_lock:
            if self._initialized:
                return
            for name in BACKENDS:
                self._status[name] = await self._probe(name)
                logger.info(f"Backend {name}: {'available' if self._status[name] else 'not available'}")
            self._initialized = True
            logger.info(f"AI services initialized: {self.get_available_services()}")

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _usable_backends(self) -> list[str]:
        return [name for name in self._priority if self._status.get(name)]

    def active_backend(self) -> str | None:
        usable = self._usable_backends()
        return usable[0] if usable else None

    def has_backend(self) -> bool:
        return self.active_backend() is not None

    async def _complete(self, messages: list[dict[str, str]], prompt_name: str) -> BackendSuccess:
        """
        Run a prompt on the first usable backend.

        An unreachable backend hands over to the next one in priority order;
        quota, auth and generic failures are raised as-is.
        """
        await self.initialize()
        usable = self._usable_backends()
        if not usable:
            raise BackendUnavailable()

        last_error: EnhancementError = BackendUnavailable()
        for backend in usable:
            try:
                text = await self._completion(backend=backend, messages=messages, prompt_name=prompt_name)
                return BackendSuccess(text=text, backend=backend)
            except BackendUnavailable as e:
                logger.warning(f"Backend {backend} unavailable, trying next: {e.detail}")
                last_error = e
        raise last_error

    # ── Enhancement ──────────────────────────────────────────────────────

    async def try_enhance_text(self, text: str, context: EnhancementContext | None = None) -> BackendResult:
        """Like enhance_text, but failures come back as a BackendFailure value."""
        try:
            result = await self._enhance(text, context)
        except EnhancementError as e:
            return BackendFailure(error=e, backend=e.backend)
        return result

    async def enhance_text(self, text: str, context: EnhancementContext | None = None) -> str:
        return (await self._enhance(text, context)).text

    async def _enhance(self, text: str, context: EnhancementContext | None) -> BackendSuccess:
        if not text or not text.strip():
            raise InputError()
        ctx = context or EnhancementContext()

        if ctx.content_type == "cover_letter":
            messages = [
                {"role": "system", "content": cover_letter.SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ]
            result = await self._complete(messages, "cover_letter")
            return BackendSuccess(text=result.text.strip(), backend=result.backend)

        template = (
            enhance_text.SUMMARY_PROMPT_TEMPLATE if ctx.content_type == "summary"
            else enhance_text.USER_PROMPT_TEMPLATE
        )
        messages = [
            {"role": "system", "content": enhance_text.SYSTEM_PROMPT},
            {"role": "user", "content": template.format(
                text=text.strip(),
                context_lines=_context_lines(ctx),
            )},
        ]
        result = await self._complete(messages, "enhance_text")
        return BackendSuccess(text=_clean(result.text, text, result.backend), backend=result.backend)

    async def enhance_quantified_text(self, text: str, context: EnhancementContext | None = None) -> tuple[str, str]:
        """Rewrite with industry-default metrics; returns (enhanced, industry key)."""
        if not text or not text.strip():
            raise InputError()
        ctx = context or EnhancementContext()
        industry_key = resolve_industry_key(ctx.industry, ctx.job_title)
        defaults = INDUSTRY_DEFAULTS[industry_key]

        bulk_note = ""
        if ctx.bulk_mode:
            bulk_note = quantified_enhance.BULK_NOTE_TEMPLATE.format(
                position=ctx.item_index + 1, total=ctx.total_items
            )

        context_lines = _context_lines(ctx)
        if ctx.company_size:
            context_lines += f"Company Size: {ctx.company_size}\n"

        messages = [
            {"role": "system", "content": quantified_enhance.SYSTEM_PROMPT},
            {"role": "user", "content": quantified_enhance.USER_PROMPT_TEMPLATE.format(
                text=text.strip(),
                context_lines=context_lines,
                industry=ctx.industry or industry_key.replace("_", " "),
                metrics=", ".join(defaults.metrics),
                timeframe=defaults.timeframe,
                team_size=defaults.team_size or "5-8 members",
                improvement=defaults.improvement,
                scope=defaults.scope,
                bulk_note=bulk_note,
            )},
        ]
        result = await self._complete(messages, "quantified_enhance")
        return _clean(result.text, text, result.backend), industry_key

    async def enhance_multiple_texts(
        self,
        texts: list[str],
        context: EnhancementContext | None = None,
        *,
        on_failure: Callable[[str], str] | None = None,
    ) -> list[str]:
        """
        Enhance each text in order, one backend call at a time.

        Blank entries pass through. Without `on_failure` the first error is
        raised; with it, a failed item is replaced by `on_failure(text)`.
        """
        enhanced: list[str] = []
        for i, text in enumerate(texts):
            if not text or not text.strip():
                enhanced.append(text)
                continue
            try:
                enhanced.append(await self.enhance_text(text, context))
            except EnhancementError as e:
                if on_failure is None:
                    raise
                logger.warning(f"Item {i + 1}/{len(texts)} failed ({type(e).__name__}), using fallback")
                enhanced.append(on_failure(text))
            if (i + 1) % 5 == 0 or i == len(texts) - 1:
                logger.info(f"Enhanced {i + 1}/{len(texts)} items")
        return enhanced

    # ── Suggestions ──────────────────────────────────────────────────────

    async def generate_skill_suggestions(
        self, job_title: str, industry: str = "", experience_level: str | None = None
    ) -> list[str]:
        messages = [
            {"role": "system", "content": skill_suggestions.SYSTEM_PROMPT},
            {"role": "user", "content": skill_suggestions.USER_PROMPT_TEMPLATE.format(
                job_title=job_title or "Professional",
                industry=industry or "General",
                experience_level=experience_level or "Mid-level",
            )},
        ]
        result = await self._complete(messages, "skill_suggestions")
        return split_suggestion_list(result.text, limit=10)

    async def generate_career_summary(
        self,
        job_title: str,
        years_experience: float | str | None,
        key_skills: list[str],
        industry: str = "",
    ) -> str:
        messages = [
            {"role": "system", "content": career_summary.SYSTEM_PROMPT},
            {"role": "user", "content": career_summary.USER_PROMPT_TEMPLATE.format(
                job_title=job_title or "Professional",
                years_experience=years_experience or "3-5",
                key_skills=", ".join(key_skills) or "Various professional skills",
                industry=industry or "General",
            )},
        ]
        result = await self._complete(messages, "career_summary")
        return clean_llm_response(result.text)

    async def generate_achievements(
        self, job_title: str, company_name: str | None = None, responsibilities: str | None = None
    ) -> list[str]:
        messages = [
            {"role": "system", "content": achievements.SYSTEM_PROMPT},
            {"role": "user", "content": achievements.USER_PROMPT_TEMPLATE.format(
                job_title=job_title or "Professional",
                company_name=company_name or "Previous Company",
                responsibilities=responsibilities or "Various professional duties",
            )},
        ]
        result = await self._complete(messages, "achievements")
        return [a for a in split_bullets(result.text, limit=12) if len(a) > 10][:6]

    # ── Status ───────────────────────────────────────────────────────────

    def get_service_status(self) -> dict[str, bool]:
        return {**self._status, RULE_BASED: True}

    def get_available_services(self) -> list[str]:
        return [*self._usable_backends(), RULE_BASED]

    def set_priority(self, priority: str | list[str]) -> None:
        self._priority = parse_priority(priority)
        logger.info(f"AI service priority set to: {self._priority}")

    async def test_services(self) -> dict[str, dict[str, object]]:
        """Run a tiny enhancement on every backend, plus the rule-based enhancer."""
        await self.initialize()
        results: dict[str, dict[str, object]] = {}
        messages = [
            {"role": "system", "content": enhance_text.SYSTEM_PROMPT},
            {"role": "user", "content": enhance_text.USER_PROMPT_TEMPLATE.format(
                text=_TEST_TEXT, context_lines=""
            )},
        ]

        for name in BACKENDS:
            if not self._status.get(name):
                results[name] = {"available": False, "error": "Service not available"}
                continue
            try:
                response = await self._completion(backend=name, messages=messages, prompt_name="enhance_text")
                results[name] = {"available": True, "response": _clean(response, _TEST_TEXT, name)}
            except EnhancementError as e:
                results[name] = {"available": False, "error": e.detail}

        results[RULE_BASED] = {"available": True, "response": self._rule_based.enhance_text(_TEST_TEXT)}
        return results


# ── Helpers ──────────────────────────────────────────────────────────────────


def _context_lines(ctx: EnhancementContext) -> str:
    lines = []
    if ctx.job_title:
        lines.append(f"Job Title: {ctx.job_title}")
    if ctx.industry:
        lines.append(f"Industry: {ctx.industry}")
    level = ctx.experience_level or ctx.role_level
    if level:
        lines.append(f"Experience Level: {level}")
    return "".join(f"{line}\n" for line in lines)


def _clean(response: str, original: str, backend: str) -> str:
    """Strip labels, and the echoed input Hugging Face models tend to repeat."""
    cleaned = response.strip()
    source = original.strip()
    if backend == "huggingface" and source and cleaned.startswith(source) and len(cleaned) > len(source):
        cleaned = cleaned[len(source):]
    return clean_llm_response(cleaned) or response.strip()
