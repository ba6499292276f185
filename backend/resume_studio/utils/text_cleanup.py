"""
Text cleanup utilities for user-entered bullets and raw model output.
"""

from __future__ import annotations

import re
import unicodedata

_LEADING_PRONOUN = re.compile(r"^(?:i|we)\b\s*", re.IGNORECASE)
_RESPONSE_PREFIX = re.compile(
    r"^(?:enhanced(?: text| version| bullet)?|improved(?: text| version)?|here(?: is|'s) [^:]*|output|result)\s*:\s*",
    re.IGNORECASE,
)
_BULLET_PREFIX = re.compile(r"^[\s]*(?:[•\-\*●○▪►▸‣⁃]|\d+[.)])\s*")


def normalize_text(text: str) -> str:
    """Normalize whitespace, strip bad unicode, and clean up pasted text."""
    text = unicodedata.normalize("NFKC", text)

    replacements = {
        "\u2019": "'",   # right single quote
        "\u2018": "'",   # left single quote
        "\u201c": '"',   # left double quote
        "\u201d": '"',   # right double quote
        "\u2013": "-",   # en-dash
        "\u2014": "-",   # em-dash
        "\u2026": "...", # ellipsis
        "\u00a0": " ",   # non-breaking space
        "\u200b": "",    # zero-width space
        "\ufeff": "",    # BOM
    }
    for old, new in replacements.items():
        text = text.replace(old, new)

    # Collapse runs of spaces / tabs
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def extract_bullet_prefix(text: str) -> str:
    """Remove common bullet prefixes (•, -, *, ●, 1.) from the start of text."""
    return _BULLET_PREFIX.sub("", text)


def strip_leading_pronoun(text: str) -> str:
    """Drop a leading "I" / "We" so the bullet can open with a verb."""
    return _LEADING_PRONOUN.sub("", text, count=1)


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


def lower_first(text: str) -> str:
    """Lowercase the first character unless the first word is an acronym."""
    if not text:
        return text
    first_word = text.split(" ", 1)[0]
    if len(first_word) > 1 and first_word.isupper():
        return text
    return text[:1].lower() + text[1:]


def replace_phrase(text: str, phrase: str, replacement: str) -> str:
    """
    Whole-word, case-insensitive replacement that keeps a leading capital.

    "Helped customers" with helped -> assisted gives "Assisted customers".
    """
    pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)

    def _swap(match: re.Match[str]) -> str:
        if match.group(0)[:1].isupper():
            return capitalize_first(replacement)
        return replacement

    return pattern.sub(_swap, text)


def clean_llm_response(text: str) -> str:
    """Strip labels, wrapping quotes and markdown noise from a one-shot rewrite."""
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.strip("`").strip()
    cleaned = _RESPONSE_PREFIX.sub("", cleaned)
    cleaned = extract_bullet_prefix(cleaned)
    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in "\"'":
        cleaned = cleaned[1:-1]
    return cleaned.strip()


def split_suggestion_list(text: str, *, limit: int) -> list[str]:
    """Split a comma / newline / bullet separated model answer into unique items."""
    items: list[str] = []
    for chunk in re.split(r"[,\n]", text or ""):
        item = extract_bullet_prefix(chunk).strip().strip("\"'").strip()
        if item and item not in items:
            items.append(item)
    return items[:limit]


def split_bullets(text: str, *, limit: int) -> list[str]:
    """Split a bulleted / line-separated answer into individual bullets."""
    items: list[str] = []
    for line in re.split(r"\n|(?<=\S)\s*•\s*", text or ""):
        item = extract_bullet_prefix(line).strip()
        if item and item not in items:
            items.append(item)
    return items[:limit]
