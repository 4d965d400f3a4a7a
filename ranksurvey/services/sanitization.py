"""
Free-text input hygiene.

This is pattern deletion, not markup sanitization: it strips a handful of
obviously dangerous fragments and enforces length limits. It can be bypassed
by nested or malformed markup, so the remote endpoint must not rely on it.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping

from ranksurvey.core.config import settings


_DANGEROUS_PATTERNS = re.compile(r"<script|<iframe|javascript:|onerror=", re.IGNORECASE)


def sanitize_text(text: Any, max_length: int | None = None) -> str:
    """
    Trim, truncate, then delete dangerous patterns.

    Anything that is not a non-empty string degrades to "".
    """
    if not text or not isinstance(text, str):
        return ""
    if max_length is None:
        max_length = settings.MAX_TEXT_LENGTH

    return _DANGEROUS_PATTERNS.sub("", text.strip()[:max_length])


def sanitize_comment(text: Any) -> str:
    return sanitize_text(text, settings.MAX_COMMENT_LENGTH)


def sanitize_other_text(other_text: Mapping[str, Any] | None) -> Dict[str, str]:
    """Sanitize every value of a per-question free-text map."""
    if not other_text:
        return {}
    return {qid: sanitize_text(value) for qid, value in other_text.items()}


def is_text_empty(text: Any) -> bool:
    return not text or not isinstance(text, str) or not text.strip()
