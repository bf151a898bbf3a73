from __future__ import annotations

import math
import re

DEFAULT_WORDS_PER_MINUTE = 300

_FRONT_MATTER_RE = re.compile(r"\A\ufeff?---\s*\n.*?\n---\s*(\n|\Z)", re.DOTALL)
_FENCE_RE = re.compile(r"^(`{3,}|~{3,}).*?^\1\s*$", re.DOTALL | re.MULTILINE)
_WORD_RE = re.compile(r"[\w'’-]+", re.UNICODE)


def strip_front_matter(text: str) -> str:
    return _FRONT_MATTER_RE.sub("", text or "", count=1)


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub(" ", text or "")


def count_words(text: str) -> int:
    return len(_WORD_RE.findall(strip_front_matter(text)))


def reading_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> float:
    """Minutes needed to read a post body. Code blocks count like prose; front matter does not."""
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    return count_words(text) / float(words_per_minute)


def format_reading_time(minutes: float) -> str:
    return f"{max(1, math.ceil(minutes))} min read"
