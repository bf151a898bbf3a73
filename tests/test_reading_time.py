from __future__ import annotations

import pytest

from charlesblog.core.reading_time import (
    count_words,
    format_reading_time,
    reading_time,
    strip_front_matter,
)


def test_front_matter_is_not_counted() -> None:
    text = "---\ntitle: Dart static analysis\ntags: [dart, lint]\n---\none two three\n"
    assert strip_front_matter(text).strip() == "one two three"
    assert count_words(text) == 3


def test_fenced_code_is_counted() -> None:
    text = "One two.\n\n```dart\nfinal answer = 42;\n```\n"
    assert count_words(text) == 6


def test_code_heavy_post() -> None:
    code = "\n".join(["final value = compute(input);"] * 300)
    text = f"---\ntitle: Lints\n---\n```dart\n{code}\n```\n"
    assert count_words(text) == 1201
    assert format_reading_time(reading_time(text)) == "5 min read"


def test_minutes_at_300_wpm() -> None:
    text = " ".join(["word"] * 600)
    assert reading_time(text) == pytest.approx(2.0)
    assert reading_time(text, words_per_minute=200) == pytest.approx(3.0)


def test_bad_words_per_minute() -> None:
    with pytest.raises(ValueError):
        reading_time("hi", words_per_minute=0)


@pytest.mark.parametrize(
    "minutes, expected",
    [(0.0, "1 min read"), (0.2, "1 min read"), (1.0, "1 min read"), (1.01, "2 min read"), (7.5, "8 min read")],
)
def test_format(minutes, expected) -> None:
    assert format_reading_time(minutes) == expected
