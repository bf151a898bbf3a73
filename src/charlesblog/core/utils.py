from __future__ import annotations

import re
from datetime import datetime, timezone
from urllib.parse import urlparse

_ROOT_RELATIVE_RE = re.compile(r"^/(?!/)[^\s]*$")


def current_year() -> int:
    return datetime.now(timezone.utc).year


def is_absolute_url(href: str) -> bool:
    if not href:
        return False
    try:
        p = urlparse(href.strip())
    except ValueError:
        return False
    return p.scheme in ("http", "https") and bool(p.netloc)


def is_root_relative(href: str) -> bool:
    """`/about`, `/` and `/a/b?x=1#y` count; `//cdn.example` does not."""
    return bool(href) and bool(_ROOT_RELATIVE_RE.match(href))


def is_valid_href(href: str) -> bool:
    return is_absolute_url(href) or is_root_relative(href)


def strip_query_fragment(href: str) -> str:
    href = href.split("#", 1)[0]
    return href.split("?", 1)[0]


def with_base_url(base_url: str, path: str) -> str:
    """Prefix a site asset path with the base URL; absolute URLs pass through."""
    if not path or is_absolute_url(path) or path.startswith(("//", "data:")):
        return path
    return base_url.rstrip("/") + "/" + path.lstrip("/")
