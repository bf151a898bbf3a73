from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List
from urllib.parse import unquote

from bs4 import BeautifulSoup

from .logging import log_at_severity, log_warning
from .reading_time import strip_code_fences
from .schema import SEVERITIES
from .utils import is_absolute_url, is_root_relative, strip_query_fragment

# [text](target) but not ![alt](image)
MD_LINK_RE = re.compile(r"(?<!!)\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
MD_SUFFIXES = (".md", ".mdx")


class MissingBuildError(RuntimeError):
    pass


class BrokenLinksError(RuntimeError):
    def __init__(self, kind: str, broken: List["BrokenLink"]):
        self.kind = kind
        self.broken = broken
        lines = "\n".join(f"- {b.source} -> {b.target}" for b in broken)
        super().__init__(f"Found {len(broken)} broken {kind} link(s):\n{lines}")


@dataclass(frozen=True)
class BrokenLink:
    source: str
    target: str


def _resolves(build_dir: Path, path: str) -> bool:
    rel = path.lstrip("/")
    if not rel:
        return (build_dir / "index.html").is_file()
    candidate = build_dir / rel
    return (
        candidate.is_file()
        or (build_dir / f"{rel.rstrip('/')}.html").is_file()
        or (candidate / "index.html").is_file()
    )


def _iter_hrefs(html: str) -> Iterable[str]:
    soup = BeautifulSoup(html, "html.parser")
    for a in soup.find_all("a", href=True):
        href = (a.get("href") or "").strip()
        if href:
            yield href


def find_broken_links(build_dir: str | Path, base_url: str = "/") -> List[BrokenLink]:
    """Root-relative hrefs in the built HTML that point at no built page or asset."""
    root = Path(build_dir)
    if not root.is_dir():
        raise MissingBuildError(f"Build directory not found: {root.resolve()}")
    pages = sorted(root.rglob("*.html"))
    if not pages:
        raise MissingBuildError(f"No HTML pages under {root.resolve()}; was the site built?")
    broken: List[BrokenLink] = []
    seen = set()
    for page in pages:
        source = "/" + page.relative_to(root).as_posix()
        for href in _iter_hrefs(page.read_text(encoding="utf-8")):
            if is_absolute_url(href) or not is_root_relative(href):
                continue
            path = unquote(strip_query_fragment(href))
            if base_url != "/" and path.startswith(base_url):
                path = "/" + path[len(base_url):]
            if (source, path) in seen:
                continue
            seen.add((source, path))
            if not _resolves(root, path):
                broken.append(BrokenLink(source=source, target=href))
    return broken


def find_broken_markdown_links(content_dir: str | Path) -> List[BrokenLink]:
    """Relative `[x](post.md)` links whose target file does not exist."""
    root = Path(content_dir)
    if not root.is_dir():
        log_warning("content_dir_missing", content_dir=str(root))
        return []
    broken: List[BrokenLink] = []
    files = sorted(p for p in root.rglob("*") if p.suffix in MD_SUFFIXES and p.is_file())
    for doc in files:
        text = strip_code_fences(doc.read_text(encoding="utf-8"))
        for m in MD_LINK_RE.finditer(text):
            target = m.group(1)
            if is_absolute_url(target) or target.startswith(("#", "mailto:")):
                continue
            path = unquote(strip_query_fragment(target))
            if not path.endswith(MD_SUFFIXES):
                continue
            resolved = (root / path.lstrip("/")) if path.startswith("/") else (doc.parent / path)
            if not resolved.is_file():
                broken.append(BrokenLink(source=doc.relative_to(root).as_posix(), target=target))
    return broken


def report_broken_links(broken: List[BrokenLink], severity: str, kind: str) -> None:
    if severity not in SEVERITIES:
        raise ValueError(f"Unknown severity {severity!r}; expected one of {SEVERITIES}")
    if not broken or severity == "ignore":
        return
    if severity == "throw":
        raise BrokenLinksError(kind, broken)
    fields: Dict[str, Any] = {
        "kind": kind,
        "count": len(broken),
        "links": [{"source": b.source, "target": b.target} for b in broken],
    }
    log_at_severity(severity, "broken_links", **fields)


def check_site(cfg: Dict[str, Any], build_dir: str | Path, content_dir: str | Path) -> Dict[str, int]:
    """Markdown links first so their warnings are emitted even when the build check throws."""
    md_broken = find_broken_markdown_links(content_dir)
    report_broken_links(md_broken, cfg["links"]["on_broken_markdown_links"], "markdown")
    html_broken = find_broken_links(build_dir, cfg["site"]["base_url"])
    report_broken_links(html_broken, cfg["links"]["on_broken_links"], "internal")
    return {"markdown": len(md_broken), "internal": len(html_broken)}
