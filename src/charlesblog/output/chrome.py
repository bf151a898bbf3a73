from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.utils import is_absolute_url, with_base_url


def _jinja_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )


def _links(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {"label": e["label"], "href": e["href"], "external": is_absolute_url(e["href"])}
        for e in entries
    ]


def _logo(logo: Optional[Dict[str, Any]], base_url: str) -> Optional[Dict[str, Any]]:
    if not logo:
        return None
    resolved = dict(logo)
    resolved["src"] = with_base_url(base_url, logo["src"])
    resolved["href"] = with_base_url(base_url, logo["href"]) if logo.get("href") else base_url
    return resolved


def render_announcement_bar(cfg: Dict[str, Any]) -> str:
    """Banner content is trusted HTML from config.yaml; it may carry an anchor."""
    return _jinja_env().get_template("announcement_bar.html.j2").render(
        bar=cfg.get("announcement_bar")
    )


def render_navbar(cfg: Dict[str, Any]) -> str:
    navbar = cfg.get("navbar", {})
    return _jinja_env().get_template("navbar.html.j2").render(
        base_url=cfg["site"]["base_url"],
        title=navbar.get("title", ""),
        logo=_logo(navbar.get("logo"), cfg["site"]["base_url"]),
        items=_links(navbar.get("items", [])),
    )


def render_footer(cfg: Dict[str, Any]) -> str:
    footer = cfg["footer"]
    return _jinja_env().get_template("footer.html.j2").render(
        base_url=cfg["site"]["base_url"],
        style=footer.get("style", "light"),
        logo=_logo(footer.get("logo"), cfg["site"]["base_url"]),
        links=_links(footer.get("links", [])),
        copyright=footer["copyright"],
    )


def render_regions(cfg: Dict[str, Any]) -> Dict[str, str]:
    """Each region reads only its own config section."""
    return {
        "announcement_bar": render_announcement_bar(cfg),
        "navbar": render_navbar(cfg),
        "footer": render_footer(cfg),
    }
