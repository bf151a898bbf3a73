from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.schema import COLOR_MODES

GISCUS_CLIENT_URL = "https://giscus.app/client.js"


@dataclass(frozen=True)
class GiscusConfig:
    element_id: str = "comments"
    repo: str = "charlescyt/charlescyt.github.io"
    repo_id: str = "R_kgDOLohVEg"
    category: str = "Comments"
    category_id: str = "DIC_kwDOLohVEs4Cei86"
    mapping: str = "title"
    term: str = "Welcome to @giscus/react component!"
    reactions_enabled: str = "1"
    emit_metadata: str = "0"
    input_position: str = "top"
    lang: str = "en"
    loading: str = "lazy"

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]]) -> "GiscusConfig":
        """Build from the `comments` section; unknown keys are ignored."""
        section = (cfg or {}).get("comments") or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in section.items() if k in known and v is not None})


def check_color_mode(color_mode: str) -> str:
    if color_mode not in COLOR_MODES:
        raise ValueError(f"Unknown color mode {color_mode!r}; expected one of {COLOR_MODES}")
    return color_mode


def giscus_props(color_mode: str, config: Optional[GiscusConfig] = None) -> Dict[str, str]:
    """Props handed to the embedded widget. Only `theme` depends on the color mode."""
    props = asdict(config or GiscusConfig())
    props["theme"] = check_color_mode(color_mode)
    return props


def _data_attributes(props: Dict[str, str]) -> Dict[str, str]:
    return {
        "data-repo": props["repo"],
        "data-repo-id": props["repo_id"],
        "data-category": props["category"],
        "data-category-id": props["category_id"],
        "data-mapping": props["mapping"],
        "data-term": props["term"],
        "data-reactions-enabled": props["reactions_enabled"],
        "data-emit-metadata": props["emit_metadata"],
        "data-input-position": props["input_position"],
        "data-theme": props["theme"],
        "data-lang": props["lang"],
        "data-loading": props["loading"],
    }


def _jinja_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )


def render_giscus(color_mode: str, config: Optional[GiscusConfig] = None) -> str:
    props = giscus_props(color_mode, config)
    return _jinja_env().get_template("giscus.html.j2").render(
        element_id=props["element_id"],
        client_url=GISCUS_CLIENT_URL,
        attributes=_data_attributes(props),
    )
