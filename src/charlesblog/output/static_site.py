from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from ..core.config import to_generator_config
from ..widgets.giscus import GiscusConfig, render_giscus
from .chrome import render_regions


def build_static_site(output_dir: str | Path, cfg: Dict[str, Any]) -> List[Path]:
    """Write the generator config plus the pre-rendered fragments it includes.

    The generator itself renders pages; this only hands it what we own.
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    config_path = out / "site.config.json"
    config_path.write_text(
        json.dumps(to_generator_config(cfg), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    written.append(config_path)

    partials = out / "partials"
    partials.mkdir(exist_ok=True)
    for name, html in render_regions(cfg).items():
        p = partials / f"{name}.html"
        p.write_text(html, encoding="utf-8")
        written.append(p)

    comments_path = partials / "comments.html"
    comments_path.write_text(
        render_giscus(cfg["color_mode"]["default_mode"], GiscusConfig.from_config(cfg)),
        encoding="utf-8",
    )
    written.append(comments_path)
    return written
