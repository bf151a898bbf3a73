from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from jsonschema import ValidationError
from jsonschema import validate as js_validate

from .schema import SITE_CONFIG_SCHEMA
from .utils import current_year, is_valid_href


class ConfigError(RuntimeError):
    pass


def _require(d: Dict[str, Any], key: str, path: str) -> Any:
    if key not in d:
        raise ConfigError(f"Missing required config: {path}.{key}")
    return d[key]


def _dotted(parts: Any) -> str:
    return ".".join(str(p) for p in parts) or "<root>"


def load_config(path: str | Path = "config.yaml") -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(
            f"Config file not found: {p.resolve()}\n\nTip: the site config lives in config.yaml at the repo root"
        )
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as ex:
        raise ConfigError(f"Invalid YAML in {p}: {ex}") from ex
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {p} must be a mapping")
    validate_config(data)
    data["footer"]["copyright"] = resolve_copyright(data["footer"]["copyright"])
    return data


def resolve_copyright(template: str, year: Optional[int] = None) -> str:
    return template.replace("{year}", str(year if year is not None else current_year()))


def validate_config(cfg: Dict[str, Any]) -> None:
    try:
        js_validate(cfg, SITE_CONFIG_SCHEMA)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config at {_dotted(exc.absolute_path)}: {exc.message}") from exc

    site = _require(cfg, "site", "")
    site.setdefault("tagline", "")
    site.setdefault("favicon", "img/favicon.ico")
    site.setdefault("organization_name", "")
    site.setdefault("project_name", "")
    site.setdefault("trailing_slash", False)
    site.setdefault("image", "")

    cfg.setdefault("i18n", {})
    cfg["i18n"].setdefault("default_locale", "en")
    cfg["i18n"].setdefault("locales", [cfg["i18n"]["default_locale"]])
    if cfg["i18n"]["default_locale"] not in cfg["i18n"]["locales"]:
        raise ConfigError(
            f"i18n.default_locale {cfg['i18n']['default_locale']!r} is not listed in i18n.locales"
        )

    # Broken internal links fail the build; broken markdown links only warn.
    cfg.setdefault("links", {})
    cfg["links"].setdefault("on_broken_links", "throw")
    cfg["links"].setdefault("on_broken_markdown_links", "warn")

    cfg.setdefault("blog", {})
    cfg["blog"].setdefault("path", "blog")
    cfg["blog"].setdefault("route_base_path", "/")
    cfg["blog"].setdefault("sidebar_title", "Recent Posts")
    cfg["blog"].setdefault("sidebar_count", 5)
    cfg["blog"].setdefault("posts_per_page", 10)
    cfg["blog"].setdefault("show_reading_time", True)
    cfg["blog"].setdefault("words_per_minute", 300)

    cfg.setdefault("color_mode", {})
    cfg["color_mode"].setdefault("default_mode", "dark")
    cfg["color_mode"].setdefault("respect_prefers_color_scheme", False)

    cfg.setdefault("prism", {})
    cfg["prism"].setdefault("theme", "oneLight")
    cfg["prism"].setdefault("dark_theme", "oneDark")
    cfg["prism"].setdefault("additional_languages", [])

    cfg.setdefault("announcement_bar", None)
    if cfg["announcement_bar"]:
        cfg["announcement_bar"].setdefault("background_color", "#fff")
        cfg["announcement_bar"].setdefault("text_color", "#000")
        cfg["announcement_bar"].setdefault("is_closeable", True)

    cfg.setdefault("navbar", {})
    cfg["navbar"].setdefault("title", "")
    cfg["navbar"].setdefault("items", [])

    footer = _require(cfg, "footer", "")
    _require(footer, "copyright", "footer")
    footer.setdefault("style", "light")
    footer.setdefault("links", [])

    cfg.setdefault("comments", {})

    _validate_links(cfg["navbar"]["items"], "navbar.items")
    _validate_links(footer["links"], "footer.links")


def _validate_links(links: List[Dict[str, Any]], path: str) -> None:
    for i, link in enumerate(links):
        label = str(link.get("label") or "").strip()
        href = str(link.get("href") or "").strip()
        if not label:
            raise ConfigError(f"{path}.{i}.label must be a non-empty string")
        if not href:
            raise ConfigError(f"{path}.{i}.href must be a non-empty string")
        if not is_valid_href(href):
            raise ConfigError(
                f"{path}.{i}.href {href!r} is neither an http(s) URL nor a root-relative path"
            )


def iter_links(cfg: Dict[str, Any]) -> List[Dict[str, Any]]:
    return list(cfg.get("navbar", {}).get("items", [])) + list(
        cfg.get("footer", {}).get("links", [])
    )


def _logo(logo: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not logo:
        return None
    return {k: v for k, v in logo.items() if v not in (None, "")}


def _put(target: Dict[str, Any], key: str, value: Any) -> None:
    # The generator rejects null objects and empty strings for optional fields.
    if value not in (None, ""):
        target[key] = value


def to_generator_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Map the validated YAML record onto the generator's camelCase config shape.

    Optional fields that are unset are left out. `blog.words_per_minute` has no
    plain-data counterpart in the generator options; it only drives
    `reading_time` on our side.
    """
    site = cfg["site"]
    blog = cfg["blog"]
    prism = cfg["prism"]
    footer = cfg["footer"]

    navbar: Dict[str, Any] = {"items": [dict(item) for item in cfg["navbar"]["items"]]}
    _put(navbar, "title", cfg["navbar"]["title"])
    _put(navbar, "logo", _logo(cfg["navbar"].get("logo")))

    footer_out: Dict[str, Any] = {
        "style": footer["style"],
        "links": [dict(link) for link in footer["links"]],
        "copyright": footer["copyright"],
    }
    _put(footer_out, "logo", _logo(footer.get("logo")))

    theme_config: Dict[str, Any] = {
        "colorMode": {
            "defaultMode": cfg["color_mode"]["default_mode"],
            "respectPrefersColorScheme": cfg["color_mode"]["respect_prefers_color_scheme"],
        },
        "navbar": navbar,
        "footer": footer_out,
        "prism": {
            "theme": prism["theme"],
            "darkTheme": prism["dark_theme"],
            "additionalLanguages": list(prism["additional_languages"]),
        },
    }
    _put(theme_config, "image", site["image"])
    bar = cfg.get("announcement_bar")
    if bar:
        theme_config["announcementBar"] = {
            "id": bar["id"],
            "content": bar["content"],
            "backgroundColor": bar["background_color"],
            "textColor": bar["text_color"],
            "isCloseable": bar["is_closeable"],
        }

    out: Dict[str, Any] = {
        "title": site["title"],
        "tagline": site["tagline"],
        "url": site["url"],
        "baseUrl": site["base_url"],
        "trailingSlash": site["trailing_slash"],
        "onBrokenLinks": cfg["links"]["on_broken_links"],
        "onBrokenMarkdownLinks": cfg["links"]["on_broken_markdown_links"],
        "i18n": {
            "defaultLocale": cfg["i18n"]["default_locale"],
            "locales": list(cfg["i18n"]["locales"]),
        },
        "presets": [
            [
                "classic",
                {
                    "docs": False,
                    "blog": {
                        "path": blog["path"],
                        "routeBasePath": blog["route_base_path"],
                        "blogSidebarTitle": blog["sidebar_title"],
                        "blogSidebarCount": blog["sidebar_count"],
                        "postsPerPage": blog["posts_per_page"],
                        "showReadingTime": blog["show_reading_time"],
                    },
                },
            ]
        ],
        "themeConfig": theme_config,
    }
    _put(out, "favicon", site["favicon"])
    _put(out, "organizationName", site["organization_name"])
    _put(out, "projectName", site["project_name"])
    return out
