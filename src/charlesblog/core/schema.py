from __future__ import annotations

from typing import Any, Dict

SEVERITIES = ("ignore", "log", "warn", "throw")
COLOR_MODES = ("light", "dark")

_NON_EMPTY_STRING: Dict[str, Any] = {"type": "string", "minLength": 1}

LINK_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["label", "href"],
    "properties": {
        "label": _NON_EMPTY_STRING,
        "href": _NON_EMPTY_STRING,
    },
}

LOGO_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["alt", "src"],
    "properties": {
        "alt": {"type": "string"},
        "src": _NON_EMPTY_STRING,
        "href": {"type": "string"},
        "width": {"type": "integer", "minimum": 1},
        "height": {"type": "integer", "minimum": 1},
    },
}

SITE_CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["site", "footer"],
    "properties": {
        "site": {
            "type": "object",
            "additionalProperties": False,
            "required": ["title", "url", "base_url"],
            "properties": {
                "title": _NON_EMPTY_STRING,
                "tagline": {"type": "string"},
                "favicon": {"type": "string"},
                "url": {"type": "string", "pattern": "^https?://[^/\\s]+$"},
                "base_url": {"type": "string", "pattern": "^/([^\\s]*/)?$"},
                "organization_name": {"type": "string"},
                "project_name": {"type": "string"},
                "trailing_slash": {"type": ["boolean", "null"]},
                "image": {"type": "string"},
            },
        },
        "i18n": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "default_locale": _NON_EMPTY_STRING,
                "locales": {
                    "type": "array",
                    "minItems": 1,
                    "uniqueItems": True,
                    "items": _NON_EMPTY_STRING,
                },
            },
        },
        "links": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "on_broken_links": {"type": "string", "enum": list(SEVERITIES)},
                "on_broken_markdown_links": {"type": "string", "enum": list(SEVERITIES)},
            },
        },
        "blog": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "path": _NON_EMPTY_STRING,
                "route_base_path": {"type": "string"},
                "sidebar_title": {"type": "string"},
                "sidebar_count": {"type": "integer", "minimum": 0},
                "posts_per_page": {"type": "integer", "minimum": 1},
                "show_reading_time": {"type": "boolean"},
                "words_per_minute": {"type": "integer", "minimum": 1},
            },
        },
        "color_mode": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "default_mode": {"type": "string", "enum": list(COLOR_MODES)},
                "respect_prefers_color_scheme": {"type": "boolean"},
            },
        },
        "prism": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "theme": _NON_EMPTY_STRING,
                "dark_theme": _NON_EMPTY_STRING,
                "additional_languages": {
                    "type": "array",
                    "uniqueItems": True,
                    "items": {"type": "string", "pattern": "^[a-z0-9+#-]+$"},
                },
            },
        },
        "announcement_bar": {
            "type": ["object", "null"],
            "additionalProperties": False,
            "required": ["id", "content"],
            "properties": {
                "id": _NON_EMPTY_STRING,
                "content": _NON_EMPTY_STRING,
                "background_color": {"type": "string"},
                "text_color": {"type": "string"},
                "is_closeable": {"type": "boolean"},
            },
        },
        "navbar": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "title": {"type": "string"},
                "logo": LOGO_SCHEMA,
                "items": {"type": "array", "items": LINK_SCHEMA},
            },
        },
        "footer": {
            "type": "object",
            "additionalProperties": False,
            "required": ["copyright"],
            "properties": {
                "style": {"type": "string", "enum": ["light", "dark"]},
                "logo": LOGO_SCHEMA,
                "links": {"type": "array", "items": LINK_SCHEMA},
                "copyright": {"type": "string"},
            },
        },
        "comments": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "element_id": _NON_EMPTY_STRING,
                "repo": {"type": "string", "pattern": "^[^/\\s]+/[^/\\s]+$"},
                "repo_id": _NON_EMPTY_STRING,
                "category": _NON_EMPTY_STRING,
                "category_id": _NON_EMPTY_STRING,
                "mapping": {
                    "type": "string",
                    "enum": ["pathname", "url", "title", "og:title", "specific", "number"],
                },
                "term": {"type": "string"},
                "reactions_enabled": {"type": "string", "enum": ["0", "1"]},
                "emit_metadata": {"type": "string", "enum": ["0", "1"]},
                "input_position": {"type": "string", "enum": ["top", "bottom"]},
                "lang": _NON_EMPTY_STRING,
                "loading": {"type": "string", "enum": ["lazy", "eager"]},
            },
        },
    },
}
