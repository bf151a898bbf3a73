"""Tests for the giscus comment widget props and embed."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from charlesblog.widgets.giscus import GISCUS_CLIENT_URL, GiscusConfig, giscus_props, render_giscus

FIXED = {
    "element_id": "comments",
    "repo": "charlescyt/charlescyt.github.io",
    "repo_id": "R_kgDOLohVEg",
    "category": "Comments",
    "category_id": "DIC_kwDOLohVEs4Cei86",
    "mapping": "title",
    "term": "Welcome to @giscus/react component!",
    "reactions_enabled": "1",
    "emit_metadata": "0",
    "input_position": "top",
    "lang": "en",
    "loading": "lazy",
}


class TestGiscusProps:
    @pytest.mark.parametrize("mode", ["dark", "light"])
    def test_theme_forwarded_unchanged(self, mode) -> None:
        assert giscus_props(mode)["theme"] == mode

    @pytest.mark.parametrize("mode", ["dark", "light"])
    def test_fixed_values_forwarded(self, mode) -> None:
        props = giscus_props(mode)
        for key, value in FIXED.items():
            assert props[key] == value

    def test_only_theme_varies(self) -> None:
        dark = giscus_props("dark")
        light = giscus_props("light")
        assert {k for k in dark if dark[k] != light[k]} == {"theme"}

    @pytest.mark.parametrize("mode", ["", "Dark", "sepia", "transparent_dark"])
    def test_unknown_color_mode(self, mode) -> None:
        with pytest.raises(ValueError, match="Unknown color mode"):
            giscus_props(mode)

    def test_pure(self) -> None:
        assert giscus_props("dark") == giscus_props("dark")


class TestGiscusConfig:
    def test_from_checked_in_config_matches_defaults(self, cfg) -> None:
        assert GiscusConfig.from_config(cfg) == GiscusConfig()

    def test_from_empty_config(self) -> None:
        assert GiscusConfig.from_config(None) == GiscusConfig()
        assert GiscusConfig.from_config({}) == GiscusConfig()

    def test_overrides_and_unknown_keys(self) -> None:
        conf = GiscusConfig.from_config({"comments": {"lang": "de", "whatever": 1}})
        assert conf.lang == "de"
        assert conf.repo == FIXED["repo"]
        assert giscus_props("light", conf)["lang"] == "de"


class TestRenderGiscus:
    def _script(self, html: str):
        soup = BeautifulSoup(html, "html.parser")
        container = soup.find("div", id="comments")
        assert container is not None
        assert "giscus" in container.get("class", [])
        return container.find("script")

    @pytest.mark.parametrize("mode", ["dark", "light"])
    def test_data_attributes(self, mode) -> None:
        script = self._script(render_giscus(mode))
        assert script["src"] == GISCUS_CLIENT_URL
        assert script["data-theme"] == mode
        assert script["data-repo"] == FIXED["repo"]
        assert script["data-repo-id"] == FIXED["repo_id"]
        assert script["data-category-id"] == FIXED["category_id"]
        assert script["data-mapping"] == "title"
        assert script["data-reactions-enabled"] == "1"
        assert script["data-emit-metadata"] == "0"
        assert script["data-input-position"] == "top"
        assert script["data-loading"] == "lazy"
        assert script["crossorigin"] == "anonymous"
        assert script.has_attr("async")

    def test_values_are_escaped(self) -> None:
        conf = GiscusConfig(term='"><script>alert(1)</script>')
        html = render_giscus("dark", conf)
        assert "<script>alert(1)" not in html
        assert self._script(html)["data-term"] == conf.term
