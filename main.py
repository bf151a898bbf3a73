#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.append(str(ROOT / "src"))

from charlesblog.core.config import ConfigError, iter_links, load_config
from charlesblog.core.links import BrokenLinksError, MissingBuildError, check_site
from charlesblog.core.logging import log_error, log_event, setup_logging
from charlesblog.core.reading_time import format_reading_time, reading_time
from charlesblog.output.static_site import build_static_site
from charlesblog.widgets.giscus import GiscusConfig, render_giscus


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Site configuration tooling for Charles's Blog")
    ap.add_argument("--config", default=str(ROOT / "config.yaml"), help="Path to config.yaml")
    ap.add_argument("--log-dir", default="logs", help="Where run_<id>.jsonl is written")
    ap.add_argument("--log-level", default="INFO")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("validate", help="Validate config.yaml and its link lists")

    p_export = sub.add_parser("export", help="Write site.config.json and HTML partials")
    p_export.add_argument("--out", default="build/generated", help="Output directory")

    p_links = sub.add_parser("check-links", help="Apply the broken-link policy to a build")
    p_links.add_argument("--build-dir", default="build", help="Directory with the built HTML")
    p_links.add_argument("--content-dir", default="", help="Markdown sources (default: blog.path)")

    p_rt = sub.add_parser("reading-time", help="Estimate reading time of a markdown post")
    p_rt.add_argument("post", help="Path to a .md or .mdx file")

    p_comments = sub.add_parser("comments", help="Print the comment widget embed")
    p_comments.add_argument("--color-mode", choices=["light", "dark"], default=None)
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logging(run_id, log_dir=args.log_dir, level=args.log_level, command=args.command)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        log_error("config_invalid", error=str(e))
        return 2

    if args.command == "validate":
        log_event(
            "config_valid",
            title=cfg["site"]["title"],
            links=len(iter_links(cfg)),
            locales=cfg["i18n"]["locales"],
        )
        return 0

    if args.command == "export":
        written = build_static_site(args.out, cfg)
        log_event("export_done", files=[str(p) for p in written])
        return 0

    if args.command == "check-links":
        content_dir = args.content_dir or str(ROOT / cfg["blog"]["path"])
        try:
            counts = check_site(cfg, args.build_dir, content_dir)
        except BrokenLinksError as ex:
            log_error("broken_links_failed", kind=ex.kind, error=str(ex))
            return 1
        except MissingBuildError as ex:
            log_error("build_missing", build_dir=args.build_dir, error=str(ex))
            return 1
        log_event("links_checked", **counts)
        return 0

    if args.command == "reading-time":
        try:
            text = Path(args.post).read_text(encoding="utf-8")
        except OSError as ex:
            log_error("post_unreadable", post=args.post, error=repr(ex))
            return 2
        print(format_reading_time(reading_time(text, cfg["blog"]["words_per_minute"])))
        return 0

    color_mode = args.color_mode or cfg["color_mode"]["default_mode"]
    print(render_giscus(color_mode, GiscusConfig.from_config(cfg)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
