"""Command-line interface for pagesexp."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from bs4 import Tag
from pydantic import ValidationError

from pagesexp.compactor import FAILURE_PREFIX, compact_tree
from pagesexp.config import Settings
from pagesexp.errors import CompactError
from pagesexp.loader import load_file, load_tree, load_url, looks_like_url
from pagesexp.models import CompactOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagesexp",
        description="Compact a rendered web page into an S-expression for selector authoring.",
    )
    parser.add_argument(
        "source",
        help="http(s) URL (rendered via ScraperAPI), path to an HTML file, or '-' for stdin",
    )

    shape = parser.add_argument_group("output shape")
    shape.add_argument("--pretty", action="store_true", help="One node per line, indented")
    shape.add_argument("--indent", type=int, default=None, help="Spaces per level with --pretty (default: 2)")
    shape.add_argument("--no-css-head", action="store_true", help="Plain tag heads; id/class go to the attribute list")
    shape.add_argument("--no-id-in-head", action="store_true", help="Keep #id out of the head token")
    shape.add_argument("--span-alias", default=None, help="Head token for <span> (default: span)")
    shape.add_argument("--attr-pairs", action="store_true", help="Emit :key \"value\" pairs instead of a {...} map")

    pruning = parser.add_argument_group("pruning")
    pruning.add_argument(
        "--interactive",
        action="append",
        metavar="TAG",
        default=None,
        help="Interactive tag (repeatable; replaces the default a, button, input, i, select, textarea)",
    )
    pruning.add_argument(
        "--keep-attr",
        action="append",
        metavar="ATTR",
        default=None,
        help="Attribute to keep (repeatable; replaces the default id, class, href, src, srcset)",
    )
    pruning.add_argument("--no-strip-attrs", action="store_true", help="Leave attributes untouched")
    pruning.add_argument("--keep-aria", action="store_true", help="Keep aria-* attributes")
    pruning.add_argument("--drop-data", action="store_true", help="Drop data-* attributes")
    pruning.add_argument("--drop-style", action="store_true", help="Drop inline style attributes")
    pruning.add_argument("--all-nodes", action="store_true", help="Disable relevance pruning")

    fetch = parser.add_argument_group("fetching")
    fetch.add_argument("--auto-scroll", action="store_true", help="Enable scroll-based loading for infinite scroll pages")
    fetch.add_argument("--no-render", action="store_true", help="Disable JavaScript rendering")
    fetch.add_argument("--parser", default=None, help="BeautifulSoup parser (default: lxml)")

    parser.add_argument("-o", "--output", default=None, help="Output file path (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def options_from_args(args: argparse.Namespace) -> CompactOptions:
    overrides: dict = {
        "pretty": args.pretty,
        "css_head": not args.no_css_head,
        "include_id_in_head": not args.no_id_in_head,
        "attr_map": not args.attr_pairs,
        "strip_attrs": not args.no_strip_attrs,
        "drop_aria_attrs": not args.keep_aria,
        "drop_data_attrs": args.drop_data,
        "keep_style": not args.drop_style,
        "relevant_only": not args.all_nodes,
    }
    if args.indent is not None:
        overrides["indent"] = args.indent
    if args.span_alias is not None:
        overrides["span_alias"] = args.span_alias
    if args.interactive is not None:
        overrides["interactive_tags"] = args.interactive
    if args.keep_attr is not None:
        overrides["keep_attrs"] = args.keep_attr
    return CompactOptions(**overrides)


def load_document(source: str, settings: Settings) -> Tag:
    if source == "-":
        return load_tree(sys.stdin.read(), settings)
    if looks_like_url(source):
        return load_url(source, settings)
    return load_file(source, settings)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        parser.error(f"invalid settings: {exc}")

    # Apply CLI overrides
    overrides = {}
    if args.auto_scroll:
        overrides["auto_scroll"] = True
    if args.no_render:
        overrides["render_js"] = False
    if args.parser:
        overrides["html_parser"] = args.parser
    if overrides:
        settings = replace(settings, **overrides)

    try:
        options = options_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        root = load_document(args.source, settings)
        output = compact_tree(root, options)
    except CompactError as exc:
        logger.error("Failed to generate compact page representation: %s", exc)
        print(f"{FAILURE_PREFIX}: {exc}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        print(f"Output written to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
