import argparse
import logging
import os
import sys
from pathlib import Path

from marketroute.components.registry import create_registry
from marketroute.components.slugs import slugify
from marketroute.components.urls import UrlCodec, create_url_codec
from marketroute.rules import RoutingRules, default_rules, load_rules

logger = logging.getLogger("cli")

RULES_PATH = "routing.yaml"


def get_rules(rules_file: str | None) -> RoutingRules:
    path = rules_file or os.environ.get("MARKETROUTE_RULES_PATH")
    if not path:
        return default_rules()

    try:
        return load_rules(Path(path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load routing rules: {e}")
        sys.exit(1)


def get_codec(args: argparse.Namespace) -> UrlCodec:
    return create_url_codec(create_registry(get_rules(args.rules)))


def handle_slugify(args: argparse.Namespace) -> None:
    print(slugify(args.text))


def handle_parse_url(args: argparse.Namespace) -> None:
    codec = get_codec(args)
    match = codec.parse_url(args.path)
    print(f"siteaccess: {match.siteaccess}")
    print(f"market:     {match.market}")
    print(f"locale:     {match.locale}")
    print(f"path:       {codec.strip_locale_prefix(args.path)}")


def handle_build_url(args: argparse.Namespace) -> None:
    codec = get_codec(args)
    print(codec.build_full_url(args.market, args.locale, args.path))


def handle_strip_prefix(args: argparse.Namespace) -> None:
    codec = get_codec(args)
    print(codec.strip_locale_prefix(args.path))


def handle_check_rules(args: argparse.Namespace) -> None:
    path = Path(args.file or RULES_PATH)
    try:
        rules = load_rules(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"{path}: {e}")
        sys.exit(1)

    print(
        f"{path}: OK ({len(rules.locales)} locales, {len(rules.markets)} markets, "
        f"{len(rules.siteaccesses)} siteaccesses)"
    )


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Market Route CLI")
    parser.add_argument("--rules", help="Routing rules YAML (defaults to built-in tables)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # slugify
    slug_parser = subparsers.add_parser("slugify", help="Turn text into a URL slug")
    slug_parser.add_argument("text")

    # parse-url
    parse_parser = subparsers.add_parser("parse-url", help="Identify siteaccess of a path")
    parse_parser.add_argument("path")

    # build-url
    build_parser = subparsers.add_parser("build-url", help="Build a prefixed URL")
    build_parser.add_argument("market")
    build_parser.add_argument("locale")
    build_parser.add_argument("path", nargs="?", default="")

    # strip-prefix
    strip_parser = subparsers.add_parser("strip-prefix", help="Remove the siteaccess prefix")
    strip_parser.add_argument("path")

    # check-rules
    check_parser = subparsers.add_parser("check-rules", help="Validate a routing rules file")
    check_parser.add_argument("file", nargs="?", help=f"Rules file (default: {RULES_PATH})")

    args = parser.parse_args(argv)

    if args.command == "slugify":
        handle_slugify(args)
    elif args.command == "parse-url":
        handle_parse_url(args)
    elif args.command == "build-url":
        handle_build_url(args)
    elif args.command == "strip-prefix":
        handle_strip_prefix(args)
    elif args.command == "check-rules":
        handle_check_rules(args)


if __name__ == "__main__":
    main()
