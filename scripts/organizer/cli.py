"""Command-line interface for the class organizer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from enum import IntEnum
from pathlib import Path
from typing import Optional

from scripts.organizer.classifier import explain
from scripts.organizer.config import (
    DEFAULT_CONFIG_PATH,
    FORMATS,
    ConfigError,
    OrganizerConfig,
    load_config,
)
from scripts.organizer.organize import generate_jsx_class_name, organize, resolve_wrapper
from scripts.organizer.render import parse_grouped_lines, render_with_comments

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    USAGE_ERROR = 2


def _get_config(config_path: Optional[str]) -> OrganizerConfig:
    """Load config from an explicit path, else from the working directory."""
    if config_path:
        return load_config(config_path)
    return load_config(Path.cwd() / DEFAULT_CONFIG_PATH)


def _read_classes(args: argparse.Namespace) -> str:
    """Return classes from positional arguments, or stdin when none are given."""
    if args.classes:
        return " ".join(args.classes)
    return sys.stdin.read()


def cmd_organize(args: argparse.Namespace, config: OrganizerConfig) -> int:
    """Print the organized class string."""
    fmt = args.format or config.format
    wrapper = resolve_wrapper(config)
    function_name = args.function or wrapper.name

    output = organize(_read_classes(args), fmt, function_name, config.precedence())
    print(output)
    return ExitCode.SUCCESS


def cmd_jsx(args: argparse.Namespace, config: OrganizerConfig) -> int:
    """Print a JSX element snippet with grouped classes."""
    output = generate_jsx_class_name(
        _read_classes(args),
        component_name=args.component or config.component_name,
        function_name=args.function or config.utility_function,
        groups=config.precedence(),
    )
    print(output)
    return ExitCode.SUCCESS


def cmd_wrap(args: argparse.Namespace, config: OrganizerConfig) -> int:
    """Turn ``// Label`` grouped lines from stdin into a wrapper call."""
    groups = parse_grouped_lines(sys.stdin.read())
    if not groups:
        print("No classes found in input", file=sys.stderr)
        return ExitCode.USAGE_ERROR

    function_name = args.function or config.utility_function
    print(render_with_comments(groups, function_name, comments=not args.no_comments))
    return ExitCode.SUCCESS


def cmd_explain(args: argparse.Namespace, config: OrganizerConfig) -> int:
    """Print how each token is classified, as JSON."""
    groups = config.precedence()
    results = [asdict(explain(token, groups)) for token in _read_classes(args).split()]
    print(json.dumps(results, indent=2))
    return ExitCode.SUCCESS


def cmd_groups(_args: argparse.Namespace, config: OrganizerConfig) -> int:
    """Print the precedence table."""
    for index, group in enumerate(config.precedence(), start=1):
        patterns = " ".join(p.text for p in group.patterns)
        print(f"{index:>2}. {group.label} [{group.tier}]: {patterns}")
    return ExitCode.SUCCESS


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add --config and --verbose arguments to a parser."""
    parser.add_argument(
        "--config",
        "-c",
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="organizer",
        description="Group and reorder Tailwind-style utility classes",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    organize_parser = subparsers.add_parser(
        "organize",
        help="Reorder classes (reads stdin when no classes are given)",
    )
    _add_common_args(organize_parser)
    organize_parser.add_argument("classes", nargs="*", help="Class tokens")
    organize_parser.add_argument("--format", "-f", choices=FORMATS, help="Output format")
    organize_parser.add_argument("--function", help="Wrapper function for with-comments")

    jsx_parser = subparsers.add_parser(
        "jsx",
        help="Render a JSX element snippet with grouped classes",
    )
    _add_common_args(jsx_parser)
    jsx_parser.add_argument("classes", nargs="*", help="Class tokens")
    jsx_parser.add_argument("--component", help="Element name (default: select)")
    jsx_parser.add_argument("--function", help="Wrapper function (default: clsx)")

    wrap_parser = subparsers.add_parser(
        "wrap",
        help="Convert '// Label' grouped lines on stdin into a wrapper call",
    )
    _add_common_args(wrap_parser)
    wrap_parser.add_argument("--function", help="Wrapper function (default: clsx)")
    wrap_parser.add_argument("--no-comments", action="store_true", help="Omit group comments")

    explain_parser = subparsers.add_parser(
        "explain",
        help="Show the group and pattern each token matches",
    )
    _add_common_args(explain_parser)
    explain_parser.add_argument("classes", nargs="*", help="Class tokens")

    groups_parser = subparsers.add_parser(
        "groups",
        help="List groups in precedence order",
    )
    _add_common_args(groups_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _get_config(args.config)
    except ConfigError as e:
        print(json.dumps(e.to_json()), file=sys.stderr)
        return ExitCode.CONFIG_ERROR

    commands = {
        "organize": cmd_organize,
        "jsx": cmd_jsx,
        "wrap": cmd_wrap,
        "explain": cmd_explain,
        "groups": cmd_groups,
    }

    logger.debug("Running %s", args.command)
    return commands[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
