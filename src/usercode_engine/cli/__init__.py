"""Command-line interface for usercode-engine.

Usage:
    usercode sections scan <file> [--config <path>]
    usercode sections show <file> (<name> | --partial N)
    usercode sections validate <file> [--config <path>]
    usercode generate header <output> [--capture <path>]
    usercode generate source <output> [--capture <path>] [--header-name <name>]
    usercode splice <file> --tool T --purpose P --content-file F [--dry-run]
"""

from __future__ import annotations

import argparse
import logging
import sys

from usercode_engine.cli.generate import cmd_generate_header, cmd_generate_source
from usercode_engine.cli.sections import (
    cmd_sections_scan,
    cmd_sections_show,
    cmd_sections_validate,
)
from usercode_engine.cli.splice import cmd_splice


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usercode",
        description="Preserve user-written sections across code regeneration",
    )
    parser.add_argument(
        "--config", default=None,
        help="Section definition YAML (default: $USERCODE_CONFIG or ./usercode.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # sections
    sec = sub.add_parser("sections", help="Inspect user sections in a file")
    sec_sub = sec.add_subparsers(dest="subcommand")
    # --config may also follow the subcommand
    sec_common = argparse.ArgumentParser(add_help=False)
    sec_common.add_argument(
        "--config", default=argparse.SUPPRESS,
        help="Section definition YAML",
    )

    scan = sec_sub.add_parser(
        "scan", parents=[sec_common], help="Capture sections and print counts",
    )
    scan.add_argument("file")

    show = sec_sub.add_parser(
        "show", parents=[sec_common], help="Print a captured section",
    )
    show.add_argument("file")
    show.add_argument("name", nargs="?", default=None)
    show.add_argument(
        "--partial", type=int, default=None,
        help="Partial section id to print instead of a named section",
    )

    val = sec_sub.add_parser(
        "validate", parents=[sec_common],
        help="Check captured names against the section definitions",
    )
    val.add_argument("file")

    # generate
    gen = sub.add_parser("generate", help="Run the example generators")
    gen_sub = gen.add_subparsers(dest="subcommand")

    gen_header = gen_sub.add_parser("header", help="Generate example.h")
    gen_header.add_argument("output")
    gen_header.add_argument(
        "--capture", default=None,
        help="Previous output to capture user sections from (default: <output>)",
    )

    gen_source = gen_sub.add_parser("source", help="Generate example.c")
    gen_source.add_argument("output")
    gen_source.add_argument(
        "--capture", default=None,
        help="Previous output to capture user sections from (default: <output>)",
    )
    gen_source.add_argument(
        "--header-name", default="example.h",
        help="Header to #include (default: example.h)",
    )

    # splice
    spl = sub.add_parser("splice", help="Embed a generated block into an existing file")
    spl.add_argument("file")
    spl.add_argument("--tool", required=True, help="Generating tool name")
    spl.add_argument("--purpose", required=True, help="Block purpose")
    spl.add_argument(
        "--content-file", required=True,
        help="File holding the block content",
    )
    spl.add_argument(
        "--dry-run", action="store_true",
        help="Report the action without writing",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("sections", "scan"): cmd_sections_scan,
        ("sections", "show"): cmd_sections_show,
        ("sections", "validate"): cmd_sections_validate,
        ("generate", "header"): cmd_generate_header,
        ("generate", "source"): cmd_generate_source,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "splice":
        return cmd_splice(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
