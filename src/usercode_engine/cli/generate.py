"""Example generator CLI commands."""

import argparse

from usercode_engine.errors import UserCodeError


def cmd_generate_header(args: argparse.Namespace) -> int:
    from usercode_engine.examples import generate_example_header

    capture = args.capture or args.output
    try:
        generate_example_header(args.output, capture)
    except UserCodeError as e:
        print(f"ERROR: {e}")
        return 1
    print(f"Generated {args.output}")
    return 0


def cmd_generate_source(args: argparse.Namespace) -> int:
    from usercode_engine.examples import generate_example_source

    capture = args.capture or args.output
    try:
        generate_example_source(args.output, args.header_name, capture)
    except UserCodeError as e:
        print(f"ERROR: {e}")
        return 1
    print(f"Generated {args.output}")
    return 0
