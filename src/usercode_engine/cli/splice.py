"""Generated-block splice CLI command."""

import argparse
from pathlib import Path

from usercode_engine.splice import GeneratedCodeManager


def cmd_splice(args: argparse.Namespace) -> int:
    content_file = Path(args.content_file)
    if not content_file.is_file():
        print(f"ERROR: Content file not found: {content_file}")
        return 1

    manager = GeneratedCodeManager()
    manager.set_section(args.tool, args.purpose, content_file.read_text(encoding="utf-8"))
    action = manager.embed_to_file(args.file, dry_run=args.dry_run)

    print(f"{args.file}: {action}")
    if args.dry_run:
        print("\n[DRY RUN] No files were modified.")
    return 0
