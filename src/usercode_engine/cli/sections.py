"""Section inspection CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from usercode_engine.config import config_path, load_section_config
from usercode_engine.errors import UserCodeError
from usercode_engine.sections.manager import UserSectionManager
from usercode_engine.utils import file_exists


def _manager(args: argparse.Namespace, required: bool = False) -> UserSectionManager | None:
    cfg = Path(args.config) if args.config else config_path()
    if not cfg.is_file():
        if required:
            print(f"ERROR: Section config not found: {cfg}")
            return None
        return UserSectionManager()
    try:
        return UserSectionManager(load_section_config(cfg))
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        return None


def _capture(manager: UserSectionManager, path: str) -> bool:
    if not file_exists(path):
        print(f"ERROR: File not found: {path}")
        return False
    try:
        manager.capture_from_file(path)
    except UserCodeError as e:
        print(f"ERROR: {e}")
        return False
    return True


def cmd_sections_scan(args: argparse.Namespace) -> int:
    manager = _manager(args)
    if manager is None or not _capture(manager, args.file):
        return 1

    stats = manager.stats()
    print(f"User Sections: {args.file}")
    print("─" * 40)
    print(f"  Named:    {stats.captured_count}")
    for name in manager.captured_section_names():
        print(f"    - {name}")
    print(f"  Partial:  {stats.partial_count}")
    for section_id in sorted(manager.store.partial_ids()):
        print(f"    - {section_id}")
    if stats.defined_count:
        print(f"  Defined:  {stats.defined_count} ({stats.with_default_count} with defaults)")
    return 0


def cmd_sections_show(args: argparse.Namespace) -> int:
    if (args.name is None) == (args.partial is None):
        print("ERROR: Give either a section name or --partial N")
        return 1

    manager = _manager(args)
    if manager is None or not _capture(manager, args.file):
        return 1

    if args.partial is not None:
        content = manager.get_partial_section_content(args.partial)
        label = f"partial section {args.partial}"
    else:
        content = manager.store.named.get(args.name)
        label = args.name

    if content is None:
        print(f"ERROR: No captured content for '{label}'")
        return 1
    print(content, end="")
    return 0


def cmd_sections_validate(args: argparse.Namespace) -> int:
    manager = _manager(args, required=True)
    if manager is None or not _capture(manager, args.file):
        return 1

    result = manager.check_captured()
    print(result.summary())
    return 0 if result.passed else 1
