from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from sablan_text.app_paths import get_app_paths
from sablan_text.config import Settings, load_settings
from sablan_text.inventory.check import check_inventory
from sablan_text.inventory.report import INVENTORY_JSON, count_by_class, write_inventory
from sablan_text.inventory.scan import scan_tree
from sablan_text.util.text_sanitize import FALLBACK_TEXT, sanitize_ui_text_with_candidates

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logs_dir = get_app_paths().logs_dir
    log_file = logs_dir / f"sablan_text_{datetime.now().strftime('%Y%m%d')}.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
        force=True,
    )


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def cmd_scan(root: Path, settings: Settings) -> int:
    records = scan_tree(root, settings)
    try:
        json_path, csv_path = write_inventory(records, root / settings.reports_dir)
    except OSError as e:
        logger.error(f"Could not write inventory: {e}", exc_info=True)
        return 1

    print("Generated corruption inventory:")
    print(f"- JSON: {_display_path(json_path, root)}")
    print(f"- CSV:  {_display_path(csv_path, root)}")
    print(f"- Total records: {len(records)}")
    for klass, n in count_by_class(records).items():
        print(f"  - {klass}: {n}")
    return 0


def cmd_check(root: Path, settings: Settings) -> int:
    result = check_inventory(root / settings.reports_dir / INVENTORY_JSON)
    stream = sys.stdout if result.ok else sys.stderr
    for line in result.lines:
        print(line, file=stream)
    return result.exit_code


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sablan-text")
    parser.add_argument("--root", default=".", help="project root to scan")
    parser.add_argument("--log-level", default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("scan", help="write the text corruption inventory")
    sub.add_parser("check", help="fail when the inventory is not empty")

    p_sanitize = sub.add_parser("sanitize", help="print the first usable value")
    p_sanitize.add_argument("values", nargs="*")
    p_sanitize.add_argument("--fallback", default=FALLBACK_TEXT)

    args = parser.parse_args(argv)

    if args.cmd == "sanitize":
        print(sanitize_ui_text_with_candidates(args.values, args.fallback))
        return 0

    root = Path(args.root).resolve()
    settings = load_settings(root, log_level=args.log_level)
    setup_logging(settings.log_level)
    logger.debug(f"Settings: {settings}")

    if args.cmd == "scan":
        return cmd_scan(root, settings)
    if args.cmd == "check":
        return cmd_check(root, settings)
    return 2


if __name__ == "__main__":
    sys.exit(main())
