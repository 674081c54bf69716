# -*- coding: utf-8 -*-
"""
extract_modules.py

Purpose:
- Extract reusable modules from platform checkouts into the module library
- Platform checkouts default to <PLATFORMS_ROOT>/<platform dir>; override one with PLATFORM_PATH_<KEY>

Usage:
  python extract_modules.py --list
  python extract_modules.py --module auth
  python extract_modules.py --bundle core
  python extract_modules.py --all --output ./module-library --platforms-root ~/src
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from assembler.config import Config
from assembler.module_catalog import BUNDLES, MODULES
from assembler.utils import get_logger, setup_logging
from engine.module_extractor import ExtractionResult, ModuleExtractor

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Module library extractor")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--list", action="store_true", help="List all modules and bundles")
    action.add_argument("--all", action="store_true", help="Extract every module")
    action.add_argument("--bundle", metavar="NAME", help="Extract a module bundle")
    action.add_argument("--module", metavar="NAME", help="Extract a single module")
    parser.add_argument(
        "--output",
        default=None,
        help=f"Module library directory (default: MODULE_LIBRARY_PATH, {Config.MODULE_LIBRARY_PATH})",
    )
    parser.add_argument(
        "--platforms-root",
        default=None,
        help="Directory containing the platform checkouts (default: PLATFORMS_ROOT)",
    )
    return parser


def _summarize(results: List[ExtractionResult]) -> int:
    failed = [r.name for r in results if not r.ok]
    copied = sum(r.copied for r in results)
    total = sum(r.total for r in results)
    logger.info(f"Done: {len(results) - len(failed)}/{len(results)} modules, {copied}/{total} files")
    if failed:
        logger.warning(f"Modules with nothing extracted: {', '.join(failed)}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.list or args.all or args.bundle or args.module):
        parser.print_help()
        print("\nBundles:")
        for name, members in BUNDLES.items():
            print(f"  {name:<13} {', '.join(members)}")
        return 0

    extractor = ModuleExtractor(
        platform_paths=Config.platform_paths(args.platforms_root),
        output_path=args.output or Config.MODULE_LIBRARY_PATH,
    )

    if args.list:
        print(extractor.list_modules())
        return 0

    setup_logging()

    logger.info(f"Output: {extractor.output_path}")
    if args.all:
        return _summarize(extractor.extract_all())
    if args.bundle:
        if args.bundle not in BUNDLES:
            logger.error(f"Unknown bundle: {args.bundle}")
            return 1
        return _summarize(extractor.extract_bundle(args.bundle))
    if args.module not in MODULES:
        logger.error(f"Unknown module: {args.module}")
        return 1
    return _summarize([extractor.extract_module(args.module)])


if __name__ == "__main__":
    raise SystemExit(main())
