# -*- coding: utf-8 -*-
"""
generate_test_data.py

Purpose:
- Write the test-mode data module (mock menu/services/time slots) for a generated backend

Usage:
  python generate_test_data.py --industry "Pizza Palace" --output generated/backend/test_data.py
  python generate_test_data.py --industry "downtown dental" --show-key
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from assembler.industry_data import resolve_industry_key
from assembler.utils import AssemblerError, get_logger, setup_logging
from engine.test_data_module import generate_test_data_module, write_test_data_module

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a test-data module for an industry")
    parser.add_argument("--industry", required=True, help="Free-form industry (e.g. 'pizzeria')")
    parser.add_argument("--output", default="", help="File to write (prints to stdout when empty)")
    parser.add_argument(
        "--show-key",
        action="store_true",
        help="Only print which catalog entry the industry resolves to",
    )
    args = parser.parse_args(argv)

    if args.show_key:
        print(resolve_industry_key(args.industry))
        return 0

    if not args.output:
        print(generate_test_data_module(args.industry))
        return 0

    setup_logging()
    try:
        write_test_data_module(args.industry, args.output)
    except AssemblerError as e:
        logger.error(f"Could not write test data module: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
