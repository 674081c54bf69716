#!/usr/bin/env python3
"""
test_data_module.py - Generate the test-data module for a generated backend

The output is Python *source text*: a self-contained module holding the
industry's mock data plus in-memory order/booking helpers, so a generated
backend can run in test mode without a database.

Input: industry string (fuzzy matched, see assembler.industry_data)
Output: module source (string) or a file written with write_test_data_module()
"""

from __future__ import annotations

import pprint
from pathlib import Path
from typing import Optional, Union

from assembler.industry_data import (
    SLOT_AVAILABILITY,
    get_test_data_for_industry,
    resolve_industry_key,
)
from assembler.utils import get_logger, handle_errors

logger = get_logger(__name__)

# Runtime helpers appended after TEST_DATA (plain text, not formatted)
_MODULE_BODY = '''

def _now_iso():
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _stamp():
    return int(time.time() * 1000)


def get_menu():
    """Menu categories, each with its items attached."""
    menu = TEST_DATA["menu"]
    return {
        "categories": [
            dict(cat, items=[i for i in menu["items"] if i["category_id"] == cat["id"]])
            for cat in menu["categories"]
        ]
    }


def get_services():
    return list(TEST_DATA.get("services") or [])


def get_time_slots(date=None):
    """Time slots for a date (default today); availability is re-rolled per call."""
    day = date or datetime.now(timezone.utc).date().isoformat()
    return [
        dict(slot, available=random.random() < SLOT_AVAILABILITY, date=day)
        for slot in TEST_DATA.get("timeSlots") or []
    ]


# Mock order storage
orders = []


def create_order(order_data):
    order = {"id": f"ORD-{_stamp()}"}
    order.update(order_data or {})
    order.update({"status": "confirmed", "createdAt": _now_iso()})
    orders.append(order)
    return order


# Mock booking storage
bookings = []


def create_booking(booking_data):
    booking = {"id": f"BK-{_stamp()}"}
    booking.update(booking_data or {})
    booking.update({"status": "confirmed", "createdAt": _now_iso()})
    bookings.append(booking)
    return booking


__all__ = [
    "TEST_DATA",
    "get_menu",
    "get_services",
    "get_time_slots",
    "create_order",
    "create_booking",
    "orders",
    "bookings",
]
'''


def _one_line(value: Optional[str]) -> str:
    """Collapse whitespace and drop control characters so the text fits in a comment."""
    text = " ".join(str(value or "").split())
    return "".join(ch for ch in text if ch.isprintable())


def generate_test_data_module(industry: Optional[str]) -> str:
    """Return the source of a test-data module for the industry (nothing is executed)."""
    data = get_test_data_for_industry(industry)
    key = resolve_industry_key(industry)
    header = (
        '"""\n'
        "Test Data Module\n"
        "Auto-generated mock data for test mode\n"
        '"""\n'
        f"# Industry: {_one_line(industry) or '(none)'} -> {key}\n"
        "\n"
        "import random\n"
        "import time\n"
        "from datetime import datetime, timezone\n"
        "\n"
        f"SLOT_AVAILABILITY = {SLOT_AVAILABILITY!r}\n"
        "\n"
        f"TEST_DATA = {pprint.pformat(data, indent=1, width=100, sort_dicts=False)}\n"
    )
    return header + _MODULE_BODY


@handle_errors(stage="test_data_module")
def write_test_data_module(industry: Optional[str], output_path: Union[str, Path]) -> Path:
    """Render the module and write it to output_path (parent directories created)."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_test_data_module(industry), encoding="utf-8")
    logger.info(f"Test data module for '{industry}' written to {output_path}")
    return output_path
