from __future__ import annotations

import random

import pytest

from assembler.industry_data import (
    INDUSTRY_KEYWORDS,
    INDUSTRY_TEST_DATA,
    TIME_SLOT_SCHEDULES,
    format_display_time,
    generate_time_slots,
    get_test_data_for_industry,
    normalize_industry,
    resolve_industry_key,
)


@pytest.mark.parametrize(
    "industry, expected",
    [
        ("Pizza Palace", "pizza"),
        ("pizzeria-downtown", "pizza"),
        ("unknown-xyz", "restaurant"),
        ("", "restaurant"),
        (None, "restaurant"),
        ("law-firm", "law-firm"),
        ("Law Firm", "law-firm"),
        ("Real Estate Agency", "real-estate"),
        ("Coffee House", "cafe"),
        ("Joe's Barber Shop", "barbershop"),
        ("Downtown Dentist", "dental"),
        ("Hot Yoga Studio", "yoga"),
        ("24/7 Gym", "fitness"),
        ("Plumbing Pros", "plumber"),
    ],
)
def test_resolve_industry_key(industry, expected) -> None:
    assert resolve_industry_key(industry) == expected


def test_first_keyword_wins() -> None:
    # contains both "pizza" and "restaurant": pizza is checked first
    assert resolve_industry_key("Pizza Restaurant") == "pizza"
    # "hair" (salon) is listed before "barber"
    assert resolve_industry_key("barber and hair") == "salon"


def test_normalize_industry() -> None:
    assert normalize_industry("Pizza-Palace #1!") == "pizzapalace"
    assert normalize_industry(None) == ""


def test_keyword_targets_exist() -> None:
    for _, key in INDUSTRY_KEYWORDS:
        assert key in INDUSTRY_TEST_DATA
    for key in TIME_SLOT_SCHEDULES:
        assert key in INDUSTRY_TEST_DATA


def test_menu_items_reference_existing_categories() -> None:
    for key, entry in INDUSTRY_TEST_DATA.items():
        category_ids = {c["id"] for c in entry["menu"]["categories"]}
        for item in entry["menu"]["items"]:
            assert item["category_id"] in category_ids, (key, item["name"])


def test_lookup_returns_private_copy() -> None:
    data = get_test_data_for_industry("pizza")
    data["menu"]["items"].clear()
    assert INDUSTRY_TEST_DATA["pizza"]["menu"]["items"]


def test_service_industries_get_time_slots() -> None:
    data = get_test_data_for_industry("salon", rng=random.Random(1))
    assert data["services"]
    # 9am-7pm in 30 minute steps
    assert len(data["timeSlots"]) == 20
    assert "timeSlots" not in get_test_data_for_industry("pizza")


def test_generate_time_slots_shape() -> None:
    slots = generate_time_slots(9, 11, 30, rng=random.Random(7))
    assert [s["time"] for s in slots] == ["09:00", "09:30", "10:00", "10:30"]
    assert [s["displayTime"] for s in slots] == ["9:00 AM", "9:30 AM", "10:00 AM", "10:30 AM"]
    assert all(isinstance(s["available"], bool) for s in slots)


def test_time_slot_availability_is_roughly_seventy_percent() -> None:
    slots = generate_time_slots(0, 24, 1, rng=random.Random(42))
    share = sum(s["available"] for s in slots) / len(slots)
    assert 0.65 < share < 0.75


def test_invalid_interval_is_rejected() -> None:
    with pytest.raises(ValueError):
        generate_time_slots(9, 10, 0)


@pytest.mark.parametrize(
    "hour, minute, expected",
    [(0, 0, "12:00 AM"), (9, 5, "9:05 AM"), (12, 30, "12:30 PM"), (17, 0, "5:00 PM")],
)
def test_format_display_time(hour, minute, expected) -> None:
    assert format_display_time(hour, minute) == expected
