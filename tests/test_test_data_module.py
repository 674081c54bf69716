from __future__ import annotations

from engine.test_data_module import generate_test_data_module, write_test_data_module


def _load(source: str) -> dict:
    namespace: dict = {}
    exec(compile(source, "test_data.py", "exec"), namespace)
    return namespace


def test_generated_source_defines_runtime_helpers() -> None:
    source = generate_test_data_module("Pizza Palace")
    assert isinstance(source, str)
    assert "-> pizza" in source
    module = _load(source)
    for name in ("TEST_DATA", "get_menu", "get_services", "get_time_slots", "create_order", "create_booking", "orders", "bookings"):
        assert name in module


def test_generated_menu_groups_items_by_category() -> None:
    module = _load(generate_test_data_module("pizza"))
    menu = module["get_menu"]()
    names = [c["name"] for c in menu["categories"]]
    assert names == ["Pizzas", "Sides", "Drinks"]
    assert [i["name"] for i in menu["categories"][2]["items"]] == ["Soda", "Iced Tea"]


def test_generated_orders_and_bookings_are_process_local() -> None:
    module = _load(generate_test_data_module("spa"))
    order = module["create_order"]({"items": [1, 2], "status": "ignored"})
    assert order["id"].startswith("ORD-")
    assert order["status"] == "confirmed"
    assert module["orders"] == [order]

    booking = module["create_booking"]({"serviceId": 3})
    assert booking["id"].startswith("BK-")
    assert module["bookings"] == [booking]

    slots = module["get_time_slots"]("2026-01-05")
    assert slots and all(s["date"] == "2026-01-05" for s in slots)
    assert module["get_services"]()[0]["name"] == "Swedish Massage"


def test_industry_text_cannot_break_out_of_comment() -> None:
    source = generate_test_data_module('evil\nimport os; os.remove("x")')
    module = _load(source)
    assert "os" not in module
    assert "# Industry: evil import os" in source


def test_control_characters_are_dropped_from_industry_comment() -> None:
    source = generate_test_data_module("pizza\x00palace\x1b")
    compile(source, "test_data.py", "exec")
    assert "# Industry: pizzapalace -> pizza" in source


def test_write_test_data_module(tmp_path) -> None:
    target = tmp_path / "backend" / "test_data.py"
    written = write_test_data_module("dental", target)
    assert written == target
    module = _load(target.read_text(encoding="utf-8"))
    assert module["TEST_DATA"]["services"][0]["name"] == "Dental Cleaning"
