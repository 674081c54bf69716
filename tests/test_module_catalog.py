from __future__ import annotations

from assembler.module_catalog import BUNDLES, MODULES, PLATFORMS, validate_catalog


def test_catalog_is_consistent() -> None:
    assert validate_catalog() == []


def test_catalog_size() -> None:
    assert len(MODULES) == 54
    assert len(BUNDLES) == 10
    assert set(PLATFORMS) >= {m["bestSource"] for m in MODULES.values()}


def test_files_and_output_files_correspond() -> None:
    for name, module in MODULES.items():
        assert len(module["files"]) == len(module["outputFiles"]), name


def test_bundle_members_exist_and_keep_order() -> None:
    assert BUNDLES["core"][0] == "auth"
    for bundle, members in BUNDLES.items():
        for member in members:
            assert member in MODULES, (bundle, member)
