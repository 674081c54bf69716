from __future__ import annotations

import json

import extract_modules
import generate_test_data
from assembler.config import Config
from assembler.module_catalog import BUNDLES, MODULES


def test_extract_modules_list_prints_every_module_and_bundle(capsys) -> None:
    assert extract_modules.main(["--list"]) == 0
    out = capsys.readouterr().out
    for name in MODULES:
        assert f"  - {name} (from " in out
    for name in BUNDLES:
        assert f"  - {name}: " in out


def test_extract_modules_without_action_prints_usage(capsys) -> None:
    assert extract_modules.main([]) == 0
    out = capsys.readouterr().out
    assert "--bundle" in out
    assert "collectibles" in out


def test_extract_modules_unknown_names_fail(tmp_path) -> None:
    args = ["--output", str(tmp_path / "lib"), "--platforms-root", str(tmp_path)]
    assert extract_modules.main(["--module", "does-not-exist", *args]) == 1
    assert extract_modules.main(["--bundle", "does-not-exist", *args]) == 1


def test_extract_modules_single_module_from_platforms_root(tmp_path) -> None:
    module = MODULES["chat"]
    root = tmp_path / "platforms"
    checkout = root / "My-Family-Huddle"
    for rel in module["files"]:
        path = checkout / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// " + rel, encoding="utf-8")

    out = tmp_path / "lib"
    assert extract_modules.main(["--module", "chat", "--output", str(out), "--platforms-root", str(root)]) == 0
    manifest = json.loads((out / "backend" / "chat" / "module.json").read_text(encoding="utf-8"))
    assert manifest["source"] == "family-huddle"
    assert all(f["present"] for f in manifest["files"])


def test_extract_modules_reports_failure_when_nothing_copied(tmp_path) -> None:
    rc = extract_modules.main(
        ["--module", "chat", "--output", str(tmp_path / "lib"), "--platforms-root", str(tmp_path / "empty")]
    )
    assert rc == 1


def test_platform_path_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PLATFORM_PATH_FAMILY_HUDDLE", str(tmp_path / "custom"))
    paths = Config.platform_paths(str(tmp_path))
    assert paths["family-huddle"] == str(tmp_path / "custom")
    assert paths["slabtrack"] == str(tmp_path / "slabtrack")


def test_generate_test_data_cli(tmp_path, capsys) -> None:
    assert generate_test_data.main(["--industry", "pizzeria-downtown", "--show-key"]) == 0
    assert capsys.readouterr().out.strip() == "pizza"

    assert generate_test_data.main(["--industry", "yoga"]) == 0
    assert "TEST_DATA = " in capsys.readouterr().out

    target = tmp_path / "out" / "test_data.py"
    assert generate_test_data.main(["--industry", "yoga", "--output", str(target)]) == 0
    assert "def create_booking" in target.read_text(encoding="utf-8")


def test_platform_env_name() -> None:
    assert Config.platform_env_name("family-huddle") == "PLATFORM_PATH_FAMILY_HUDDLE"
    assert Config.platform_env_name("ubg") == "PLATFORM_PATH_UBG"
