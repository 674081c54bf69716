from __future__ import annotations

import json

import pytest

from engine.module_extractor import MANIFEST_NAME, ModuleExtractor

MODULES = {
    "auth": {
        "type": "backend",
        "bestSource": "alpha",
        "files": ["backend/routes/auth.routes.js", "backend/models/User.js"],
        "outputFiles": ["routes/auth.js", "models/User.js"],
    },
    "login-form": {
        "type": "frontend",
        "bestSource": "beta",
        "files": ["src/LoginForm.jsx"],
        "outputFiles": ["components/LoginForm.jsx"],
    },
    "orphan": {
        "type": "backend",
        "bestSource": "nowhere",
        "files": ["a.js"],
        "outputFiles": ["a.js"],
    },
}
BUNDLES = {"core": ["auth", "login-form"], "broken": ["orphan", "auth"]}


@pytest.fixture
def platforms(tmp_path):
    alpha = tmp_path / "alpha"
    (alpha / "backend" / "routes").mkdir(parents=True)
    (alpha / "backend" / "routes" / "auth.routes.js").write_text("module.exports = {};\n", encoding="utf-8")
    beta = tmp_path / "beta"
    (beta / "src").mkdir(parents=True)
    (beta / "src" / "LoginForm.jsx").write_text("export default 1;\n", encoding="utf-8")
    return {"alpha": str(alpha), "beta": str(beta)}


@pytest.fixture
def extractor(tmp_path, platforms):
    return ModuleExtractor(
        platform_paths=platforms,
        output_path=str(tmp_path / "library"),
        modules=MODULES,
        bundles=BUNDLES,
        clock=lambda: "2026-01-01T00:00:00Z",
    )


def test_extract_module_copies_files_and_writes_manifest(extractor, tmp_path) -> None:
    result = extractor.extract_module("login-form")
    assert result.ok
    assert (result.copied, result.total) == (1, 1)

    out = tmp_path / "library" / "frontend" / "login-form"
    assert (out / "components" / "LoginForm.jsx").read_text(encoding="utf-8") == "export default 1;\n"
    manifest = json.loads((out / MANIFEST_NAME).read_text(encoding="utf-8"))
    assert manifest["name"] == "login-form"
    assert manifest["type"] == "frontend"
    assert manifest["source"] == "beta"
    assert manifest["extractedAt"] == "2026-01-01T00:00:00Z"
    assert manifest["files"] == [
        {"path": "components/LoginForm.jsx", "source": "src/LoginForm.jsx", "present": True}
    ]


def test_missing_source_file_is_skipped_and_flagged(extractor, tmp_path) -> None:
    result = extractor.extract_module("auth")
    assert result.ok
    assert (result.copied, result.total) == (1, 2)
    assert result.missing == ["backend/models/User.js"]

    out = tmp_path / "library" / "backend" / "auth"
    assert (out / "routes" / "auth.js").exists()
    assert not (out / "models" / "User.js").exists()
    manifest = json.loads((out / MANIFEST_NAME).read_text(encoding="utf-8"))
    assert [f["present"] for f in manifest["files"]] == [True, False]
    assert (manifest["copied"], manifest["total"]) == (1, 2)


def test_unknown_module_and_platform(extractor, tmp_path) -> None:
    unknown = extractor.extract_module("nope")
    assert not unknown.ok
    assert unknown.error == "unknown_module"

    orphan = extractor.extract_module("orphan")
    assert not orphan.ok
    assert orphan.error == "unknown_platform"
    assert not (tmp_path / "library" / "backend" / "orphan").exists()


def test_bundle_extraction_is_sequential_without_rollback(extractor, tmp_path) -> None:
    results = extractor.extract_bundle("broken")
    assert [r.name for r in results] == ["orphan", "auth"]
    assert [r.ok for r in results] == [False, True]
    assert (tmp_path / "library" / "backend" / "auth" / MANIFEST_NAME).exists()

    assert extractor.extract_bundle("missing") == []


def test_extract_all_visits_every_module(extractor) -> None:
    assert [r.name for r in extractor.extract_all()] == ["auth", "login-form", "orphan"]


def test_list_modules_groups_by_type(extractor) -> None:
    listing = extractor.list_modules()
    backend = listing.index("BACKEND:")
    frontend = listing.index("FRONTEND:")
    bundles = listing.index("BUNDLES:")
    assert backend < listing.index("auth (from alpha)") < frontend
    assert frontend < listing.index("login-form (from beta)") < bundles
    assert "core: auth, login-form" in listing


def test_mismatched_file_lists_are_rejected(tmp_path, platforms) -> None:
    modules = {
        "uneven": {
            "type": "backend",
            "bestSource": "alpha",
            "files": ["backend/routes/auth.routes.js", "backend/routes/auth.routes.js"],
            "outputFiles": ["routes/auth.js"],
        }
    }
    extractor = ModuleExtractor(platforms, str(tmp_path / "library"), modules=modules, bundles={})
    result = extractor.extract_module("uneven")
    assert not result.ok
    assert result.error == "length_mismatch"
    assert result.copied == 0
    assert not (tmp_path / "library" / "backend" / "uneven").exists()
