#!/usr/bin/env python3
"""
module_extractor.py - Copy reusable modules from platform checkouts into the module library

For each module in assembler.module_catalog:
- files[i] (relative to the platform checkout) is copied to
  <output>/<type>/<module>/<outputFiles[i]>
- a module.json manifest is written next to the copied files

Missing source files are logged and skipped; the rest of the module still extracts.
Each manifest entry records whether its file is actually present.
Bundles extract their modules one after another with no rollback.
"""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional

from assembler.module_catalog import BUNDLES, MODULES
from assembler.utils import get_logger

logger = get_logger(__name__)

MANIFEST_NAME = "module.json"


@dataclass
class ExtractionResult:
    name: str
    ok: bool
    copied: int = 0
    total: int = 0
    output_dir: Optional[Path] = None
    missing: List[str] = field(default_factory=list)
    error: str = ""


def _utc_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ModuleExtractor:
    def __init__(
        self,
        platform_paths: Dict[str, str],
        output_path: str,
        modules: Optional[Dict[str, dict]] = None,
        bundles: Optional[Dict[str, List[str]]] = None,
        clock: Callable[[], str] = _utc_iso,
    ):
        self.platform_paths = dict(platform_paths)
        self.output_path = Path(output_path)
        self.modules = MODULES if modules is None else modules
        self.bundles = BUNDLES if bundles is None else bundles
        self.clock = clock

    def _copy_file(self, src: Path, dest: Path) -> bool:
        if not src.is_file():
            logger.warning(f"  Not found: {src}")
            return False
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dest)
        except OSError as e:
            logger.warning(f"  Copy failed: {src} -> {dest}: {e}")
            return False
        logger.info(f"  Copied: {src.name}")
        return True

    def extract_module(self, name: str) -> ExtractionResult:
        module = self.modules.get(name)
        if module is None:
            logger.error(f"Unknown module: {name}")
            return ExtractionResult(name=name, ok=False, error="unknown_module")

        source = module["bestSource"]
        source_root = self.platform_paths.get(source)
        if not source_root:
            logger.error(f"Unknown platform: {source} (module {name})")
            return ExtractionResult(name=name, ok=False, error="unknown_platform")

        files = module["files"]
        output_files = module["outputFiles"]
        if len(files) != len(output_files):
            logger.error(
                f"Module {name} lists {len(files)} files but {len(output_files)} output files"
            )
            return ExtractionResult(name=name, ok=False, total=len(files), error="length_mismatch")

        logger.info(f"Extracting: {name} (source: {source}, type: {module['type']})")

        output_dir = self.output_path / module["type"] / name
        entries = []
        missing = []
        for src_rel, dest_rel in zip(files, output_files):
            present = self._copy_file(Path(source_root) / src_rel, output_dir / dest_rel)
            entries.append({"path": dest_rel, "source": src_rel, "present": present})
            if not present:
                missing.append(src_rel)

        copied = sum(1 for entry in entries if entry["present"])
        logger.info(f"  Extracted {copied}/{len(files)} files")

        manifest = {
            "name": name,
            "type": module["type"],
            "source": source,
            "extractedAt": self.clock(),
            "copied": copied,
            "total": len(files),
            "files": entries,
        }
        output_dir.mkdir(parents=True, exist_ok=True)
        (output_dir / MANIFEST_NAME).write_text(
            json.dumps(manifest, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
        )

        return ExtractionResult(
            name=name,
            ok=copied > 0,
            copied=copied,
            total=len(files),
            output_dir=output_dir,
            missing=missing,
        )

    def extract_bundle(self, bundle_name: str) -> List[ExtractionResult]:
        modules = self.bundles.get(bundle_name)
        if modules is None:
            logger.error(f"Unknown bundle: {bundle_name}")
            return []
        logger.info(f"Extracting bundle: {bundle_name} ({', '.join(modules)})")
        return [self.extract_module(name) for name in modules]

    def extract_all(self) -> List[ExtractionResult]:
        logger.info("Extracting ALL modules")
        return [self.extract_module(name) for name in self.modules]

    def list_modules(self) -> str:
        """Human-readable listing grouped by module type, then bundles."""
        lines = ["Available Modules:", ""]
        for module_type in ("backend", "frontend"):
            lines.append(f"{module_type.upper()}:")
            for name, module in self.modules.items():
                if module["type"] == module_type:
                    lines.append(f"  - {name} (from {module['bestSource']})")
            lines.append("")
        lines.append("BUNDLES:")
        for name, members in self.bundles.items():
            lines.append(f"  - {name}: {', '.join(members)}")
        return "\n".join(lines)
