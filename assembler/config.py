import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

# Load environment variables from the project's .env file
PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(PROJECT_ROOT / ".env")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"WARNING: {name}={raw!r} is not an integer, using {default}")
        return default


class Config:
    # Preview cache lifetime (seconds)
    PREVIEW_TTL_SECONDS = _int_env("PREVIEW_TTL_SECONDS", 30 * 60)
    # How often the sweeper scans the cache (seconds)
    PREVIEW_SWEEP_INTERVAL_SECONDS = _int_env("PREVIEW_SWEEP_INTERVAL_SECONDS", 5 * 60)

    # Preview server bind address
    PREVIEW_HOST = os.getenv("PREVIEW_HOST", "127.0.0.1")
    PREVIEW_PORT = _int_env("PREVIEW_PORT", 8088)
    # Prefix for previewUrl (e.g. https://assembler.example.com); empty keeps it relative
    PREVIEW_BASE_URL = os.getenv("PREVIEW_BASE_URL", "").rstrip("/")

    # Log file path
    LOG_FILE = os.getenv("LOG_FILE") or str(PROJECT_ROOT / "logs" / "assembler.log")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Module extractor: where the module library is written
    MODULE_LIBRARY_PATH = os.getenv("MODULE_LIBRARY_PATH") or str(
        PROJECT_ROOT / "module-library"
    )
    # Module extractor: parent directory holding every platform checkout
    PLATFORMS_ROOT = os.getenv("PLATFORMS_ROOT") or str(PROJECT_ROOT.parent)

    @staticmethod
    def platform_env_name(platform: str) -> str:
        """Environment variable that overrides a single platform checkout path."""
        return "PLATFORM_PATH_" + platform.upper().replace("-", "_")

    @classmethod
    def platform_paths(cls, root: Optional[str] = None) -> Dict[str, str]:
        """
        Build the platform key -> checkout directory table.

        Each platform defaults to <root>/<directory name from the catalog>;
        PLATFORM_PATH_<KEY> wins when it is set.
        """
        from assembler.module_catalog import PLATFORMS

        base = Path(root or cls.PLATFORMS_ROOT)
        paths: Dict[str, str] = {}
        for key, dirname in PLATFORMS.items():
            override = os.getenv(cls.platform_env_name(key))
            paths[key] = override or str(base / dirname)
        return paths

    # Warn about unusable values instead of refusing to start
    @classmethod
    def validate(cls) -> bool:
        problems = []
        if cls.PREVIEW_TTL_SECONDS <= 0:
            problems.append("PREVIEW_TTL_SECONDS must be positive")
        if cls.PREVIEW_SWEEP_INTERVAL_SECONDS <= 0:
            problems.append("PREVIEW_SWEEP_INTERVAL_SECONDS must be positive")
        if not (0 < cls.PREVIEW_PORT < 65536):
            problems.append("PREVIEW_PORT must be a valid TCP port")
        if problems:
            print(f"WARNING: invalid configuration: {'; '.join(problems)}. Check your .env file.")
            return False
        return True
