# -*- coding: utf-8 -*-
"""
preview_store.py

Purpose:
- Keep rendered site previews in memory, addressable by a random id
- Evict previews older than the TTL with a periodic background sweep

Notes:
- Entries are removed somewhere in [TTL, TTL + sweep interval) after creation;
  reads do not check expiry themselves.
- Storage is process-local. Previews do not survive a restart and are not shared
  between worker processes, so run a single process behind the preview URL.
"""

from __future__ import annotations

import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from assembler.utils import get_logger

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 30 * 60
DEFAULT_SWEEP_INTERVAL_SECONDS = 5 * 60
ID_BYTES = 8


def _utc_iso(ts: float) -> str:
    """Epoch seconds -> UTC ISO string."""
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(ts))


@dataclass
class Preview:
    """A rendered preview (html never changes after creation)."""

    id: str
    html: str
    created_at: float
    config: Dict[str, Any] = field(default_factory=dict)


class PreviewStore:
    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        sweep_interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self.clock = clock
        self._previews: Dict[str, Preview] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._previews)

    def _new_id(self) -> str:
        while True:
            preview_id = secrets.token_hex(ID_BYTES)
            if preview_id not in self._previews:
                return preview_id

    def create(self, html: str, config: Optional[Dict[str, Any]] = None) -> Preview:
        with self._lock:
            preview = Preview(
                id=self._new_id(),
                html=html,
                created_at=self.clock(),
                config=dict(config or {}),
            )
            self._previews[preview.id] = preview
        logger.info(f"Preview created: {preview.id} ({len(html)} bytes)")
        return preview

    def get(self, preview_id: str) -> Optional[Preview]:
        with self._lock:
            return self._previews.get(preview_id)

    def delete(self, preview_id: str) -> bool:
        """Remove a preview; True only if it existed."""
        with self._lock:
            removed = self._previews.pop(preview_id, None) is not None
        if removed:
            logger.info(f"Preview deleted: {preview_id}")
        return removed

    def expires_at(self, preview: Preview) -> float:
        return preview.created_at + self.ttl_seconds

    def status(self, preview_id: str) -> Dict[str, Any]:
        preview = self.get(preview_id)
        if preview is None:
            return {"exists": False}
        return {
            "exists": True,
            "createdAt": _utc_iso(preview.created_at),
            "expiresAt": _utc_iso(self.expires_at(preview)),
            "businessName": preview.config.get("businessName"),
        }

    def sweep(self) -> int:
        """Drop every preview older than the TTL; returns how many were removed."""
        now = self.clock()
        with self._lock:
            expired: List[str] = [
                pid
                for pid, preview in self._previews.items()
                if now - preview.created_at > self.ttl_seconds
            ]
            for pid in expired:
                del self._previews[pid]
        if expired:
            logger.info(f"Sweep removed {len(expired)} expired preview(s)")
        return len(expired)

    # Background sweeper

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run_loop, name="preview-sweeper", daemon=True
        )
        self._thread.start()
        logger.info(
            f"Preview sweeper started (ttl={self.ttl_seconds}s, interval={self.sweep_interval_seconds}s)"
        )

    def stop(self) -> None:
        self._stop.set()
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join(timeout=5)
        self._thread = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    def _run_loop(self) -> None:
        while not self._stop.wait(self.sweep_interval_seconds):
            try:
                self.sweep()
            except Exception as e:
                logger.exception(f"Preview sweep failed: {e}")
