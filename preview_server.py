# -*- coding: utf-8 -*-
"""
preview_server.py

Purpose:
- Render a site preview from a posted configuration and keep it for a limited time
- Serve the preview HTML at a shareable URL (opened directly in a browser)
- Expired/unknown previews get a friendly "Preview Expired" page instead of a JSON error

Run:
  python preview_server.py
Endpoints:
  POST   /api/preview/generate
  GET    /api/preview/view/<id>
  GET    /api/preview/status/<id>
  DELETE /api/preview/<id>
  GET    /api/health-check/preview
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, Response, current_app, jsonify, request
from markupsafe import escape

from assembler.config import Config
from assembler.preview_store import PreviewStore
from assembler.utils import AssemblerError, get_logger, handle_errors, setup_logging
from engine.preview_generator import DEFAULT_BUSINESS_NAME, generate_preview_html

logger = get_logger(__name__)

VIEW_PATH = "/api/preview/view/"

EXPIRED_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1"/>
  <title>Preview Expired</title>
  <style>
    body {{ font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial; background: #0f172a; color: #e2e8f0;
           display: flex; align-items: center; justify-content: center; min-height: 100vh; margin: 0; }}
    .box {{ text-align: center; padding: 40px; }}
    h1 {{ font-size: 28px; margin-bottom: 12px; }}
    p {{ color: #94a3b8; }}
    code {{ background: #1e293b; padding: 2px 6px; border-radius: 6px; }}
  </style>
</head>
<body>
  <div class="box">
    <h1>⏰ Preview Expired</h1>
    <p>Preview <code>{preview_id}</code> is no longer available.</p>
    <p>Previews are kept for {ttl_minutes} minutes. Generate a new one to continue.</p>
  </div>
</body>
</html>
"""


def _store() -> PreviewStore:
    return current_app.extensions["preview_store"]


def preview_url(preview_id: str) -> str:
    return f"{Config.PREVIEW_BASE_URL}{VIEW_PATH}{preview_id}"


@handle_errors(stage="preview_render")
def render_preview(config: Dict[str, Any]) -> str:
    return generate_preview_html(config)


def create_app(store: Optional[PreviewStore] = None, start_sweeper: bool = True) -> Flask:
    app = Flask(__name__)

    if store is None:
        store = PreviewStore(
            ttl_seconds=Config.PREVIEW_TTL_SECONDS,
            sweep_interval_seconds=Config.PREVIEW_SWEEP_INTERVAL_SECONDS,
        )
    app.extensions["preview_store"] = store
    if start_sweeper:
        store.start()

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "service": "preview", "previews": len(_store())})

    @app.post("/api/preview/generate")
    def generate_preview():
        """Render the posted SiteConfig and cache it under a new id."""
        payload = request.get_json(silent=True)
        config = dict(payload) if isinstance(payload, dict) else {}
        if not isinstance(config.get("businessName"), str) or not config["businessName"].strip():
            config["businessName"] = DEFAULT_BUSINESS_NAME

        try:
            html = render_preview(config)
        except AssemblerError as e:
            return jsonify({"success": False, "error": e.message}), 500

        preview = _store().create(html, config)
        return jsonify(
            {
                "success": True,
                "previewId": preview.id,
                "previewUrl": preview_url(preview.id),
            }
        )

    @app.get("/api/preview/view/<preview_id>")
    def view_preview(preview_id: str):
        preview = _store().get(preview_id)
        if preview is None:
            body = EXPIRED_PAGE.format(
                preview_id=escape(preview_id),
                ttl_minutes=_store().ttl_seconds // 60,
            )
            return Response(body, status=404, mimetype="text/html")
        return Response(preview.html, mimetype="text/html")

    @app.get("/api/preview/status/<preview_id>")
    def preview_status(preview_id: str):
        return jsonify(_store().status(preview_id))

    @app.delete("/api/preview/<preview_id>")
    def delete_preview(preview_id: str):
        return jsonify({"success": _store().delete(preview_id)})

    @app.get("/api/health-check/preview")
    def preview_health_check():
        """Render a sample preview and round-trip it through the store."""
        checks = []
        sample = {
            "businessName": "Health Check Test",
            "industry": "restaurant",
            "pages": ["Home", "Menu", "Contact"],
        }
        try:
            html = render_preview(sample)
            details = {
                "htmlLength": len(html),
                "hasDoctype": html.startswith("<!DOCTYPE html>"),
                "hasBusinessName": "Health Check Test" in html,
                "hasPreviewBanner": "preview-banner" in html,
                "hasIndustryIcon": "🍽️" in html,
            }
            checks.append(
                {
                    "name": "Preview Generator",
                    "status": "healthy" if all(details.values()) else "warning",
                    "details": details,
                }
            )
        except AssemblerError as e:
            html = None
            checks.append({"name": "Preview Generator", "status": "error", "error": e.message})

        if html is not None:
            store = _store()
            preview = store.create(html, sample)
            round_trip = store.get(preview.id)
            removed = store.delete(preview.id)
            ok = round_trip is not None and round_trip.html == html and removed
            checks.append(
                {
                    "name": "Preview Store",
                    "status": "healthy" if ok else "error",
                    "details": {"sweeperRunning": store.running, "previews": len(store)},
                }
            )

        statuses = {c["status"] for c in checks}
        overall = "error" if "error" in statuses else ("warning" if "warning" in statuses else "healthy")
        return jsonify({"status": overall, "checks": checks})

    return app


if __name__ == "__main__":
    setup_logging()
    Config.validate()
    # Single process only: previews live in this process's memory
    create_app().run(host=Config.PREVIEW_HOST, port=Config.PREVIEW_PORT, debug=False)
