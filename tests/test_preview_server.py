from __future__ import annotations

from engine.preview_generator import generate_preview_html

MINUTE = 60


def _generate(client, config):
    resp = client.post("/api/preview/generate", json=config)
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    return data


def test_generate_then_view_end_to_end(client) -> None:
    config = {
        "businessName": "Test Pizza Co",
        "industry": "pizza",
        "pages": ["Home", "Menu"],
        "colors": {"primary": "#E63946"},
    }
    data = _generate(client, config)
    assert isinstance(data["previewId"], str) and data["previewId"]
    assert data["previewUrl"].endswith(data["previewId"])

    resp = client.get(data["previewUrl"])
    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    html = resp.get_data(as_text=True)
    assert "Test Pizza Co" in html
    assert html.count('class="page-card"') == 2
    assert '<h3 class="page-title">Home</h3>' in html
    assert '<h3 class="page-title">Menu</h3>' in html


def test_view_returns_exactly_the_rendered_html(client) -> None:
    config = {"businessName": "Exact", "industry": "fitness", "pages": ["Home", "Pricing"]}
    data = _generate(client, config)
    html = client.get(f"/api/preview/view/{data['previewId']}").get_data(as_text=True)
    assert html == generate_preview_html(config)


def test_business_name_is_defaulted(client, store) -> None:
    data = _generate(client, {"industry": "cafe"})
    preview = store.get(data["previewId"])
    assert preview.config["businessName"] == "My Business"
    assert "My Business" in preview.html


def test_non_object_body_is_treated_as_empty_config(client) -> None:
    resp = client.post("/api/preview/generate", data="not json", content_type="text/plain")
    assert resp.status_code == 200
    assert resp.get_json()["success"] is True


def test_unknown_preview_renders_expired_page(client) -> None:
    resp = client.get("/api/preview/view/nope123")
    assert resp.status_code == 404
    assert resp.mimetype == "text/html"
    body = resp.get_data(as_text=True)
    assert "Preview Expired" in body
    assert "nope123" in body


def test_status_before_and_after_delete(client) -> None:
    assert client.get("/api/preview/status/abc").get_json() == {"exists": False}

    data = _generate(client, {"businessName": "Status Co"})
    status = client.get(f"/api/preview/status/{data['previewId']}").get_json()
    assert status["exists"] is True
    assert status["businessName"] == "Status Co"
    assert status["createdAt"] < status["expiresAt"]

    assert client.delete(f"/api/preview/{data['previewId']}").get_json() == {"success": True}
    assert client.delete(f"/api/preview/{data['previewId']}").get_json() == {"success": False}
    assert client.get(f"/api/preview/status/{data['previewId']}").get_json() == {"exists": False}
    assert client.get(data["previewUrl"]).status_code == 404


def test_preview_lifetime(client, store, clock) -> None:
    data = _generate(client, {"businessName": "Lifetime"})
    clock.advance(29 * MINUTE)
    store.sweep()
    assert client.get(data["previewUrl"]).status_code == 200
    clock.advance(6 * MINUTE)
    store.sweep()
    assert client.get(data["previewUrl"]).status_code == 404


def test_render_failure_reports_error_and_caches_nothing(client, store, monkeypatch) -> None:
    def boom(config):
        raise RuntimeError("template exploded")

    monkeypatch.setattr("preview_server.generate_preview_html", boom)
    resp = client.post("/api/preview/generate", json={"businessName": "Broken"})
    assert resp.status_code == 500
    data = resp.get_json()
    assert data["success"] is False
    assert "template exploded" in data["error"]
    assert len(store) == 0


def test_preview_url_uses_base_url(client, monkeypatch) -> None:
    monkeypatch.setattr("assembler.config.Config.PREVIEW_BASE_URL", "https://previews.example.com")
    data = _generate(client, {})
    assert data["previewUrl"] == f"https://previews.example.com/api/preview/view/{data['previewId']}"


def test_health_endpoints(client, store) -> None:
    assert client.get("/health").get_json() == {"ok": True, "service": "preview", "previews": 0}

    report = client.get("/api/health-check/preview").get_json()
    assert report["status"] == "healthy"
    assert [c["name"] for c in report["checks"]] == ["Preview Generator", "Preview Store"]
    # the self check cleans up after itself
    assert len(store) == 0
