from typing import Any

from fastapi.testclient import TestClient

from steam_gateway.api.main import create_fastapi_app
from tests.fakes import PLAYER_ID


class _DummyProfileApp:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.drained = False

    async def aggregate_profile(self, raw_id: str) -> dict[str, Any]:
        self.calls.append(("profile", raw_id))
        if raw_id == "sampleName":
            return {"error": "An invalid id value was provided to the server."}
        return {"player": {"steamid": raw_id}, "friends": [], "games": []}

    async def resolve_vanity(self, raw_id: str) -> dict[str, Any]:
        self.calls.append(("vanity", raw_id))
        if raw_id.isdigit():
            return {}
        return {"steamId": PLAYER_ID}

    async def drain(self) -> None:
        self.drained = True


def _build_test_app(settings, profile_app=None):
    profile_app = profile_app or _DummyProfileApp()
    return create_fastapi_app(settings, profile_app=profile_app), profile_app


def test_profile_route_returns_aggregate(settings):
    app, profile_app = _build_test_app(settings)
    with TestClient(app) as client:
        r = client.get(f"/steam/user/{PLAYER_ID}/profile")
        assert r.status_code == 200
        assert r.json() == {"player": {"steamid": PLAYER_ID}, "friends": [], "games": []}
    assert profile_app.calls == [("profile", PLAYER_ID)]
    assert profile_app.drained


def test_errors_are_reported_with_status_200(settings):
    app, _ = _build_test_app(settings)
    with TestClient(app) as client:
        r = client.get("/steam/user/sampleName/profile")
        assert r.status_code == 200
        assert "error" in r.json()


def test_vanity_route(settings):
    app, _ = _build_test_app(settings)
    with TestClient(app) as client:
        assert client.get("/steam/user/gaben/vanityurl").json() == {"steamId": PLAYER_ID}
        numeric = client.get(f"/steam/user/{PLAYER_ID}/vanityurl")
        assert numeric.status_code == 200
        assert numeric.json() == {}


def test_cors_header_present(settings):
    app, _ = _build_test_app(settings)
    with TestClient(app) as client:
        r = client.get("/steam/user/gaben/vanityurl", headers={"Origin": "http://example.com"})
        assert r.headers.get("access-control-allow-origin") == "*"


def test_openapi_lists_steam_routes(settings):
    app, _ = _build_test_app(settings)
    with TestClient(app) as client:
        schema = client.get("/openapi.json").json()
        paths = schema.get("paths", {})
        assert "/steam/user/{userid}/profile" in paths
        assert "/steam/user/{userid}/vanityurl" in paths
        tags_in_paths = set()
        for _, path_item in paths.items():
            for method_spec in path_item.values():
                tags_in_paths.update(method_spec.get("tags", []))
        assert "steam" in tags_in_paths


def test_static_front_end_served_when_present(settings, tmp_path):
    static = tmp_path / "public"
    static.mkdir()
    (static / "index.html").write_text("<html>gateway</html>", encoding="utf-8")
    settings.static_dir = str(static)

    app, _ = _build_test_app(settings)
    with TestClient(app) as client:
        assert "gateway" in client.get("/").text
        # API routes stay reachable behind the root mount
        assert client.get("/health").status_code == 200
        assert client.get("/steam/user/gaben/vanityurl").json() == {"steamId": PLAYER_ID}


def test_no_static_mount_without_directory(settings):
    app, _ = _build_test_app(settings)
    with TestClient(app) as client:
        assert client.get("/").status_code == 404
