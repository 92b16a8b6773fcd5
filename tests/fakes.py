"""Test doubles and Steam payload builders shared by unit and integration tests."""

import asyncio
import json

PLAYER_ID = "76561197960287930"
PROFILE_URL = "https://steamcommunity.com/id/gaben/"


# -------------------- aiohttp doubles -------------------- #

class DummyResponse:
    def __init__(self, status=200, body=""):
        self.status = status
        self._body = body

    async def text(self):
        await asyncio.sleep(0)
        if isinstance(self._body, bytes):
            return self._body.decode("utf-8")
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


def json_response(payload, status=200):
    return DummyResponse(status=status, body=json.dumps(payload))


class DummySession:
    """Answers ``get`` by the first route whose key occurs in the URL.

    A route value is a DummyResponse, an exception to raise, or a callable
    ``(url, params) -> DummyResponse``. Unknown URLs answer 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, params=None, headers=None):
        self.calls.append((url, dict(params or {})))
        for fragment, result in self.routes.items():
            if fragment in url:
                if isinstance(result, Exception):
                    raise result
                if callable(result):
                    return result(url, dict(params or {}))
                return result
        return DummyResponse(status=404)

    def calls_to(self, fragment):
        return [c for c in self.calls if fragment in c[0]]


# -------------------- Steam payloads -------------------- #

def player_summary(steam_id, name=None):
    return {
        "steamid": steam_id,
        "personaname": name or f"player-{steam_id[-4:]}",
        "profileurl": f"https://steamcommunity.com/profiles/{steam_id}/",
        "communityvisibilitystate": 3,
        "avatar": f"https://avatars.example/{steam_id}.jpg",
    }


def summaries_route(url, params):
    steam_id = params["steamids"]
    summary = player_summary(steam_id, name="Gabe" if steam_id == PLAYER_ID else None)
    if steam_id == PLAYER_ID:
        summary["profileurl"] = PROFILE_URL
    return json_response({"response": {"players": [summary]}})


def friend_list_payload(count):
    return {
        "friendslist": {
            "friends": [
                {
                    "steamid": str(76561197960265740 + i),
                    "relationship": "friend",
                    "friend_since": 1500000000 + i,
                }
                for i in range(count)
            ]
        }
    }


def player_achievements_payload(count, *, start=1600000000):
    return {
        "playerstats": {
            "steamID": PLAYER_ID,
            "gameName": "Test Game",
            "success": True,
            "achievements": [
                {"apiname": f"ACH_{i}", "achieved": 1, "unlocktime": start + i * 100}
                for i in range(count)
            ],
        }
    }


def schema_payload(count, *, reverse=False):
    records = [
        {
            "name": f"ACH_{i}",
            "displayName": f"Achievement {i}",
            "description": f"Do thing {i}",
            "icon": f"https://cdn.example/{i}.jpg",
            "icongray": f"https://cdn.example/{i}_gray.jpg",
            "hidden": 0,
        }
        for i in range(count)
    ]
    if reverse:
        records.reverse()
    return {"game": {"gameName": "Test Game", "availableGameStats": {"achievements": records}}}


def rg_games(count):
    return [
        {
            "appid": 100 + i,
            "name": f"Game {i}",
            "logo": f"https://cdn.example/apps/{100 + i}/logo.jpg",
            # shuffled play times, unique per game
            "last_played": 1700000000 + ((i * 7) % count) * 1000,
        }
        for i in range(count)
    ]


def games_page(games):
    return f"""
    <html>
    <head>
        <script type="text/javascript">var g_sessionID = "abc";</script>
    </head>
    <body>
        <div id="games_list_rows"></div>
        <script language="javascript">
            var rgGames = {json.dumps(games)};
            var rgChangingGames = [];
        </script>
        <script>window.onload = function() {{}};</script>
    </body>
    </html>
    """


