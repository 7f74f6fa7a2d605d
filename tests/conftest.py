import json

import httpx
import pytest

from game_api import GameApiClient
from game_state import ClientGameState

API_BASE = "http://game.test/api"


class FakeGameServer:
    """In-memory stand-in for the game API, served through httpx.MockTransport."""

    def __init__(self):
        self.screens = {
            "start": {"id": "start", "body": ["You are in a dusty hall.", "Exits: north"]},
            "north": {"id": "north", "body": ["A cold library."]},
        }
        self.requests = []
        self.fail_commands = False
        self.command_response = None

    def _command(self, payload):
        state = ClientGameState.from_state_string(payload["state"])
        command = payload["command"].lower()
        if command == "go north" and payload["contextScreenId"] == "start":
            return {
                "success": True,
                "type": "navigation",
                "screen": self.screens["north"],
                "state": state.to_state_string(),
                "itemsAdded": [],
                "itemsRemoved": [],
            }
        if command == "take lamp":
            state.inventory.append("lamp")
            return {
                "success": True,
                "type": "printMessage",
                "printMessage": ["You pick up the lamp."],
                "state": state.to_state_string(),
                "itemsAdded": ["lamp"],
                "itemsRemoved": [],
            }
        return {"success": False, "message": "You can't do that here."}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.method == "GET" and path.startswith("/api/screen/"):
            screen = self.screens.get(path.rsplit("/", 1)[-1])
            if screen is None:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(200, json=screen)
        if request.method == "POST" and path == "/api/command":
            if self.fail_commands:
                raise httpx.ConnectError("connection refused", request=request)
            if self.command_response is not None:
                return self.command_response
            return httpx.Response(200, json=self._command(json.loads(request.content)))
        return httpx.Response(404)


@pytest.fixture
def server():
    return FakeGameServer()


@pytest.fixture
def api(server):
    client = GameApiClient(API_BASE, transport=httpx.MockTransport(server))
    yield client
    client.close()
