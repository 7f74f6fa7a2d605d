import logging
import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from game_state import ClientGameState, StateDecodeError

logger = logging.getLogger(__name__)

# --- Errors ---

class GameApiError(Exception):
    """A request to the game API failed."""


class NetworkError(GameApiError):
    """The request didn't reach the server or came back with a non-success status."""


class ParseError(GameApiError):
    """The server answered with a body we couldn't make sense of."""

# --- Wire Models ---

class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GameScreen(_WireModel):
    id: str
    body: list[str]


class SubmitCommandRequest(_WireModel):
    context_screen_id: str = Field(..., alias="contextScreenId", description="The screen the player is currently on")
    command: str = Field(..., description="The command being submitted")
    state: str = Field(..., description="Compressed client game state")


class PrintMessageResult(_WireModel):
    """The command printed a message without leaving the screen."""
    success: bool
    action_type: str = Field(..., alias="type")
    print_message: list[str] = Field(..., alias="printMessage")
    state: str
    items_added: list[str] = Field(..., alias="itemsAdded")
    items_removed: list[str] = Field(..., alias="itemsRemoved")


class NavigationResult(_WireModel):
    """The command moved the player to another screen."""
    success: bool
    action_type: str = Field(..., alias="type")
    screen: GameScreen
    state: str
    items_added: list[str] = Field(..., alias="itemsAdded")
    items_removed: list[str] = Field(..., alias="itemsRemoved")


class CommandFailure(_WireModel):
    """The command didn't match anything on the current screen."""
    success: bool
    message: str


CommandResult = PrintMessageResult | NavigationResult | CommandFailure

# Order matters: the first shape that validates wins
_RESULT_TYPES = (PrintMessageResult, NavigationResult, CommandFailure)


def parse_command_result(data: object) -> CommandResult:
    """Picks the response shape that matches a decoded /command payload."""
    errors = []
    for result_type in _RESULT_TYPES:
        try:
            return result_type.model_validate(data)
        except ValidationError as e:
            errors.append(f"{result_type.__name__}: {e.error_count()} error(s)")
    raise ParseError(f"Unexpected command response ({'; '.join(errors)})")


def decode_state(result: CommandResult) -> ClientGameState | None:
    """Returns the updated client state carried by a successful result."""
    if isinstance(result, CommandFailure):
        return None
    try:
        return ClientGameState.from_state_string(result.state)
    except StateDecodeError as e:
        raise ParseError(str(e)) from e

# --- Client ---

class GameApiClient:
    """Thin synchronous wrapper around the text adventure HTTP API."""
    def __init__(self, api_base: str, timeout: float = 10.0, transport: httpx.BaseTransport | None = None):
        self.api_base = api_base.rstrip("/")
        self.client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "GameApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> object:
        url = f"{self.api_base}{path}"
        logger.debug(f"{method} {url} {kwargs.get('json', '')}")
        try:
            response = self.client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"Server returned {e.response.status_code} for {method} {url}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Response from {url} is not valid JSON") from e
        logger.debug(f"Response: {data}")
        return data

    def get_screen(self, screen_id: str) -> GameScreen:
        """Fetches a screen by id."""
        data = self._request("GET", f"/screen/{screen_id}")
        try:
            return GameScreen.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Unexpected screen payload for {screen_id}") from e

    def submit_command(self, screen_id: str, command: str, state: ClientGameState) -> CommandResult:
        """Submits a player command in the context of the given screen."""
        request = SubmitCommandRequest(
            context_screen_id=screen_id,
            command=command,
            state=state.to_state_string(),
        )
        data = self._request("POST", "/command", json=request.model_dump(by_alias=True))
        return parse_command_result(data)
