import logging
from dataclasses import dataclass, field

from game_api import CommandFailure, CommandResult, GameScreen, NavigationResult
from game_state import ClientGameState

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """What the client knows about the game between requests."""
    current_screen: GameScreen | None = None
    state: ClientGameState = field(default_factory=ClientGameState)

    @property
    def current_screen_id(self) -> str:
        return self.current_screen.id if self.current_screen else ""

    def enter_screen(self, screen: GameScreen) -> None:
        logger.debug(f"Entering screen {screen.id}")
        self.current_screen = screen

    def apply_result(self, result: CommandResult, new_state: ClientGameState | None) -> None:
        """Updates the session from a command result and its decoded state."""
        if isinstance(result, CommandFailure):
            return
        if new_state is not None:
            self.state = new_state
        if isinstance(result, NavigationResult):
            self.enter_screen(result.screen)
