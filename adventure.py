import sys
import logging
import traceback
from typing import Callable

from adventure_config import Settings, load_settings
from adventure_log import setup_logging
from game_api import GameApiClient, GameApiError, decode_state
from game_commands import Command, CommandKind, parse_command
from game_render import render_error, render_help, render_inventory, render_result, render_screen
from game_session import Session

logger = logging.getLogger(__name__)

PROMPT = "> "


class Adventure:
    """Runs the read / dispatch / render loop against one game API client."""
    def __init__(
        self,
        api: GameApiClient,
        session: Session | None = None,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.api = api
        self.session = session or Session()
        self.read_line = read_line
        self.write = write
        self.running = False

    def start(self, screen_id: str) -> None:
        """Loads the opening screen and shows it. Raises GameApiError on failure."""
        screen = self.api.get_screen(screen_id)
        self.session.enter_screen(screen)
        self.write(render_screen(screen))

    def handle(self, command: Command) -> None:
        if not command.is_local:
            self.play(command.text)
            return

        kind = command.kind
        if kind is CommandKind.EXIT:
            self.running = False
        elif kind is CommandKind.INVENTORY:
            self.write(render_inventory(self.session.state.inventory))
        elif kind is CommandKind.SCREEN_ID:
            self.write(self.session.current_screen_id)
        elif kind is CommandKind.LOOK:
            self.write(render_screen(self.session.current_screen))
        elif kind is CommandKind.HELP:
            self.write(render_help())

    def play(self, text: str) -> None:
        """Sends free text to the server and shows what came back."""
        if not text:
            return
        try:
            result = self.api.submit_command(self.session.current_screen_id, text, self.session.state)
            new_state = decode_state(result)
        except GameApiError as e:
            logger.info(f"Command {text!r} failed: {e}")
            logger.debug("Traceback:\n%s", traceback.format_exc())
            self.write(render_error(e))
            return

        self.session.apply_result(result, new_state)
        output = render_result(result)
        if output:
            self.write(output)

    def run(self) -> None:
        self.running = True
        while self.running:
            self.write("")
            try:
                line = self.read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, exiting")
                self.running = False
                break
            try:
                self.handle(parse_command(line))
            except KeyboardInterrupt:
                logger.debug("Interrupted, exiting")
                self.running = False


def main(settings: Settings | None = None) -> int:
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.debug(f"Using API at {settings.api_base}")

    with GameApiClient(settings.api_base, timeout=settings.timeout) as api:
        game = Adventure(api)
        try:
            game.start(settings.start_screen_id)
        except GameApiError as e:
            logger.info(f"Could not load starting screen {settings.start_screen_id}: {e}")
            print(render_error(e))
            return 1
        game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
