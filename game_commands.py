"""Maps raw player input to the client's fixed set of commands."""
from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    LOOK = "look"
    INVENTORY = "inventory"
    SCREEN_ID = "screen-id"
    HELP = "help"
    EXIT = "exit"
    PLAY = "play"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    text: str = ""

    @property
    def is_local(self) -> bool:
        return self.kind is not CommandKind.PLAY


# Primary name first, then aliases. Order is the order shown in help.
COMMAND_TABLE: list[tuple[CommandKind, tuple[str, ...]]] = [
    (CommandKind.INVENTORY, ("/inventory",)),
    (CommandKind.SCREEN_ID, ("/screen-id", "/screen")),
    (CommandKind.LOOK, ("/look", "/whereami", "/where", "/repeat", "/again")),
    (CommandKind.HELP, ("/help", "/?")),
    (CommandKind.EXIT, ("/exit", "/quit")),
]

ALIASES: dict[str, CommandKind] = {
    name: kind for kind, names in COMMAND_TABLE for name in names
}


def parse_command(line: str) -> Command:
    """Parses one input line. Unknown input is always play text for the server."""
    text = line.strip()
    kind = ALIASES.get(text.lower())
    if kind is None:
        return Command(CommandKind.PLAY, text)
    return Command(kind, text)
