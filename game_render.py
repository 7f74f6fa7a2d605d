from typing import Iterable

from game_api import CommandFailure, CommandResult, GameScreen, NavigationResult

HELP_TEXT = """\
List of commands:
/inventory
    List your inventory

/screen-id
(alias: /screen)
    Print the current screen's
    id (useful when creating a
    new screen)

/look
(alias: /whereami)
(alias: /where)
(alias: /repeat)
(alias: /again)
    Print the current screen
    again

/help
(alias: /?)
    Print this help message

/exit
(alias: /quit)
    Quit the game"""


def render_screen(screen: GameScreen | None) -> str:
    if screen is None:
        return ""
    return "\n".join(screen.body)


def render_item_changes(items_added: Iterable[str], items_removed: Iterable[str]) -> str:
    """Lists items gained and lost, skipping empty sections."""
    lines: list[str] = []
    added = list(items_added)
    removed = list(items_removed)
    if added:
        lines.append("Items added:")
        lines.extend(f"+ {item}" for item in added)
    if removed:
        lines.append("Items removed:")
        lines.extend(f"- {item}" for item in removed)
    return "\n".join(lines)


def render_result(result: CommandResult) -> str:
    """Formats a /command response for the terminal."""
    if isinstance(result, CommandFailure):
        return result.message

    if isinstance(result, NavigationResult):
        body = render_screen(result.screen)
    else:
        body = "\n".join(result.print_message)

    changes = render_item_changes(result.items_added, result.items_removed)
    return "\n".join(part for part in (body, changes) if part)


def render_inventory(inventory: Iterable[str]) -> str:
    lines = ["Current inventory:"]
    lines.extend(f"  {item}" for item in inventory)
    return "\n".join(lines)


def render_help() -> str:
    return HELP_TEXT


def render_error(error: Exception) -> str:
    return f"Error: {error}"
