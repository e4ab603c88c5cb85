"""Terminal chat sink for the local console room."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from haxfootball.core.models.player import Player


class RichChat:
    """Prints replies and announcements to a terminal with Rich styling."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def reply(self, player: Player, message: str, auto_size: bool = True) -> None:
        for line in message.splitlines() or [""]:
            text = Text()
            text.append(f"-> {player.short_name}", style="#666666")
            text.append(" │ ", style="#999999")
            text.append(line, style="bold" if auto_size else "")
            self.console.print(text)

    def announce(self, message: str) -> None:
        for line in message.splitlines() or [""]:
            text = Text()
            text.append("ROOM", style="bold yellow")
            text.append(" │ ", style="#999999")
            text.append(line, style=_announcement_style(line))
            self.console.print(text)


def _announcement_style(line: str) -> str:
    if "touchdown" in line.lower():
        return "bold green"
    if line.startswith(("RED", "BLUE")) or " - " in line:
        return "bold"
    return ""
