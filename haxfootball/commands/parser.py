"""Split chat text into a command name and positional tokens."""

from haxfootball.core.errors import NotACommandError


def parse_command(text: str, prefix: str = "!") -> tuple[str, list[str]]:
    """
    Parse '!name arg1 arg2' into ('name', ['arg1', 'arg2']).

    The name is lower-cased; parameters keep their case.

    Raises:
        NotACommandError: If the text lacks the prefix or names nothing
    """
    stripped = text.strip()
    if not prefix or not stripped.startswith(prefix):
        raise NotACommandError()

    tokens = stripped[len(prefix):].split()
    if not tokens:
        raise NotACommandError()

    return tokens[0].lower(), tokens[1:]
