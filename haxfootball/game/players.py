"""Connected players and the per-snap player snapshot."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from haxfootball.core.enums import TeamId
from haxfootball.core.errors import CommandError
from haxfootball.core.models.player import Player

logger = logging.getLogger(__name__)


class PlayerRegistry:
    """
    Players currently in the room, keyed by room id.

    Join/leave handling lives outside the rules engine; it calls
    ``add`` and ``remove``. Everything else only reads.
    """

    def __init__(self) -> None:
        self._players: dict[int, Player] = {}

    def add(self, player: Player) -> Player:
        self._players[player.id] = player
        return player

    def remove(self, player_id: int) -> Optional[Player]:
        return self._players.pop(player_id, None)

    def get(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self):
        return iter(list(self._players.values()))

    def by_team(self, team: TeamId) -> list[Player]:
        return [p for p in self._players.values() if p.team == team]

    def find_by_name(self, query: str) -> list[Player]:
        """
        Players matching a chat reference.

        Accepts '#<id>', an exact name (case-insensitive), or a name
        prefix. Exact matches win over prefix matches.
        """
        query = query.strip()
        if not query:
            return []

        if query.startswith("#") and query[1:].isdigit():
            player = self.get(int(query[1:]))
            return [player] if player else []

        lowered = query.lower()
        exact = [p for p in self._players.values() if p.name.lower() == lowered]
        if exact:
            return exact
        return [p for p in self._players.values() if p.name.lower().startswith(lowered)]

    def get_by_name_always(self, query: str) -> Player:
        """
        Resolve a chat reference to exactly one player.

        Raises:
            CommandError: If no player or more than one player matches
        """
        matches = self.find_by_name(query)
        if not matches:
            raise CommandError(f"Player {query} does not exist")
        if len(matches) > 1:
            names = ", ".join(p.short_name for p in matches[:5])
            raise CommandError(f"Multiple players match {query}: {names}. Use #id instead")
        return matches[0]

    def swap_red_blue(self) -> list[Player]:
        """Move every red player to blue and vice versa. Returns the moved players."""
        moved = []
        for player in self._players.values():
            if player.team.is_playable:
                player.team = player.team.opponent
                moved.append(player)
        logger.info(f"Swapped {len(moved)} players between red and blue")
        return moved


@dataclass
class PlayerRecorder:
    """
    Snapshot of who lines up on each side for the next snap.

    Rebuilt wholesale from the registry on possession changes and when
    an admin re-sets players, never patched incrementally.
    """

    offense: list[Player] = field(default_factory=list)
    defense: list[Player] = field(default_factory=list)

    def update_static_player_list(self, registry: PlayerRegistry, offense_team: TeamId) -> None:
        self.offense = registry.by_team(offense_team)
        self.defense = registry.by_team(offense_team.opponent)

    def is_on_offense(self, player: Player) -> bool:
        return any(p.id == player.id for p in self.offense)

    def clear(self) -> None:
        self.offense = []
        self.defense = []
