"""In-memory player statistics."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from haxfootball.core.enums import PlayType
from haxfootball.core.models.play import PlayResult
from haxfootball.core.models.player import Player

PlayerLookup = Callable[[int], Optional[Player]]


@dataclass
class PlayerStats:
    """Accumulated statistics for one player."""

    stats_key: str
    player_name: str

    # Passing
    pass_attempts: int = 0
    pass_completions: int = 0
    pass_yards: int = 0
    pass_tds: int = 0
    interceptions_thrown: int = 0
    sacks_taken: int = 0

    # Rushing
    rush_attempts: int = 0
    rush_yards: int = 0
    rush_tds: int = 0
    fumbles_lost: int = 0

    # Receiving
    targets: int = 0
    receptions: int = 0
    receiving_yards: int = 0
    receiving_tds: int = 0

    # Defense
    tackles: int = 0
    sacks: int = 0
    interceptions: int = 0

    # Special teams
    kicks: int = 0
    return_yards: int = 0

    @property
    def total_tds(self) -> int:
        return self.pass_tds + self.rush_tds + self.receiving_tds

    @property
    def completion_pct(self) -> float:
        if self.pass_attempts == 0:
            return 0.0
        return (self.pass_completions / self.pass_attempts) * 100

    @property
    def yards_per_carry(self) -> float:
        if self.rush_attempts == 0:
            return 0.0
        return self.rush_yards / self.rush_attempts

    def stats_string(self) -> str:
        """Multi-line summary sent to chat by the stats command."""
        return "\n".join(
            [
                f"Passing: {self.pass_completions}/{self.pass_attempts}, {self.pass_yards} yds, "
                f"{self.pass_tds} TD, {self.interceptions_thrown} INT",
                f"Rushing: {self.rush_attempts} att, {self.rush_yards} yds, {self.rush_tds} TD",
                f"Receiving: {self.receptions}/{self.targets}, {self.receiving_yards} yds, "
                f"{self.receiving_tds} TD",
                f"Defense: {self.tackles} tkl, {self.sacks} sacks, {self.interceptions} INT",
                f"Special teams: {self.kicks} kicks, {self.return_yards} return yds",
            ]
        )


@dataclass
class StatAggregator:
    """
    Per-player counters updated by play outcomes.

    Keyed by the player's auth so stats survive a rejoin.
    """

    stats: dict[str, PlayerStats] = field(default_factory=dict)

    def get(self, player: Player) -> Optional[PlayerStats]:
        return self.stats.get(player.stats_key)

    def _get_or_create(self, player: Player) -> PlayerStats:
        if player.stats_key not in self.stats:
            self.stats[player.stats_key] = PlayerStats(
                stats_key=player.stats_key,
                player_name=player.name,
            )
        return self.stats[player.stats_key]

    def _for_id(self, lookup: PlayerLookup, player_id: Optional[int]) -> Optional[PlayerStats]:
        if player_id is None:
            return None
        player = lookup(player_id)
        if player is None:
            return None
        return self._get_or_create(player)

    def record_play(self, result: PlayResult, lookup: PlayerLookup) -> None:
        """Apply one play outcome to every involved player."""
        yards = result.yards_gained

        if result.play_type == PlayType.PASS:
            passer = self._for_id(lookup, result.passer_id)
            if result.is_sack:
                if passer:
                    passer.sacks_taken += 1
                sacker = self._for_id(lookup, result.tackler_id)
                if sacker:
                    sacker.sacks += 1
                return

            receiver = self._for_id(lookup, result.receiver_id)
            if passer:
                passer.pass_attempts += 1
                if result.is_complete:
                    passer.pass_completions += 1
                    passer.pass_yards += yards
                    if result.is_touchdown:
                        passer.pass_tds += 1
                if result.is_interception:
                    passer.interceptions_thrown += 1
            if receiver:
                receiver.targets += 1
                if result.is_complete:
                    receiver.receptions += 1
                    receiver.receiving_yards += yards
                    if result.is_touchdown:
                        receiver.receiving_tds += 1

            interceptor = self._for_id(lookup, result.interceptor_id)
            if interceptor:
                interceptor.interceptions += 1

        elif result.play_type == PlayType.RUN:
            rusher = self._for_id(lookup, result.ball_carrier_id)
            if rusher:
                rusher.rush_attempts += 1
                rusher.rush_yards += yards
                if result.is_touchdown:
                    rusher.rush_tds += 1
                if result.is_fumble_lost:
                    rusher.fumbles_lost += 1

        else:
            kicker = self._for_id(lookup, result.kicker_id)
            if kicker:
                kicker.kicks += 1
            returner = self._for_id(lookup, result.ball_carrier_id)
            if returner:
                returner.return_yards += yards

        tackler = self._for_id(lookup, result.tackler_id)
        if tackler:
            tackler.tackles += 1

    def reset(self) -> None:
        self.stats.clear()
