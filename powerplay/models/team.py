from dataclasses import dataclass, field
from typing import Optional

from powerplay.models.match import MatchResult
from powerplay.models.player import PlayerPool


POINTS_FOR_WIN = 2
POINTS_FOR_TIE = 1


@dataclass
class Team:
    name: str
    short_name: str
    city: str
    home_ground: str

    # Player ids
    roster: list[int] = field(default_factory=list)
    playing: list[int] = field(default_factory=list)

    # Season stats
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    no_results: int = 0
    points: int = 0

    def add_player(self, player_id: int) -> None:
        self.roster.append(player_id)

    def select_playing(self, squad_size: Optional[int] = None) -> list[int]:
        """Field the first `squad_size` roster players (the whole roster by default)"""
        self.playing = list(self.roster if squad_size is None else self.roster[:squad_size])
        return self.playing

    def batting_order(self) -> list[int]:
        return list(self.playing)

    def bowling_order(self, pool: PlayerPool) -> list[int]:
        return [pid for pid in self.playing if pool.get(pid).can_bowl]

    def record_result(self, result: MatchResult) -> None:
        """Apply one match result. The only place points change."""
        self.matches_played += 1
        if result == MatchResult.WIN:
            self.wins += 1
            self.points += POINTS_FOR_WIN
        elif result == MatchResult.LOSS:
            self.losses += 1
        elif result == MatchResult.TIE:
            self.ties += 1
            self.points += POINTS_FOR_TIE
        elif result == MatchResult.NO_RESULT:
            self.no_results += 1

    @property
    def squad_size(self) -> int:
        return len(self.playing)

    @property
    def win_percentage(self) -> float:
        if self.matches_played == 0:
            return 0.0
        return self.wins * 100 / self.matches_played

    def __repr__(self):
        return f"<Team {self.name} ({self.short_name})>"
