from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional
import enum


RUNS_PER_CREDIT = 20


class PlayerRole(enum.Enum):
    BATTER = "batter"
    BOWLER = "bowler"
    ALL_ROUNDER = "all_rounder"


class CreditScope(enum.Enum):
    MATCH = "match"
    CAREER = "career"


@dataclass
class BattingRecord:
    """Runs and balls faced over some scope (one match or a career)"""
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0

    @property
    def strike_rate(self) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs / self.balls) * 100


@dataclass
class BowlingRecord:
    """Balls bowled, runs conceded and wickets over some scope"""
    balls: int = 0
    runs: int = 0
    wickets: int = 0

    def economy(self, balls_per_over: int = 6) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs / self.balls) * balls_per_over

    @property
    def average(self) -> float:
        if self.wickets == 0:
            return 0.0
        return self.runs / self.wickets


@dataclass
class Player:
    name: str
    age: int
    role: PlayerRole
    id: Optional[int] = None

    # Match scope, reset by start_match()
    batting: BattingRecord = field(default_factory=BattingRecord)
    bowling: BowlingRecord = field(default_factory=BowlingRecord)

    # Career scope, never reset
    career_batting: BattingRecord = field(default_factory=BattingRecord)
    career_bowling: BowlingRecord = field(default_factory=BowlingRecord)
    career_credits: int = 0
    matches_played: int = 0

    @property
    def can_bat(self) -> bool:
        return self.role in (PlayerRole.BATTER, PlayerRole.ALL_ROUNDER)

    @property
    def can_bowl(self) -> bool:
        return self.role in (PlayerRole.BOWLER, PlayerRole.ALL_ROUNDER)

    @property
    def match_credits(self) -> int:
        """Credits earned in the current match, by role"""
        batting_credit = self.batting.runs // RUNS_PER_CREDIT
        bowling_credit = self.bowling.wickets
        if self.role == PlayerRole.BATTER:
            return batting_credit
        elif self.role == PlayerRole.BOWLER:
            return bowling_credit
        elif self.role == PlayerRole.ALL_ROUNDER:
            return batting_credit + bowling_credit
        return 0

    def credits(self, scope: CreditScope) -> int:
        if scope == CreditScope.CAREER:
            return self.career_credits
        return self.match_credits

    # Mutated only by the innings engine during play

    def record_ball_faced(self, runs: int) -> None:
        for record in (self.batting, self.career_batting):
            record.balls += 1
            record.runs += runs
            if runs == 4:
                record.fours += 1
            elif runs == 6:
                record.sixes += 1

    def record_ball_bowled(self, runs: int, is_wicket: bool) -> None:
        for record in (self.bowling, self.career_bowling):
            record.balls += 1
            record.runs += runs
            if is_wicket:
                record.wickets += 1

    # Match lifecycle, driven by the match orchestrator

    def start_match(self) -> None:
        self.batting = BattingRecord()
        self.bowling = BowlingRecord()

    def close_match(self) -> int:
        """Roll this match's credits into the career total"""
        earned = self.match_credits
        self.career_credits += earned
        self.matches_played += 1
        return earned

    def __repr__(self):
        return f"<Player {self.name} ({self.role.value}) #{self.id}>"


class PlayerPool:
    """
    Owns every player of a tournament, keyed by a stable integer id.
    Teams, lineups and innings only ever hold ids.
    """

    def __init__(self, players: Iterable[Player] = ()):
        self._players: dict[int, Player] = {}
        self._next_id = 1
        for player in players:
            self.add(player)

    def add(self, player: Player) -> int:
        player.id = self._next_id
        self._players[player.id] = player
        self._next_id += 1
        return player.id

    def get(self, player_id: int) -> Player:
        return self._players[player_id]

    def many(self, player_ids: Iterable[int]) -> list[Player]:
        return [self._players[pid] for pid in player_ids]

    def find_by_name(self, name: str, among: Iterable[int]) -> Optional[int]:
        """Id of the player called `name` among the given ids"""
        for pid in among:
            if self._players[pid].name == name:
                return pid
        return None

    def __contains__(self, player_id: int) -> bool:
        return player_id in self._players

    def __iter__(self) -> Iterator[Player]:
        for pid in sorted(self._players):
            yield self._players[pid]

    def __len__(self) -> int:
        return len(self._players)
