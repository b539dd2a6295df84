from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union
import enum


WICKET = "W"

# A drawn outcome: runs off the bat, or WICKET
Outcome = Union[int, str]


class MatchResult(enum.Enum):
    """Result relative to the team batting first"""
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"
    NO_RESULT = "no_result"


class MatchStatus(enum.Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class InningsStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class BallEvent:
    """One delivery, as emitted by the innings engine"""
    innings_number: int
    ball_number: int  # 1-based within the innings
    over_number: int  # 0-based over the ball belonged to
    ball_in_over: int  # 1-based
    runs: int
    is_wicket: bool
    striker_id: int
    bowler_id: int

    # Score after the ball
    total_runs: int
    wickets: int
    overs_display: str

    dismissed_id: Optional[int] = None
    innings_complete: bool = False

    @property
    def outcome(self) -> Outcome:
        return WICKET if self.is_wicket else self.runs

    @property
    def is_boundary(self) -> bool:
        return not self.is_wicket and self.runs in (4, 6)

    @property
    def score_line(self) -> str:
        return f"{self.total_runs}/{self.wickets} ({self.overs_display})"


@dataclass
class BatterScore:
    player_id: int
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0
    is_out: bool = False
    bowler_id: Optional[int] = None


@dataclass
class BowlerFigures:
    player_id: int
    overs: str = "0.0"
    runs: int = 0
    wickets: int = 0
    economy: float = 0.0


@dataclass
class InningsSummary:
    innings_number: int
    batting_team: str
    bowling_team: str
    runs: int
    wickets: int
    overs: str
    standout_id: Optional[int] = None
    batters: list[BatterScore] = field(default_factory=list)
    bowlers: list[BowlerFigures] = field(default_factory=list)

    @property
    def score_line(self) -> str:
        return f"{self.runs}/{self.wickets} ({self.overs})"


@dataclass
class MatchSummary:
    match_number: int
    team_a: str
    team_b: str
    venue: str
    match_date: Optional[date]
    innings1: InningsSummary
    innings2: InningsSummary
    result: MatchResult
    winner: Optional[str]
    standout_id: Optional[int]

    @property
    def result_text(self) -> str:
        if self.result == MatchResult.TIE:
            return "Match tied!"
        if self.result == MatchResult.NO_RESULT:
            return "No result"
        margin = abs(self.innings1.runs - self.innings2.runs)
        return f"{self.winner} won by {margin} run{'s' if margin != 1 else ''}"


@dataclass
class Match:
    """A fixture between two teams. Team A always bats first."""
    match_number: int
    team_a: str
    team_b: str
    venue: str = "Home Ground"
    match_date: Optional[date] = None
    status: MatchStatus = MatchStatus.SCHEDULED
    result: Optional[MatchResult] = None
    standout_id: Optional[int] = None
    events: list[BallEvent] = field(default_factory=list)
    summary: Optional[MatchSummary] = None

    def __repr__(self):
        return f"<Match {self.match_number}: {self.team_a} vs {self.team_b}>"
