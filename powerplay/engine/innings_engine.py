import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from powerplay.engine.match_format import MatchFormat
from powerplay.engine.outcomes import BallOutcome
from powerplay.engine.statistics import best_player_by_credit
from powerplay.exceptions import ConfigurationError, InningsCompleteError
from powerplay.models.match import BallEvent, BatterScore, BowlerFigures, InningsStatus, InningsSummary
from powerplay.models.player import CreditScope, PlayerPool

logger = logging.getLogger(__name__)


@dataclass
class BatterInnings:
    """Tracks a batter's innings"""
    player_id: int
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0
    is_out: bool = False
    bowler_id: Optional[int] = None

    @property
    def strike_rate(self) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs / self.balls) * 100


@dataclass
class BowlerSpell:
    """Tracks a bowler's spell"""
    player_id: int
    balls: int = 0
    runs: int = 0
    wickets: int = 0

    def overs_display(self, balls_per_over: int = 6) -> str:
        return f"{self.balls // balls_per_over}.{self.balls % balls_per_over}"

    def economy(self, balls_per_over: int = 6) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs / self.balls) * balls_per_over


@dataclass
class InningsState:
    """Current state of an innings"""
    batting_team: str
    bowling_team: str
    batting_order: list[int]
    bowling_order: list[int]
    innings_number: int = 1

    striker_index: int = 0
    non_striker_index: int = 1
    bowler_index: int = 0
    previous_bowler_index: Optional[int] = None

    total_runs: int = 0
    wickets: int = 0
    overs: int = 0
    balls: int = 0  # balls in the current over
    total_balls: int = 0
    batters_exhausted: bool = False
    status: InningsStatus = InningsStatus.IN_PROGRESS

    batter_innings: dict = field(default_factory=dict)  # player_id -> BatterInnings
    bowler_spells: dict = field(default_factory=dict)  # player_id -> BowlerSpell

    @property
    def striker_id(self) -> int:
        return self.batting_order[self.striker_index]

    @property
    def non_striker_id(self) -> int:
        return self.batting_order[self.non_striker_index]

    @property
    def bowler_id(self) -> int:
        return self.bowling_order[self.bowler_index]

    @property
    def overs_display(self) -> str:
        return f"{self.overs}.{self.balls}"

    @property
    def score_line(self) -> str:
        return f"{self.total_runs}/{self.wickets} ({self.overs_display})"


def _index_of(pool: PlayerPool, order: Sequence[int], name: Optional[str], default: int, label: str, team: str) -> int:
    if name is None:
        return default
    player_id = pool.find_by_name(name, order)
    if player_id is None:
        raise ConfigurationError(f"{label} '{name}' is not in the {team} lineup")
    return order.index(player_id)


class InningsEngine:
    """
    Ball-by-ball state machine for one team's batting effort.

    step() plays exactly one ball. The innings completes as soon as the
    wicket or over limit is reached, or when no batter is left to come in.
    """

    def __init__(
        self,
        pool: PlayerPool,
        fmt: MatchFormat,
        outcomes,
        batting_team: str,
        bowling_team: str,
        batting_order: Sequence[int],
        bowling_order: Sequence[int],
        striker: Optional[str] = None,
        non_striker: Optional[str] = None,
        bowler: Optional[str] = None,
        innings_number: int = 1,
    ):
        self.pool = pool
        self.fmt = fmt
        self.outcomes = outcomes

        batting_order = list(batting_order)
        bowling_order = list(bowling_order)
        self._validate_orders(batting_team, bowling_team, batting_order, bowling_order)

        striker_index = _index_of(pool, batting_order, striker, 0, "Striker", batting_team)
        # Unnamed non-striker: first batter in the order who is not on strike
        default_non_striker = 1 if striker_index == 0 else 0
        non_striker_index = _index_of(
            pool, batting_order, non_striker, default_non_striker, "Non-striker", batting_team,
        )
        bowler_index = _index_of(pool, bowling_order, bowler, 0, "Bowler", bowling_team)
        if striker_index == non_striker_index:
            raise ConfigurationError(
                f"Striker and non-striker must be different players, got "
                f"'{pool.get(batting_order[striker_index]).name}' twice"
            )

        self.state = InningsState(
            batting_team=batting_team,
            bowling_team=bowling_team,
            batting_order=batting_order,
            bowling_order=bowling_order,
            innings_number=innings_number,
            striker_index=striker_index,
            non_striker_index=non_striker_index,
            bowler_index=bowler_index,
        )
        for pid in (self.state.striker_id, self.state.non_striker_id):
            self.state.batter_innings[pid] = BatterInnings(player_id=pid)

    def _validate_orders(self, batting_team: str, bowling_team: str, batting_order: list, bowling_order: list) -> None:
        fmt = self.fmt
        if len(batting_order) != fmt.squad_size:
            raise ConfigurationError(
                f"{batting_team} batting order has {len(batting_order)} players, expected {fmt.squad_size}"
            )
        if len(set(batting_order)) != len(batting_order):
            raise ConfigurationError(f"{batting_team} batting order lists a player twice")
        if not bowling_order:
            raise ConfigurationError(f"{bowling_team} has no bowlers")
        if len(set(bowling_order)) != len(bowling_order):
            raise ConfigurationError(f"{bowling_team} bowling order lists a player twice")
        if fmt.max_overs > 1 and len(bowling_order) < 2:
            raise ConfigurationError(
                f"{bowling_team} needs at least 2 bowlers for {fmt.max_overs} overs "
                f"(no bowler may bowl consecutive overs)"
            )
        for pid in batting_order + bowling_order:
            if pid not in self.pool:
                raise ConfigurationError(f"Unknown player id {pid}")
        for pid in bowling_order:
            player = self.pool.get(pid)
            if not player.can_bowl:
                raise ConfigurationError(
                    f"{player.name} ({player.role.value}) cannot bowl for {bowling_team}"
                )

    @property
    def is_complete(self) -> bool:
        return self.state.status == InningsStatus.COMPLETE

    def _check_complete(self) -> None:
        state = self.state
        if (
            state.wickets >= self.fmt.max_wickets
            or state.overs >= self.fmt.max_overs
            or state.batters_exhausted
        ):
            state.status = InningsStatus.COMPLETE
            logger.info(
                "Innings %d complete: %s %s",
                state.innings_number, state.batting_team, state.score_line,
            )

    def change_strike(self) -> None:
        state = self.state
        state.striker_index, state.non_striker_index = state.non_striker_index, state.striker_index

    def _bring_in_next_batter(self) -> None:
        """The dismissed striker's slot goes to the batter after the highest one in so far"""
        state = self.state
        next_index = max(state.striker_index, state.non_striker_index) + 1
        if next_index >= len(state.batting_order):
            state.batters_exhausted = True
            logger.warning(
                "%s have no batters left after %d wickets, closing the innings",
                state.batting_team, state.wickets,
            )
            return
        state.striker_index = next_index
        state.batter_innings[state.striker_id] = BatterInnings(player_id=state.striker_id)

    def _rotate_bowler(self) -> None:
        """Round robin over the bowling order, never the bowler who just finished"""
        state = self.state
        state.previous_bowler_index = state.bowler_index
        if len(state.bowling_order) < 2:
            return
        state.bowler_index = (state.bowler_index + 1) % len(state.bowling_order)

    def step(self) -> BallEvent:
        """Play one ball"""
        if self.is_complete:
            raise InningsCompleteError(
                f"{self.state.batting_team} innings is already complete at {self.state.score_line}"
            )

        state = self.state
        outcome: BallOutcome = self.outcomes.next_outcome()

        striker_id = state.striker_id
        bowler_id = state.bowler_id
        over_number = state.overs
        ball_in_over = state.balls + 1

        batter_innings = state.batter_innings[striker_id]
        spell = state.bowler_spells.setdefault(bowler_id, BowlerSpell(player_id=bowler_id))

        # Every ball counts once for the bowler; the striker is charged only when not out
        spell.balls += 1
        self.pool.get(bowler_id).record_ball_bowled(outcome.runs, outcome.is_wicket)

        dismissed_id = None
        if outcome.is_wicket:
            state.wickets += 1
            spell.wickets += 1
            batter_innings.is_out = True
            batter_innings.bowler_id = bowler_id
            dismissed_id = striker_id
            if state.wickets < self.fmt.max_wickets:
                self._bring_in_next_batter()
        else:
            batter_innings.balls += 1
            self.pool.get(striker_id).record_ball_faced(outcome.runs)
            state.total_runs += outcome.runs
            batter_innings.runs += outcome.runs
            spell.runs += outcome.runs
            if outcome.runs == 4:
                batter_innings.fours += 1
            elif outcome.runs == 6:
                batter_innings.sixes += 1
            if outcome.runs % 2 == 1:
                self.change_strike()

        state.balls += 1
        state.total_balls += 1
        if state.balls == self.fmt.balls_per_over:
            state.overs += 1
            state.balls = 0
            self._rotate_bowler()

        self._check_complete()

        event = BallEvent(
            innings_number=state.innings_number,
            ball_number=state.total_balls,
            over_number=over_number,
            ball_in_over=ball_in_over,
            runs=outcome.runs,
            is_wicket=outcome.is_wicket,
            striker_id=striker_id,
            bowler_id=bowler_id,
            total_runs=state.total_runs,
            wickets=state.wickets,
            overs_display=state.overs_display,
            dismissed_id=dismissed_id,
            innings_complete=self.is_complete,
        )
        logger.debug("Ball %d: %s -> %s", event.ball_number, event.outcome, event.score_line)
        return event

    def play(self) -> Iterator[BallEvent]:
        """Lazily play the innings out"""
        while not self.is_complete:
            yield self.step()

    def standout(self):
        """Best match-credit player, batting order scanned before bowling order"""
        players = self.pool.many(self.state.batting_order + self.state.bowling_order)
        return best_player_by_credit(players, CreditScope.MATCH)

    def summary(self) -> InningsSummary:
        state = self.state
        bpo = self.fmt.balls_per_over
        standout = self.standout()
        return InningsSummary(
            innings_number=state.innings_number,
            batting_team=state.batting_team,
            bowling_team=state.bowling_team,
            runs=state.total_runs,
            wickets=state.wickets,
            overs=state.overs_display,
            standout_id=standout.id if standout else None,
            batters=[
                BatterScore(
                    player_id=bi.player_id,
                    runs=bi.runs,
                    balls=bi.balls,
                    fours=bi.fours,
                    sixes=bi.sixes,
                    is_out=bi.is_out,
                    bowler_id=bi.bowler_id,
                )
                for bi in state.batter_innings.values()
            ],
            bowlers=[
                BowlerFigures(
                    player_id=spell.player_id,
                    overs=spell.overs_display(bpo),
                    runs=spell.runs,
                    wickets=spell.wickets,
                    economy=round(spell.economy(bpo), 2),
                )
                for spell in state.bowler_spells.values()
            ],
        )
