"""
Match Engine - runs two innings back to back and settles the result.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional

from powerplay.engine.innings_engine import InningsEngine
from powerplay.engine.match_format import MatchFormat
from powerplay.engine.outcomes import RandomOutcomeSource
from powerplay.exceptions import ConfigurationError, FixtureAlreadyPlayedError
from powerplay.models.match import BallEvent, Match, MatchResult, MatchStatus, MatchSummary
from powerplay.models.player import PlayerPool
from powerplay.models.team import Team
from powerplay.validators.lineup_validator import LineupValidator

logger = logging.getLogger(__name__)


OPPOSITE_RESULT = {
    MatchResult.WIN: MatchResult.LOSS,
    MatchResult.LOSS: MatchResult.WIN,
    MatchResult.TIE: MatchResult.TIE,
    MatchResult.NO_RESULT: MatchResult.NO_RESULT,
}


@dataclass
class InningsSetup:
    """Opening batters and bowler, by name. None picks the first in order."""
    striker: Optional[str] = None
    non_striker: Optional[str] = None
    bowler: Optional[str] = None


def decide_result(runs_a: int, runs_b: int) -> MatchResult:
    """Result for the team batting first. There is no chase, only the totals count."""
    if runs_a > runs_b:
        return MatchResult.WIN
    if runs_b > runs_a:
        return MatchResult.LOSS
    return MatchResult.TIE


class MatchEngine:
    """
    Plays a match: team A bats first, team B second, then the result,
    standout player and points are settled exactly once.
    """

    def __init__(
        self,
        pool: PlayerPool,
        fmt: Optional[MatchFormat] = None,
        outcomes=None,
        seed: Optional[int] = None,
    ):
        self.pool = pool
        self.fmt = (fmt or MatchFormat.from_settings()).validate()
        self.outcomes = outcomes or RandomOutcomeSource(self.fmt.outcome_weights, seed=seed)
        self.innings1: Optional[InningsEngine] = None
        self.innings2: Optional[InningsEngine] = None
        self.current_innings: Optional[InningsEngine] = None

    @staticmethod
    def create_match(
        team_a: Team,
        team_b: Team,
        match_number: int = 1,
        venue: Optional[str] = None,
        match_date: Optional[date] = None,
    ) -> Match:
        return Match(
            match_number=match_number,
            team_a=team_a.name,
            team_b=team_b.name,
            venue=venue or team_a.home_ground,
            match_date=match_date,
        )

    def _check_side(self, team: Team) -> None:
        check = LineupValidator.validate(self.pool.many(team.playing), self.fmt.squad_size)
        if not check["valid"]:
            raise ConfigurationError(f"{team.name}: " + "; ".join(check["errors"]))

    def setup_innings(
        self,
        batting: Team,
        bowling: Team,
        setup: Optional[InningsSetup] = None,
        innings_number: int = 1,
    ) -> InningsEngine:
        """Initialize an innings"""
        setup = setup or InningsSetup()
        return InningsEngine(
            pool=self.pool,
            fmt=self.fmt,
            outcomes=self.outcomes,
            batting_team=batting.name,
            bowling_team=bowling.name,
            batting_order=batting.batting_order(),
            bowling_order=bowling.bowling_order(self.pool),
            striker=setup.striker,
            non_striker=setup.non_striker,
            bowler=setup.bowler,
            innings_number=innings_number,
        )

    def iter_match(
        self,
        match: Match,
        team_a: Team,
        team_b: Team,
        setup_a: Optional[InningsSetup] = None,
        setup_b: Optional[InningsSetup] = None,
    ) -> Iterator[BallEvent]:
        """
        Validate both sides and openers, then return a lazy stream of every ball
        of both innings. The match is settled when the stream is exhausted.
        """
        if match.status != MatchStatus.SCHEDULED:
            raise FixtureAlreadyPlayedError(f"Match {match.match_number} has already been played")
        if team_a.name == team_b.name:
            raise ConfigurationError(f"{team_a.name} cannot play itself")

        self._check_side(team_a)
        self._check_side(team_b)

        # Both innings are built up front so bad setups fail before the first ball
        self.innings1 = self.setup_innings(team_a, team_b, setup_a, innings_number=1)
        self.innings2 = self.setup_innings(team_b, team_a, setup_b, innings_number=2)

        for player in self.pool.many(team_a.playing + team_b.playing):
            player.start_match()
        match.status = MatchStatus.IN_PROGRESS
        logger.info("Match %d: %s vs %s at %s", match.match_number, team_a.name, team_b.name, match.venue)

        return self._run(match, team_a, team_b)

    def _run(self, match: Match, team_a: Team, team_b: Team) -> Iterator[BallEvent]:
        for innings in (self.innings1, self.innings2):
            self.current_innings = innings
            for event in innings.play():
                match.events.append(event)
                yield event
        self._finalise(match, team_a, team_b)

    def play_match(
        self,
        match: Match,
        team_a: Team,
        team_b: Team,
        setup_a: Optional[InningsSetup] = None,
        setup_b: Optional[InningsSetup] = None,
    ) -> MatchSummary:
        """Simulate a complete match and return its summary"""
        for _ in self.iter_match(match, team_a, team_b, setup_a, setup_b):
            pass
        return match.summary

    def _finalise(self, match: Match, team_a: Team, team_b: Team) -> None:
        innings1 = self.innings1.summary()
        innings2 = self.innings2.summary()

        result = decide_result(innings1.runs, innings2.runs)
        team_a.record_result(result)
        team_b.record_result(OPPOSITE_RESULT[result])

        # Innings 2 awardee needs strictly more credits to take the match award
        standout_id = innings1.standout_id
        if innings2.standout_id is not None:
            if standout_id is None or (
                self.pool.get(innings2.standout_id).match_credits
                > self.pool.get(standout_id).match_credits
            ):
                standout_id = innings2.standout_id

        for player in self.pool.many(team_a.playing + team_b.playing):
            player.close_match()

        if result == MatchResult.WIN:
            winner = team_a.name
        elif result == MatchResult.LOSS:
            winner = team_b.name
        else:
            winner = None

        match.result = result
        match.standout_id = standout_id
        match.status = MatchStatus.COMPLETED
        match.summary = MatchSummary(
            match_number=match.match_number,
            team_a=team_a.name,
            team_b=team_b.name,
            venue=match.venue,
            match_date=match.match_date,
            innings1=innings1,
            innings2=innings2,
            result=result,
            winner=winner,
            standout_id=standout_id,
        )
        self.current_innings = None
        logger.info(
            "Match %d result: %s %s, %s %s -> %s",
            match.match_number, team_a.name, innings1.score_line,
            team_b.name, innings2.score_line, match.summary.result_text,
        )
