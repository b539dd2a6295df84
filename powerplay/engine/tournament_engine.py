"""
Tournament Engine - Handles fixtures, points table and awards
"""
import logging
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterator, Optional

from powerplay.engine.match_engine import InningsSetup, MatchEngine
from powerplay.engine.match_format import MatchFormat
from powerplay.engine.outcomes import RandomOutcomeSource
from powerplay.engine.statistics import best_player_by_credit, rank_teams
from powerplay.exceptions import ConfigurationError, FixtureAlreadyPlayedError
from powerplay.models.match import Match, MatchStatus, MatchSummary
from powerplay.models.player import CreditScope, Player, PlayerPool
from powerplay.models.team import Team

logger = logging.getLogger(__name__)


@dataclass
class Standing:
    """Team standing in the points table"""
    position: int
    team: Team
    played: int
    won: int
    lost: int
    tied: int
    no_result: int
    points: int


@dataclass
class Fixture:
    match_number: int
    team_a: Team
    team_b: Team
    venue: str
    match_date: date
    match: Optional[Match] = None

    @property
    def is_played(self) -> bool:
        return self.match is not None and self.match.status == MatchStatus.COMPLETED


class TournamentEngine:
    """
    Round-robin tournament: every team plays every other team once.
    One outcome source, seeded once, drives every match.
    """

    def __init__(
        self,
        name: str,
        pool: PlayerPool,
        teams: list[Team],
        fmt: Optional[MatchFormat] = None,
        seed: Optional[int] = None,
        outcomes=None,
        start_date: Optional[date] = None,
    ):
        if len(teams) < 2:
            raise ConfigurationError(f"A tournament needs at least 2 teams, got {len(teams)}")
        names = [t.name for t in teams]
        if len(set(names)) != len(names):
            raise ConfigurationError("Team names must be unique")

        self.name = name
        self.pool = pool
        self.teams = list(teams)
        self.fmt = (fmt or MatchFormat.from_settings()).validate()
        self.rng = random.Random(seed)
        self.outcomes = outcomes or RandomOutcomeSource(self.fmt.outcome_weights, rng=self.rng)
        self.start_date = start_date or date.today()
        self.fixtures: list[Fixture] = []
        self._match_engine = MatchEngine(pool, self.fmt, outcomes=self.outcomes)

    def generate_fixtures(self) -> list[Fixture]:
        """
        Each pair of teams meets once, in team order: (0, 1), (0, 2), ... (n-2, n-1).
        The first-named team hosts and bats first.
        """
        fixtures = []
        match_number = 1
        for i, team_a in enumerate(self.teams):
            for team_b in self.teams[i + 1:]:
                fixtures.append(Fixture(
                    match_number=match_number,
                    team_a=team_a,
                    team_b=team_b,
                    venue=team_a.home_ground,
                    match_date=self.start_date + timedelta(days=match_number - 1),
                ))
                match_number += 1
        self.fixtures = fixtures
        logger.info("%s: %d fixtures for %d teams", self.name, len(fixtures), len(self.teams))
        return fixtures

    def get_next_fixture(self) -> Optional[Fixture]:
        """Get the next unplayed fixture"""
        return next((f for f in self.fixtures if not f.is_played), None)

    def play_fixture(
        self,
        fixture: Fixture,
        setup_a: Optional[InningsSetup] = None,
        setup_b: Optional[InningsSetup] = None,
    ) -> MatchSummary:
        if fixture.is_played:
            raise FixtureAlreadyPlayedError(f"Fixture {fixture.match_number} has already been played")
        match = MatchEngine.create_match(
            fixture.team_a,
            fixture.team_b,
            match_number=fixture.match_number,
            venue=fixture.venue,
            match_date=fixture.match_date,
        )
        # A setup rejected before the first ball leaves the fixture unplayed
        summary = self._match_engine.play_match(match, fixture.team_a, fixture.team_b, setup_a, setup_b)
        fixture.match = match
        return summary

    def play_all(self, setups: Optional[Dict[int, tuple]] = None) -> Iterator[MatchSummary]:
        """
        Play every remaining fixture in order.
        `setups` maps a match number to its (setup_a, setup_b) pair.
        """
        if not self.fixtures:
            self.generate_fixtures()
        setups = setups or {}
        for fixture in self.fixtures:
            if fixture.is_played:
                continue
            setup_a, setup_b = setups.get(fixture.match_number, (None, None))
            yield self.play_fixture(fixture, setup_a, setup_b)

    def is_complete(self) -> bool:
        return bool(self.fixtures) and all(f.is_played for f in self.fixtures)

    def get_points_table(self) -> list[Standing]:
        """Current standings, sorted by points only"""
        return [
            Standing(
                position=pos,
                team=team,
                played=team.matches_played,
                won=team.wins,
                lost=team.losses,
                tied=team.ties,
                no_result=team.no_results,
                points=team.points,
            )
            for pos, team in enumerate(rank_teams(self.teams), 1)
        ]

    def get_champion(self) -> Optional[Team]:
        table = rank_teams(self.teams)
        return table[0] if table else None

    def all_players(self) -> list[Player]:
        """Every rostered player, team by team"""
        return [p for team in self.teams for p in self.pool.many(team.roster)]

    def get_player_of_tournament(self) -> Optional[Player]:
        return best_player_by_credit(self.all_players(), CreditScope.CAREER)
