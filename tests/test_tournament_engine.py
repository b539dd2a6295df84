"""
Pytest tests for the round-robin tournament engine.

Run with: pytest tests/test_tournament_engine.py -v
"""
from datetime import date

import pytest

from powerplay.engine.match_engine import InningsSetup
from powerplay.engine.match_format import MatchFormat
from powerplay.engine.outcomes import ScriptedOutcomeSource
from powerplay.engine.tournament_engine import TournamentEngine
from powerplay.exceptions import ConfigurationError, FixtureAlreadyPlayedError
from powerplay.generators import TeamGenerator
from powerplay.models.match import MatchResult, WICKET


def create_tournament(team_count: int = 4, seed: int = 42, **kwargs) -> TournamentEngine:
    pool, teams = TeamGenerator.build_league(team_count, 5, seed=seed)
    return TournamentEngine(
        "Test Cup", pool, teams, MatchFormat(), seed=seed, start_date=date(2024, 4, 1), **kwargs,
    )


class TestFixtures:
    """Every pair of teams meets exactly once"""

    @pytest.mark.parametrize("team_count,expected", [(2, 1), (3, 3), (4, 6), (8, 28)])
    def test_fixture_count(self, team_count, expected):
        engine = create_tournament(team_count)
        assert len(engine.generate_fixtures()) == expected

    def test_fixture_order_and_venues(self):
        engine = create_tournament(3)
        fixtures = engine.generate_fixtures()
        pairs = [(f.team_a.name, f.team_b.name) for f in fixtures]
        names = [t.name for t in engine.teams]

        assert pairs == [(names[0], names[1]), (names[0], names[2]), (names[1], names[2])]
        assert [f.match_number for f in fixtures] == [1, 2, 3]
        assert fixtures[2].venue == engine.teams[1].home_ground
        assert [f.match_date for f in fixtures] == [date(2024, 4, 1), date(2024, 4, 2), date(2024, 4, 3)]

    def test_each_pair_once(self):
        engine = create_tournament(5)
        pairs = [frozenset((f.team_a.name, f.team_b.name)) for f in engine.generate_fixtures()]
        assert len(pairs) == len(set(pairs))

    def test_needs_two_teams(self):
        pool, teams = TeamGenerator.build_league(2, 5, seed=1)
        with pytest.raises(ConfigurationError):
            TournamentEngine("Solo", pool, teams[:1])

    def test_team_names_unique(self):
        pool, teams = TeamGenerator.build_league(2, 5, seed=1)
        teams[1].name = teams[0].name
        with pytest.raises(ConfigurationError, match="unique"):
            TournamentEngine("Twins", pool, teams)


class TestPlayAll:
    """Full tournament runs"""

    def test_every_team_plays_everyone(self):
        engine = create_tournament(4)
        summaries = list(engine.play_all())

        assert len(summaries) == 6
        assert engine.is_complete()
        assert engine.get_next_fixture() is None
        assert all(t.matches_played == 3 for t in engine.teams)

    def test_points_are_conserved(self):
        """Each match hands out exactly two points"""
        engine = create_tournament(4)
        list(engine.play_all())

        assert sum(t.points for t in engine.teams) == 2 * len(engine.fixtures)
        for team in engine.teams:
            assert team.points == 2 * team.wins + team.ties
            assert team.wins + team.losses + team.ties == team.matches_played

    def test_points_table_sorted(self):
        engine = create_tournament(4)
        list(engine.play_all())
        table = engine.get_points_table()

        assert [s.position for s in table] == [1, 2, 3, 4]
        points = [s.points for s in table]
        assert points == sorted(points, reverse=True)
        assert engine.get_champion() is table[0].team

    def test_player_of_tournament_has_most_career_credits(self):
        engine = create_tournament(4)
        list(engine.play_all())
        best = engine.get_player_of_tournament()

        assert best is not None
        assert best.career_credits == max(p.career_credits for p in engine.all_players())
        assert all(p.matches_played == 3 for p in engine.all_players())

    def test_seeded_runs_are_reproducible(self):
        first = create_tournament(4, seed=7)
        second = create_tournament(4, seed=7)
        lines_first = [(s.innings1.score_line, s.innings2.score_line) for s in first.play_all()]
        lines_second = [(s.innings1.score_line, s.innings2.score_line) for s in second.play_all()]

        assert lines_first == lines_second
        assert [t.points for t in first.teams] == [t.points for t in second.teams]

    def test_points_match_results(self):
        engine = create_tournament(3)
        for summary in engine.play_all():
            if summary.result == MatchResult.TIE:
                assert summary.winner is None
            else:
                assert summary.winner in (summary.team_a, summary.team_b)

    def test_play_all_resumes_after_partial_play(self):
        engine = create_tournament(3)
        engine.generate_fixtures()
        engine.play_fixture(engine.fixtures[0])

        assert engine.get_next_fixture() is engine.fixtures[1]
        remaining = list(engine.play_all())
        assert [s.match_number for s in remaining] == [2, 3]


class TestFixtureSemantics:
    def test_fixture_cannot_be_replayed(self):
        engine = create_tournament(2)
        fixture = engine.generate_fixtures()[0]
        engine.play_fixture(fixture)

        with pytest.raises(FixtureAlreadyPlayedError):
            engine.play_fixture(fixture)
        assert all(t.matches_played == 1 for t in engine.teams)

    def test_fixture_retried_after_rejected_setup(self):
        engine = create_tournament(2)
        fixture = engine.generate_fixtures()[0]

        with pytest.raises(ConfigurationError):
            engine.play_fixture(fixture, InningsSetup(striker="Nobody"))
        assert not fixture.is_played
        assert fixture.match is None
        assert engine.get_next_fixture() is fixture
        assert all(t.matches_played == 0 for t in engine.teams)

        summaries = list(engine.play_all())
        assert len(summaries) == 1
        assert fixture.is_played
        assert engine.is_complete()

    def test_setups_by_match_number(self):
        engine = create_tournament(2)
        fixture = engine.generate_fixtures()[0]
        opener = engine.pool.get(fixture.team_a.playing[1]).name
        setup = InningsSetup(striker=opener, non_striker=engine.pool.get(fixture.team_a.playing[0]).name)

        summary = next(engine.play_all({1: (setup, None)}))
        first_ball = fixture.match.events[0]
        assert engine.pool.get(first_ball.striker_id).name == opener
        assert summary.match_number == 1

    def test_scripted_tournament(self):
        # Every innings: a six, then two wickets
        script = [6, WICKET, WICKET] * 2
        engine = create_tournament(2, outcomes=ScriptedOutcomeSource(script))
        summary = next(engine.play_all())

        assert summary.result == MatchResult.TIE
        assert summary.innings1.score_line == "6/2 (0.3)"
        assert [t.points for t in engine.teams] == [1, 1]
