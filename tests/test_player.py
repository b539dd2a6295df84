"""
Pytest tests for players, the player pool, teams and credit aggregation.

Run with: pytest tests/test_player.py -v
"""
import pytest

from powerplay.engine.statistics import best_player_by_credit, rank_teams
from powerplay.models.match import MatchResult
from powerplay.models.player import CreditScope, Player, PlayerPool, PlayerRole
from powerplay.models.team import Team


def create_mock_player(name: str = "Player", role: PlayerRole = PlayerRole.ALL_ROUNDER) -> Player:
    return Player(name=name, age=25, role=role)


def create_mock_team(name: str, points: int = 0) -> Team:
    team = Team(name=name, short_name=name[:3].upper(), city=name, home_ground=f"{name} Ground")
    team.points = points
    return team


def score(player: Player, runs: int) -> None:
    """Feed runs to a player in sixes and singles"""
    for _ in range(runs // 6):
        player.record_ball_faced(6)
    for _ in range(runs % 6):
        player.record_ball_faced(1)


class TestCredits:
    """Credits by role: one per 20 runs, one per wicket"""

    @pytest.mark.parametrize("runs,expected", [(0, 0), (19, 0), (20, 1), (39, 1), (40, 2), (65, 3)])
    def test_batting_credit_is_floor_of_runs(self, runs, expected):
        batter = create_mock_player(role=PlayerRole.BATTER)
        score(batter, runs)
        assert batter.batting.runs == runs
        assert batter.match_credits == expected

    def test_batter_wickets_do_not_count(self):
        batter = create_mock_player(role=PlayerRole.BATTER)
        batter.record_ball_bowled(0, is_wicket=True)
        assert batter.match_credits == 0

    def test_bowler_runs_do_not_count(self):
        bowler = create_mock_player(role=PlayerRole.BOWLER)
        score(bowler, 45)
        bowler.record_ball_bowled(0, is_wicket=True)
        bowler.record_ball_bowled(4, is_wicket=False)
        assert bowler.match_credits == 1

    def test_all_rounder_counts_both(self):
        all_rounder = create_mock_player(role=PlayerRole.ALL_ROUNDER)
        score(all_rounder, 41)
        all_rounder.record_ball_bowled(0, is_wicket=True)
        all_rounder.record_ball_bowled(0, is_wicket=True)
        assert all_rounder.match_credits == 4

    def test_credit_scope(self):
        player = create_mock_player(role=PlayerRole.BOWLER)
        player.record_ball_bowled(0, is_wicket=True)
        assert player.credits(CreditScope.MATCH) == 1
        assert player.credits(CreditScope.CAREER) == 0
        player.close_match()
        assert player.credits(CreditScope.CAREER) == 1

    def test_close_match_accumulates(self):
        player = create_mock_player(role=PlayerRole.BATTER)
        for runs in (25, 44, 10):
            player.start_match()
            score(player, runs)
            player.close_match()

        assert player.career_credits == 1 + 2 + 0
        assert player.career_batting.runs == 79
        assert player.matches_played == 3

    def test_start_match_resets_match_records_only(self):
        player = create_mock_player()
        score(player, 30)
        player.record_ball_bowled(2, is_wicket=True)
        player.close_match()
        player.start_match()

        assert player.batting.runs == 0
        assert player.bowling.wickets == 0
        assert player.career_batting.runs == 30
        assert player.career_bowling.wickets == 1
        assert player.career_credits == 2


class TestRecords:
    def test_boundaries_and_strike_rate(self):
        player = create_mock_player()
        for runs in (4, 6, 0, 1):
            player.record_ball_faced(runs)
        assert player.batting.fours == 1
        assert player.batting.sixes == 1
        assert player.batting.strike_rate == pytest.approx(275.0)

    def test_economy_uses_balls_per_over(self):
        player = create_mock_player(role=PlayerRole.BOWLER)
        for runs in (1, 2, 3):
            player.record_ball_bowled(runs, is_wicket=False)
        assert player.bowling.economy(6) == pytest.approx(12.0)
        assert player.bowling.economy(3) == pytest.approx(6.0)

    def test_empty_records(self):
        player = create_mock_player()
        assert player.batting.strike_rate == 0.0
        assert player.bowling.economy() == 0.0
        assert player.bowling.average == 0.0

    def test_roles(self):
        assert create_mock_player(role=PlayerRole.BATTER).can_bat
        assert not create_mock_player(role=PlayerRole.BATTER).can_bowl
        assert create_mock_player(role=PlayerRole.BOWLER).can_bowl
        assert not create_mock_player(role=PlayerRole.BOWLER).can_bat
        all_rounder = create_mock_player(role=PlayerRole.ALL_ROUNDER)
        assert all_rounder.can_bat and all_rounder.can_bowl


class TestPlayerPool:
    def test_ids_are_sequential(self):
        pool = PlayerPool()
        ids = [pool.add(create_mock_player(f"P{i}")) for i in range(3)]
        assert ids == [1, 2, 3]
        assert pool.get(2).name == "P1"
        assert len(pool) == 3
        assert 3 in pool
        assert 4 not in pool

    def test_find_by_name_is_scoped(self):
        pool = PlayerPool([create_mock_player("Same"), create_mock_player("Same"), create_mock_player("Other")])
        assert pool.find_by_name("Same", [2, 3]) == 2
        assert pool.find_by_name("Same", [3]) is None
        assert pool.find_by_name("Other", [1, 2, 3]) == 3

    def test_iteration_in_id_order(self):
        pool = PlayerPool([create_mock_player("A"), create_mock_player("B")])
        assert [p.name for p in pool] == ["A", "B"]
        assert [p.name for p in pool.many([2, 1])] == ["B", "A"]


class TestBestPlayerByCredit:
    """Linear scan, strict comparison, first seen keeps a tie"""

    def test_highest_credit_wins(self):
        players = [create_mock_player(f"P{i}", PlayerRole.BOWLER) for i in range(3)]
        players[1].record_ball_bowled(0, is_wicket=True)
        assert best_player_by_credit(players) is players[1]

    def test_first_seen_keeps_tie(self):
        players = [create_mock_player(f"P{i}", PlayerRole.BOWLER) for i in range(3)]
        for p in players[1:]:
            p.record_ball_bowled(0, is_wicket=True)
        assert best_player_by_credit(players) is players[1]

    def test_all_zero_returns_first(self):
        players = [create_mock_player(f"P{i}") for i in range(3)]
        assert best_player_by_credit(players) is players[0]

    def test_empty_collection(self):
        assert best_player_by_credit([]) is None

    def test_career_scope(self):
        players = [create_mock_player(f"P{i}") for i in range(2)]
        players[0].record_ball_bowled(0, is_wicket=True)
        players[1].career_credits = 3
        assert best_player_by_credit(players, CreditScope.MATCH) is players[0]
        assert best_player_by_credit(players, CreditScope.CAREER) is players[1]


class TestTeamPoints:
    """Two for a win, one for a tie, nothing for a loss"""

    def test_points_rule(self):
        team = create_mock_team("Chennai")
        for result in (MatchResult.WIN, MatchResult.WIN, MatchResult.TIE, MatchResult.LOSS):
            team.record_result(result)

        assert team.points == 5
        assert (team.matches_played, team.wins, team.ties, team.losses) == (4, 2, 1, 1)
        assert team.points == 2 * team.wins + team.ties
        assert team.win_percentage == pytest.approx(50.0)

    def test_no_result_counts_as_played(self):
        team = create_mock_team("Delhi")
        team.record_result(MatchResult.NO_RESULT)
        assert team.matches_played == 1
        assert team.no_results == 1
        assert team.points == 0

    def test_select_playing(self):
        team = create_mock_team("Kolkata")
        for pid in range(1, 8):
            team.add_player(pid)
        assert team.select_playing(5) == [1, 2, 3, 4, 5]
        assert team.squad_size == 5
        assert team.select_playing() == list(range(1, 8))

    def test_bowling_order_keeps_bowlers_only(self):
        pool = PlayerPool()
        team = create_mock_team("Punjab")
        for role in (PlayerRole.BATTER, PlayerRole.BOWLER, PlayerRole.ALL_ROUNDER):
            team.add_player(pool.add(create_mock_player(role.value, role)))
        team.select_playing()
        assert team.batting_order() == [1, 2, 3]
        assert team.bowling_order(pool) == [2, 3]


class TestRankTeams:
    def test_sorted_by_points(self):
        teams = [create_mock_team("A", 2), create_mock_team("B", 6), create_mock_team("C", 4)]
        assert [t.name for t in rank_teams(teams)] == ["B", "C", "A"]

    def test_equal_points_keep_input_order(self):
        teams = [create_mock_team("A", 2), create_mock_team("B", 4), create_mock_team("C", 2), create_mock_team("D", 4)]
        assert [t.name for t in rank_teams(teams)] == ["B", "D", "A", "C"]

    def test_input_is_not_mutated(self):
        teams = [create_mock_team("A", 0), create_mock_team("B", 2)]
        rank_teams(teams)
        assert [t.name for t in teams] == ["A", "B"]
