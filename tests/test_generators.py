"""
Pytest tests for player and team generation.

Run with: pytest tests/test_generators.py -v
"""
import pytest

from powerplay.generators import PlayerGenerator, TeamGenerator
from powerplay.models.player import PlayerRole
from powerplay.validators import LineupValidator


class TestPlayerGenerator:
    """Generated squads are always playable"""

    @pytest.mark.parametrize("squad_size", range(2, 12))
    def test_squads_pass_lineup_validation(self, squad_size):
        squad = PlayerGenerator(seed=squad_size).generate_squad(squad_size)
        result = LineupValidator.validate(squad, squad_size)
        assert result["valid"], result["errors"]

    def test_batters_before_bowlers(self):
        roles = PlayerGenerator(seed=1).squad_roles(5)
        assert roles == [
            PlayerRole.BATTER,
            PlayerRole.BATTER,
            PlayerRole.ALL_ROUNDER,
            PlayerRole.BOWLER,
            PlayerRole.BOWLER,
        ]

    def test_two_player_squad(self):
        assert PlayerGenerator().squad_roles(2) == [PlayerRole.ALL_ROUNDER, PlayerRole.ALL_ROUNDER]

    def test_squad_too_small(self):
        with pytest.raises(ValueError):
            PlayerGenerator().squad_roles(1)

    def test_player_fields(self):
        player = PlayerGenerator(seed=3).generate_player(PlayerRole.BOWLER)
        assert player.role == PlayerRole.BOWLER
        assert 18 <= player.age <= 38
        assert player.name
        assert player.id is None

    def test_avoids_taken_names(self):
        generator = PlayerGenerator(seed=9)
        first = generator.generate_player()
        second = PlayerGenerator(seed=9).generate_player(taken_names={first.name})
        assert second.name != first.name

    def test_seeded_generation_is_reproducible(self):
        first = [(p.name, p.age, p.role) for p in PlayerGenerator(seed=21).generate_squad(8)]
        second = [(p.name, p.age, p.role) for p in PlayerGenerator(seed=21).generate_squad(8)]
        assert first == second


class TestTeamGenerator:
    def test_create_teams(self):
        teams = TeamGenerator.create_teams(4)
        assert [t.short_name for t in teams] == ["MT", "CK", "BW", "KK"]
        assert all(t.roster == [] for t in teams)

    @pytest.mark.parametrize("count", [1, 9])
    def test_team_count_bounds(self, count):
        with pytest.raises(ValueError):
            TeamGenerator.create_teams(count)

    def test_build_league(self):
        pool, teams = TeamGenerator.build_league(3, 6, seed=4)
        assert len(pool) == 18
        for team in teams:
            assert team.squad_size == 6
            assert team.playing == team.roster
            names = [p.name for p in pool.many(team.playing)]
            assert len(set(names)) == len(names)
