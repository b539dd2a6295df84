"""
Team Generator - Creates the franchise teams for a tournament
"""
from typing import Optional

from powerplay.generators.player_generator import PlayerGenerator
from powerplay.models.player import PlayerPool
from powerplay.models.team import Team


FRANCHISE_TEAMS = [
    {
        "name": "Mumbai Titans",
        "short_name": "MT",
        "city": "Mumbai",
        "home_ground": "Wankhede Stadium",
    },
    {
        "name": "Chennai Kings",
        "short_name": "CK",
        "city": "Chennai",
        "home_ground": "M.A. Chidambaram Stadium",
    },
    {
        "name": "Bangalore Warriors",
        "short_name": "BW",
        "city": "Bangalore",
        "home_ground": "M. Chinnaswamy Stadium",
    },
    {
        "name": "Kolkata Knights",
        "short_name": "KK",
        "city": "Kolkata",
        "home_ground": "Eden Gardens",
    },
    {
        "name": "Delhi Capitals",
        "short_name": "DC",
        "city": "Delhi",
        "home_ground": "Arun Jaitley Stadium",
    },
    {
        "name": "Hyderabad Sunrisers",
        "short_name": "HS",
        "city": "Hyderabad",
        "home_ground": "Rajiv Gandhi Intl. Stadium",
    },
    {
        "name": "Rajasthan Royals",
        "short_name": "RR",
        "city": "Jaipur",
        "home_ground": "Sawai Mansingh Stadium",
    },
    {
        "name": "Punjab Lions",
        "short_name": "PL",
        "city": "Mohali",
        "home_ground": "PCA Stadium",
    },
]


class TeamGenerator:
    """Generates franchise teams with fielded squads"""

    @classmethod
    def create_teams(cls, count: int = 4) -> list[Team]:
        """
        Create the first `count` franchise teams, without players.
        """
        if not 2 <= count <= len(FRANCHISE_TEAMS):
            raise ValueError(f"Team count must be between 2 and {len(FRANCHISE_TEAMS)}, got {count}")
        return [Team(**team_data) for team_data in FRANCHISE_TEAMS[:count]]

    @classmethod
    def populate(
        cls,
        teams: list[Team],
        pool: PlayerPool,
        squad_size: int = 5,
        seed: Optional[int] = None,
    ) -> list[Team]:
        """Give every team a generated squad and field all of it"""
        generator = PlayerGenerator(seed=seed)
        for team in teams:
            for player in generator.generate_squad(squad_size):
                team.add_player(pool.add(player))
            team.select_playing(squad_size)
        return teams

    @classmethod
    def build_league(
        cls,
        count: int = 4,
        squad_size: int = 5,
        seed: Optional[int] = None,
    ) -> tuple[PlayerPool, list[Team]]:
        pool = PlayerPool()
        teams = cls.populate(cls.create_teams(count), pool, squad_size, seed)
        return pool, teams
