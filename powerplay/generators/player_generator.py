import random
from typing import Optional
from faker import Faker

from powerplay.models.player import Player, PlayerRole


class PlayerGenerator:
    """Generates fictional cricketers with a role and an age"""

    # Role distribution for players beyond the core five
    ROLE_WEIGHTS = {
        PlayerRole.BATTER: 40,
        PlayerRole.BOWLER: 35,
        PlayerRole.ALL_ROUNDER: 25,
    }

    # Batting order position by role
    ROLE_ORDER = {
        PlayerRole.BATTER: 0,
        PlayerRole.ALL_ROUNDER: 1,
        PlayerRole.BOWLER: 2,
    }

    def __init__(self, seed: Optional[int] = None, locale: str = "en_IN"):
        self.rng = random.Random(seed)
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    def _weighted_choice(self, choices: list[tuple]):
        """Select from weighted choices [(item, weight), ...]"""
        items = [c[0] for c in choices]
        weights = [c[1] for c in choices]
        return self.rng.choices(items, weights=weights, k=1)[0]

    def squad_roles(self, squad_size: int) -> list[PlayerRole]:
        """
        Roles for a squad with at least 2 batting and 2 bowling options,
        ordered batters first, bowlers last.
        """
        if squad_size < 2:
            raise ValueError(f"Squad size must be at least 2, got {squad_size}")
        if squad_size == 2:
            roles = [PlayerRole.ALL_ROUNDER, PlayerRole.ALL_ROUNDER]
        elif squad_size < 5:
            roles = [PlayerRole.BATTER] + [PlayerRole.ALL_ROUNDER] * (squad_size - 2) + [PlayerRole.BOWLER]
        else:
            roles = [
                PlayerRole.BATTER,
                PlayerRole.BATTER,
                PlayerRole.ALL_ROUNDER,
                PlayerRole.BOWLER,
                PlayerRole.BOWLER,
            ]
            for _ in range(squad_size - 5):
                roles.append(self._weighted_choice(list(self.ROLE_WEIGHTS.items())))
        return sorted(roles, key=lambda r: self.ROLE_ORDER[r])

    def generate_player(self, role: Optional[PlayerRole] = None, taken_names: Optional[set] = None) -> Player:
        """
        Generate a single player.

        Args:
            role: Specific role, or weighted random if None
            taken_names: Names already used in the side; the new name avoids them
        """
        if role is None:
            role = self._weighted_choice(list(self.ROLE_WEIGHTS.items()))

        taken_names = taken_names or set()
        name = self.fake.name_male()
        while name in taken_names:
            name = self.fake.name_male()

        return Player(
            name=name,
            age=self.rng.randint(18, 38),
            role=role,
        )

    def generate_squad(self, squad_size: int) -> list[Player]:
        players = []
        names = set()
        for role in self.squad_roles(squad_size):
            player = self.generate_player(role, taken_names=names)
            names.add(player.name)
            players.append(player)
        return players
