"""
Aggregation helpers shared by the match and tournament engines.
"""
from typing import Iterable, Optional, Sequence

from powerplay.models.player import Player, CreditScope
from powerplay.models.team import Team


def best_player_by_credit(
    players: Iterable[Player],
    scope: CreditScope = CreditScope.MATCH,
) -> Optional[Player]:
    """
    Highest-credit player in iteration order.
    Strict comparison, so the first player seen keeps a tie.
    """
    best = None
    max_credits = -1
    for player in players:
        credits = player.credits(scope)
        if credits > max_credits:
            max_credits = credits
            best = player
    return best


def rank_teams(teams: Sequence[Team]) -> list[Team]:
    """Points descending. Equal points keep their input order."""
    return sorted(teams, key=lambda t: t.points, reverse=True)
