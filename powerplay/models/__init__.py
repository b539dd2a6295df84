from powerplay.models.player import Player, PlayerPool, PlayerRole, CreditScope, BattingRecord, BowlingRecord
from powerplay.models.match import (
    Match, MatchResult, MatchStatus, MatchSummary, InningsSummary, InningsStatus,
    BallEvent, BatterScore, BowlerFigures, WICKET,
)
from powerplay.models.team import Team

__all__ = [
    "Player",
    "PlayerPool",
    "PlayerRole",
    "CreditScope",
    "BattingRecord",
    "BowlingRecord",
    "Team",
    "Match",
    "MatchResult",
    "MatchStatus",
    "MatchSummary",
    "InningsSummary",
    "InningsStatus",
    "BallEvent",
    "BatterScore",
    "BowlerFigures",
    "WICKET",
]
