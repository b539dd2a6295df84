from powerplay.models.player import Player, PlayerRole


class LineupValidator:
    @staticmethod
    def validate(players: list[Player], squad_size: int = 5) -> dict:
        """
        Validate a fielded side.

        Rules:
        1. Exactly `squad_size` players
        2. At least 2 players who can bowl
        3. At least 2 players who can bat
        4. No two players share a name
        """
        errors = []

        if len(players) != squad_size:
            errors.append(f"Must field exactly {squad_size} players, got {len(players)}")

        bowling_options = sum(1 for p in players if p.can_bowl)
        if bowling_options < 2:
            errors.append(f"Need at least 2 bowling options, got {bowling_options}")

        batting_options = sum(1 for p in players if p.can_bat)
        if batting_options < 2:
            errors.append(f"Need at least 2 batting options, got {batting_options}")

        names = [p.name for p in players]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            errors.append(f"Player names must be unique within a side: {', '.join(duplicates)}")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "breakdown": {
                "batters": sum(1 for p in players if p.role == PlayerRole.BATTER),
                "bowlers": sum(1 for p in players if p.role == PlayerRole.BOWLER),
                "all_rounders": sum(1 for p in players if p.role == PlayerRole.ALL_ROUNDER),
            }
        }
