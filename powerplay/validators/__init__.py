from powerplay.validators.lineup_validator import LineupValidator

__all__ = ["LineupValidator"]
