"""
Match format - every tunable number the engines read.

A format is built once (usually from settings, optionally overridden from
the CLI or an API request) and validated before any innings is created.
"""
from dataclasses import dataclass, field, replace
from typing import Dict

from powerplay.exceptions import ConfigurationError
from powerplay.models.match import WICKET, Outcome


# Uniform over 0, 1, 2, 3, 4, 6 and a wicket. 5 is not a scoring shot here.
DEFAULT_OUTCOME_WEIGHTS: Dict[Outcome, float] = {
    0: 1.0,
    1: 1.0,
    2: 1.0,
    3: 1.0,
    4: 1.0,
    6: 1.0,
    WICKET: 1.0,
}


def parse_outcome_weights(raw: str) -> Dict[Outcome, float]:
    """
    Parse "0:1,1:1,4:0.5,W:1" into an outcome -> weight mapping.
    """
    weights: Dict[Outcome, float] = {}
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        symbol, sep, weight = chunk.partition(":")
        if not sep:
            raise ConfigurationError(f"Outcome weight '{chunk}' must look like 'runs:weight'")
        symbol = symbol.strip().upper()
        try:
            outcome: Outcome = WICKET if symbol == WICKET else int(symbol)
            weights[outcome] = float(weight)
        except ValueError:
            raise ConfigurationError(f"Cannot parse outcome weight '{chunk}'") from None
    return weights


@dataclass
class MatchFormat:
    squad_size: int = 5
    max_wickets: int = 2
    max_overs: int = 2
    balls_per_over: int = 6
    outcome_weights: Dict[Outcome, float] = field(
        default_factory=lambda: dict(DEFAULT_OUTCOME_WEIGHTS)
    )

    @property
    def max_balls(self) -> int:
        return self.max_overs * self.balls_per_over

    @property
    def outcome_probabilities(self) -> Dict[Outcome, float]:
        total = sum(self.outcome_weights.values())
        return {outcome: weight / total for outcome, weight in self.outcome_weights.items()}

    def overs_display(self, balls: int) -> str:
        return f"{balls // self.balls_per_over}.{balls % self.balls_per_over}"

    def validate(self) -> "MatchFormat":
        errors = []
        if self.squad_size < 2:
            errors.append(f"squad_size must be at least 2, got {self.squad_size}")
        if self.max_wickets < 1:
            errors.append(f"max_wickets must be at least 1, got {self.max_wickets}")
        if self.max_overs < 1:
            errors.append(f"max_overs must be at least 1, got {self.max_overs}")
        if self.balls_per_over < 1:
            errors.append(f"balls_per_over must be at least 1, got {self.balls_per_over}")
        if self.squad_size < self.max_wickets + 1:
            errors.append(
                f"squad_size {self.squad_size} cannot cover {self.max_wickets} wickets "
                f"(need at least {self.max_wickets + 1} batters)"
            )

        if not self.outcome_weights:
            errors.append("outcome_weights must not be empty")
        for outcome, weight in self.outcome_weights.items():
            if outcome != WICKET and (not isinstance(outcome, int) or outcome < 0):
                errors.append(f"Outcome {outcome!r} is neither a run count nor a wicket")
            if weight < 0:
                errors.append(f"Outcome {outcome!r} has negative weight {weight}")
        if self.outcome_weights and sum(self.outcome_weights.values()) <= 0:
            errors.append("outcome_weights must have a positive total")

        if errors:
            raise ConfigurationError("; ".join(errors))
        return self

    def with_overrides(self, **overrides) -> "MatchFormat":
        """Copy with the non-None overrides applied"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    @classmethod
    def from_settings(cls, settings=None) -> "MatchFormat":
        if settings is None:
            from powerplay.config import settings
        return cls(
            squad_size=settings.SQUAD_SIZE,
            max_wickets=settings.MAX_WICKETS,
            max_overs=settings.MAX_OVERS,
            balls_per_over=settings.BALLS_PER_OVER,
            outcome_weights=parse_outcome_weights(settings.OUTCOME_WEIGHTS),
        ).validate()
