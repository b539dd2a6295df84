"""
Ball outcome sources.

The innings engine never touches the random module directly. It asks an
outcome source for the next ball, so a whole match can be replayed from a
seed or from a fixed script.
"""
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from powerplay.exceptions import ConfigurationError, ScriptExhaustedError
from powerplay.models.match import WICKET, Outcome


@dataclass(frozen=True)
class BallOutcome:
    """Result of a single ball"""
    runs: int = 0
    is_wicket: bool = False

    @property
    def is_boundary(self) -> bool:
        return self.runs in (4, 6)

    @property
    def is_six(self) -> bool:
        return self.runs == 6

    @classmethod
    def from_symbol(cls, symbol: Outcome) -> "BallOutcome":
        if isinstance(symbol, str):
            if symbol.upper() != WICKET:
                raise ConfigurationError(f"Unknown outcome symbol {symbol!r}")
            return cls(runs=0, is_wicket=True)
        if symbol < 0:
            raise ConfigurationError(f"Runs cannot be negative, got {symbol}")
        return cls(runs=int(symbol))


class RandomOutcomeSource:
    """
    Weighted draw over the outcome distribution.
    Seed it once per match or tournament, never per ball.
    """

    def __init__(self, weights: Dict[Outcome, float], rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if not weights or sum(weights.values()) <= 0:
            raise ConfigurationError("Outcome distribution needs at least one positive weight")
        self._symbols: List[Outcome] = list(weights.keys())
        self._weights: List[float] = list(weights.values())
        self.rng = rng if rng is not None else random.Random(seed)

    def next_outcome(self) -> BallOutcome:
        symbol = self.rng.choices(self._symbols, weights=self._weights, k=1)[0]
        return BallOutcome.from_symbol(symbol)


class ScriptedOutcomeSource:
    """Replays a fixed outcome sequence, e.g. [4, 1, 0, "W"]"""

    def __init__(self, script: Iterable[Outcome]):
        self._outcomes = [BallOutcome.from_symbol(s) for s in script]
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._outcomes) - self._position

    def next_outcome(self) -> BallOutcome:
        if self._position >= len(self._outcomes):
            raise ScriptExhaustedError(f"Script ran out after {len(self._outcomes)} balls")
        outcome = self._outcomes[self._position]
        self._position += 1
        return outcome
