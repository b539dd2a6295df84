"""
Simulation configuration
"""
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_seed() -> Optional[int]:
    raw = os.getenv("RANDOM_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class SimulationSettings:
    """Simulation settings from environment variables"""

    # Match format
    SQUAD_SIZE: int = _get_env_int("SQUAD_SIZE", 5)
    MAX_WICKETS: int = _get_env_int("MAX_WICKETS", 2)
    MAX_OVERS: int = _get_env_int("MAX_OVERS", 2)
    BALLS_PER_OVER: int = _get_env_int("BALLS_PER_OVER", 6)

    # "runs:weight" pairs, W is the wicket
    OUTCOME_WEIGHTS: str = os.getenv("OUTCOME_WEIGHTS", "0:1,1:1,2:1,3:1,4:1,6:1,W:1")

    # Unset means a fresh seed per run
    RANDOM_SEED: Optional[int] = _get_env_seed()

    # Tournament
    TEAM_COUNT: int = _get_env_int("TEAM_COUNT", 4)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")


settings = SimulationSettings()
