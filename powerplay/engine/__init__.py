from powerplay.engine.match_engine import MatchEngine, InningsSetup
from powerplay.engine.innings_engine import InningsEngine
from powerplay.engine.tournament_engine import TournamentEngine
from powerplay.engine.match_format import MatchFormat

__all__ = ["MatchEngine", "InningsSetup", "InningsEngine", "TournamentEngine", "MatchFormat"]
