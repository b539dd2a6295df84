"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Dict, Optional
from datetime import date
from enum import Enum


# Enums
class PlayerRoleEnum(str, Enum):
    BATTER = "batter"
    BOWLER = "bowler"
    ALL_ROUNDER = "all_rounder"


class MatchResultEnum(str, Enum):
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"
    NO_RESULT = "no_result"


# Request Schemas
class FormatOverrides(BaseModel):
    squad_size: Optional[int] = Field(default=None, ge=2, le=11)
    max_wickets: Optional[int] = Field(default=None, ge=1)
    max_overs: Optional[int] = Field(default=None, ge=1, le=50)
    balls_per_over: Optional[int] = Field(default=None, ge=1, le=12)
    # "0".."6" for runs, "W" for a wicket
    outcome_weights: Optional[Dict[str, float]] = None


class PlayerIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    age: int = Field(default=25, ge=10, le=60)
    role: PlayerRoleEnum


class TeamIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    short_name: str = ""
    city: str = ""
    home_ground: str = "Home Ground"
    players: list[PlayerIn]


class InningsSetupIn(BaseModel):
    striker: Optional[str] = None
    non_striker: Optional[str] = None
    bowler: Optional[str] = None


class MatchSimulateRequest(BaseModel):
    # Generated teams are used when either side is omitted
    team_a: Optional[TeamIn] = None
    team_b: Optional[TeamIn] = None
    setup_a: Optional[InningsSetupIn] = None
    setup_b: Optional[InningsSetupIn] = None
    venue: Optional[str] = None
    match_format: Optional[FormatOverrides] = None
    seed: Optional[int] = None


class TournamentSimulateRequest(BaseModel):
    name: str = "Powerplay Cup"
    team_count: int = Field(default=4, ge=2, le=8)
    match_format: Optional[FormatOverrides] = None
    seed: Optional[int] = None
    start_date: Optional[date] = None


# Response Schemas
class BallEventResponse(BaseModel):
    innings: int
    ball: int
    over: int
    ball_in_over: int
    outcome: str
    runs: int
    is_wicket: bool
    batter: str
    bowler: str
    score: str
    commentary: str


class BatterScoreResponse(BaseModel):
    name: str
    runs: int
    balls: int
    fours: int
    sixes: int
    is_out: bool
    bowler: Optional[str] = None


class BowlerFiguresResponse(BaseModel):
    name: str
    overs: str
    runs: int
    wickets: int
    economy: float


class InningsSummaryResponse(BaseModel):
    innings: int
    batting_team: str
    bowling_team: str
    runs: int
    wickets: int
    overs: str
    score: str
    standout: Optional[str] = None
    batting: list[BatterScoreResponse]
    bowling: list[BowlerFiguresResponse]


class MatchSummaryResponse(BaseModel):
    match_number: int
    team_a: str
    team_b: str
    venue: str
    match_date: Optional[date] = None
    innings1: InningsSummaryResponse
    innings2: InningsSummaryResponse
    result: MatchResultEnum
    winner: Optional[str] = None
    result_text: str
    player_of_match: Optional[str] = None


class MatchSimulationResponse(BaseModel):
    summary: MatchSummaryResponse
    events: list[BallEventResponse]


# Standing Schemas
class StandingResponse(BaseModel):
    position: int
    team_name: str
    team_short_name: str
    played: int
    won: int
    lost: int
    tied: int
    no_result: int
    points: int


class PlayerStatsResponse(BaseModel):
    name: str
    team: str
    role: PlayerRoleEnum
    runs: int
    balls_faced: int
    wickets: int
    balls_bowled: int
    runs_conceded: int
    credits: int


class TournamentSimulationResponse(BaseModel):
    name: str
    matches: list[MatchSummaryResponse]
    points_table: list[StandingResponse]
    champion: Optional[str] = None
    player_of_tournament: Optional[str] = None
    players: list[PlayerStatsResponse]
