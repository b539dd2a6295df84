"""
Match API endpoints - one-off simulations, nothing is stored
"""
from fastapi import APIRouter, HTTPException
from typing import Optional

from powerplay.commentary import describe_ball
from powerplay.engine.match_engine import InningsSetup, MatchEngine
from powerplay.engine.match_format import MatchFormat, parse_outcome_weights
from powerplay.exceptions import ConfigurationError
from powerplay.generators import TeamGenerator, PlayerGenerator
from powerplay.models.match import BallEvent, InningsSummary, MatchSummary
from powerplay.models.player import Player, PlayerPool, PlayerRole
from powerplay.models.team import Team
from powerplay.api.schemas import (
    BallEventResponse, BatterScoreResponse, BowlerFiguresResponse, FormatOverrides,
    InningsSetupIn, InningsSummaryResponse, MatchSimulateRequest, MatchSimulationResponse,
    MatchSummaryResponse, TeamIn,
)

router = APIRouter(prefix="/match", tags=["Match"])


def build_format(overrides: Optional[FormatOverrides]) -> MatchFormat:
    """Default format from settings with the request's overrides applied"""
    fmt = MatchFormat.from_settings()
    if overrides is None:
        return fmt
    weights = None
    if overrides.outcome_weights:
        raw = ",".join(f"{symbol}:{weight}" for symbol, weight in overrides.outcome_weights.items())
        weights = parse_outcome_weights(raw)
    return fmt.with_overrides(
        squad_size=overrides.squad_size,
        max_wickets=overrides.max_wickets,
        max_overs=overrides.max_overs,
        balls_per_over=overrides.balls_per_over,
        outcome_weights=weights,
    )


def _team_from_request(data: TeamIn, pool: PlayerPool, squad_size: int) -> Team:
    team = Team(
        name=data.name,
        short_name=data.short_name or data.name[:3].upper(),
        city=data.city,
        home_ground=data.home_ground,
    )
    for p in data.players:
        team.add_player(pool.add(Player(name=p.name, age=p.age, role=PlayerRole(p.role.value))))
    team.select_playing(squad_size)
    return team


def _setup(data: Optional[InningsSetupIn]) -> Optional[InningsSetup]:
    if data is None:
        return None
    return InningsSetup(striker=data.striker, non_striker=data.non_striker, bowler=data.bowler)


def _name(pool: PlayerPool, player_id: Optional[int]) -> Optional[str]:
    return pool.get(player_id).name if player_id is not None else None


def ball_event_response(event: BallEvent, pool: PlayerPool) -> BallEventResponse:
    return BallEventResponse(
        innings=event.innings_number,
        ball=event.ball_number,
        over=event.over_number,
        ball_in_over=event.ball_in_over,
        outcome=str(event.outcome),
        runs=event.runs,
        is_wicket=event.is_wicket,
        batter=pool.get(event.striker_id).name,
        bowler=pool.get(event.bowler_id).name,
        score=event.score_line,
        commentary=describe_ball(event, pool),
    )


def innings_summary_response(summary: InningsSummary, pool: PlayerPool) -> InningsSummaryResponse:
    return InningsSummaryResponse(
        innings=summary.innings_number,
        batting_team=summary.batting_team,
        bowling_team=summary.bowling_team,
        runs=summary.runs,
        wickets=summary.wickets,
        overs=summary.overs,
        score=summary.score_line,
        standout=_name(pool, summary.standout_id),
        batting=[
            BatterScoreResponse(
                name=pool.get(b.player_id).name,
                runs=b.runs,
                balls=b.balls,
                fours=b.fours,
                sixes=b.sixes,
                is_out=b.is_out,
                bowler=_name(pool, b.bowler_id),
            )
            for b in summary.batters
        ],
        bowling=[
            BowlerFiguresResponse(
                name=pool.get(b.player_id).name,
                overs=b.overs,
                runs=b.runs,
                wickets=b.wickets,
                economy=b.economy,
            )
            for b in summary.bowlers
        ],
    )


def match_summary_response(summary: MatchSummary, pool: PlayerPool) -> MatchSummaryResponse:
    return MatchSummaryResponse(
        match_number=summary.match_number,
        team_a=summary.team_a,
        team_b=summary.team_b,
        venue=summary.venue,
        match_date=summary.match_date,
        innings1=innings_summary_response(summary.innings1, pool),
        innings2=innings_summary_response(summary.innings2, pool),
        result=summary.result.value,
        winner=summary.winner,
        result_text=summary.result_text,
        player_of_match=_name(pool, summary.standout_id),
    )


@router.post("/simulate", response_model=MatchSimulationResponse)
def simulate_match(request: MatchSimulateRequest):
    """
    Simulate one match ball by ball.
    Missing teams are generated from the seed.
    """
    try:
        fmt = build_format(request.match_format)
        pool = PlayerPool()
        generated = TeamGenerator.create_teams(2)
        generator = PlayerGenerator(seed=request.seed)

        teams = []
        for data, fallback in ((request.team_a, generated[0]), (request.team_b, generated[1])):
            if data is not None:
                teams.append(_team_from_request(data, pool, fmt.squad_size))
            else:
                for player in generator.generate_squad(fmt.squad_size):
                    fallback.add_player(pool.add(player))
                fallback.select_playing(fmt.squad_size)
                teams.append(fallback)
        team_a, team_b = teams

        engine = MatchEngine(pool, fmt, seed=request.seed)
        match = engine.create_match(team_a, team_b, venue=request.venue)
        events = list(engine.iter_match(match, team_a, team_b, _setup(request.setup_a), _setup(request.setup_b)))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MatchSimulationResponse(
        summary=match_summary_response(match.summary, pool),
        events=[ball_event_response(e, pool) for e in events],
    )
