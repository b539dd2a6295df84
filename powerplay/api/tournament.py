"""
Tournament API endpoints - generate teams, play the round robin, report standings
"""
from fastapi import APIRouter, HTTPException

from powerplay.engine.tournament_engine import TournamentEngine
from powerplay.exceptions import ConfigurationError
from powerplay.generators import TeamGenerator
from powerplay.api.match import build_format, match_summary_response
from powerplay.api.schemas import (
    PlayerStatsResponse, StandingResponse, TournamentSimulateRequest, TournamentSimulationResponse,
)

router = APIRouter(prefix="/tournament", tags=["Tournament"])


@router.post("/simulate", response_model=TournamentSimulationResponse)
def simulate_tournament(request: TournamentSimulateRequest):
    """Play a full round robin between generated teams"""
    try:
        fmt = build_format(request.match_format)
        pool, teams = TeamGenerator.build_league(request.team_count, fmt.squad_size, seed=request.seed)
        tournament = TournamentEngine(
            request.name, pool, teams, fmt, seed=request.seed, start_date=request.start_date,
        )
        summaries = list(tournament.play_all())
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    champion = tournament.get_champion()
    best = tournament.get_player_of_tournament()

    players = []
    for team in teams:
        for player in pool.many(team.roster):
            players.append(PlayerStatsResponse(
                name=player.name,
                team=team.name,
                role=player.role.value,
                runs=player.career_batting.runs,
                balls_faced=player.career_batting.balls,
                wickets=player.career_bowling.wickets,
                balls_bowled=player.career_bowling.balls,
                runs_conceded=player.career_bowling.runs,
                credits=player.career_credits,
            ))

    return TournamentSimulationResponse(
        name=tournament.name,
        matches=[match_summary_response(s, pool) for s in summaries],
        points_table=[
            StandingResponse(
                position=s.position,
                team_name=s.team.name,
                team_short_name=s.team.short_name,
                played=s.played,
                won=s.won,
                lost=s.lost,
                tied=s.tied,
                no_result=s.no_result,
                points=s.points,
            )
            for s in tournament.get_points_table()
        ],
        champion=champion.name if champion else None,
        player_of_tournament=best.name if best else None,
        players=players,
    )
