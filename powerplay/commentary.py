"""
Ball-by-ball commentary for presentation layers
"""
from powerplay.models.match import BallEvent, MatchSummary
from powerplay.models.player import PlayerPool


RUNS_COMMENTARY = {
    0: "Dot ball. {batter} defends.",
    1: "Single. {batter} takes a quick run.",
    2: "Two runs. {batter} pushes for a couple.",
    3: "Three runs. {batter} runs hard for three.",
    4: "FOUR! {batter} finds the boundary!",
    6: "SIX! {batter} hits it out of the park!",
}


def describe_ball(event: BallEvent, pool: PlayerPool) -> str:
    batter = pool.get(event.striker_id).name
    bowler = pool.get(event.bowler_id).name
    if event.is_wicket:
        return f"WICKET! {batter} is out, bowled by {bowler}."
    template = RUNS_COMMENTARY.get(event.runs, "{runs} runs to {batter}.")
    return template.format(batter=batter, runs=event.runs)


def ball_line(event: BallEvent, pool: PlayerPool) -> str:
    return f"Ball {event.ball_number}: {describe_ball(event, pool)} Score: {event.score_line}"


def standout_name(summary: MatchSummary, pool: PlayerPool) -> str:
    if summary.standout_id is None:
        return "-"
    return pool.get(summary.standout_id).name
