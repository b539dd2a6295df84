#!/usr/bin/env python3
"""
CLI for the Powerplay Cup cricket tournament simulation
"""
import logging
import random
from collections import Counter, defaultdict
from functools import wraps

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich.progress import track

from powerplay.commentary import ball_line, standout_name
from powerplay.config import settings
from powerplay.engine import MatchEngine, TournamentEngine, MatchFormat
from powerplay.exceptions import ConfigurationError
from powerplay.generators import TeamGenerator
from powerplay.models.match import MatchSummary, InningsSummary
from powerplay.models.player import PlayerPool

console = Console()


def format_options(func):
    """Match format and seed options shared by every simulation command"""
    @click.option("--seed", type=int, default=settings.RANDOM_SEED, help="Seed for teams and outcomes")
    @click.option("--squad-size", type=int, default=None, help="Players per side")
    @click.option("--max-wickets", type=int, default=None, help="Wickets that end an innings")
    @click.option("--max-overs", type=int, default=None, help="Overs per innings")
    @click.option("--balls-per-over", type=int, default=None, help="Balls per over")
    @wraps(func)
    def wrapper(seed, squad_size, max_wickets, max_overs, balls_per_over, **kwargs):
        try:
            fmt = MatchFormat.from_settings().with_overrides(
                squad_size=squad_size,
                max_wickets=max_wickets,
                max_overs=max_overs,
                balls_per_over=balls_per_over,
            )
        except ConfigurationError as e:
            raise click.BadParameter(str(e))
        return func(fmt=fmt, seed=seed, **kwargs)
    return wrapper


@click.group()
@click.option("--verbose", "-v", count=True, help="-v for engine info, -vv for every ball")
def cli(verbose: int):
    """Powerplay Cup - Miniature Cricket Tournament Simulation"""
    level = {0: settings.LOG_LEVEL, 1: "INFO"}.get(verbose, "DEBUG")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command()
@format_options
@click.option("--commentary/--no-commentary", default=True, help="Print every ball")
def play_match(fmt: MatchFormat, seed, commentary: bool):
    """Generate two teams and simulate one match"""
    pool, teams = TeamGenerator.build_league(2, fmt.squad_size, seed=seed)
    team_a, team_b = teams

    for team, style in ((team_a, "cyan"), (team_b, "magenta")):
        console.print(Panel(f"[bold {style}]{team.name}[/bold {style}]"))
        for p in pool.many(team.playing):
            console.print(f"  {p.name} ({p.role.value}), age {p.age}")

    engine = MatchEngine(pool, fmt, seed=seed)
    match = engine.create_match(team_a, team_b)
    console.print(f"\n[bold]{team_a.name} vs {team_b.name}[/bold] at {match.venue}\n")

    try:
        current_innings = 0
        for event in engine.iter_match(match, team_a, team_b):
            if event.innings_number != current_innings:
                current_innings = event.innings_number
                batting = team_a if current_innings == 1 else team_b
                console.print(f"[yellow]=== Innings {current_innings}: {batting.name} batting ===[/yellow]")
            if commentary:
                console.print(ball_line(event, pool))
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    _print_match_summary(match.summary, pool)
    _print_scorecard(match.summary.innings1, pool, fmt)
    _print_scorecard(match.summary.innings2, pool, fmt)


def _print_match_summary(summary: MatchSummary, pool: PlayerPool):
    console.print(Panel(f"[bold]Match {summary.match_number} Summary[/bold]"))
    console.print(f"[cyan]{summary.team_a}:[/cyan] {summary.innings1.score_line}")
    console.print(f"[magenta]{summary.team_b}:[/magenta] {summary.innings2.score_line}")
    console.print(f"[bold green]Result: {summary.result_text}[/bold green]")
    console.print(f"[bold]Player of the Match:[/bold] {standout_name(summary, pool)}\n")


def _print_scorecard(innings: InningsSummary, pool: PlayerPool, fmt: MatchFormat):
    """Print innings scorecard"""
    bat_table = Table(title=f"{innings.batting_team} Batting")
    bat_table.add_column("Batter", style="cyan")
    bat_table.add_column("Dismissal")
    bat_table.add_column("R", justify="right")
    bat_table.add_column("B", justify="right")
    bat_table.add_column("4s", justify="right")
    bat_table.add_column("6s", justify="right")

    for b in innings.batters:
        dismissal = f"b {pool.get(b.bowler_id).name}" if b.is_out else "not out"
        bat_table.add_row(
            pool.get(b.player_id).name,
            dismissal,
            str(b.runs),
            str(b.balls),
            str(b.fours),
            str(b.sixes),
        )
    console.print(bat_table)

    bowl_table = Table(title=f"{innings.bowling_team} Bowling")
    bowl_table.add_column("Bowler", style="magenta")
    bowl_table.add_column("O", justify="right")
    bowl_table.add_column("R", justify="right")
    bowl_table.add_column("W", justify="right")
    bowl_table.add_column("Econ", justify="right")

    for b in innings.bowlers:
        bowl_table.add_row(
            pool.get(b.player_id).name,
            b.overs,
            str(b.runs),
            str(b.wickets),
            f"{b.economy:.1f}",
        )
    console.print(bowl_table)


@cli.command()
@format_options
@click.option("--teams", "team_count", default=settings.TEAM_COUNT, help="Number of teams (2-8)")
@click.option("--name", default="Powerplay Cup", help="Tournament name")
@click.option("--commentary/--no-commentary", default=False, help="Print every ball")
def tournament(fmt: MatchFormat, seed, team_count: int, name: str, commentary: bool):
    """Play a full round-robin tournament"""
    try:
        pool, teams = TeamGenerator.build_league(team_count, fmt.squad_size, seed=seed)
    except ValueError as e:
        raise click.BadParameter(str(e))

    engine = TournamentEngine(name, pool, teams, fmt, seed=seed)
    fixtures = engine.generate_fixtures()

    console.print(Panel(f"[bold cyan]{name}[/bold cyan]"))
    for team in teams:
        console.print(f"  {team.name} ({len(team.playing)} players)")
    console.print(f"\n[yellow]{len(fixtures)} fixtures[/yellow]\n")

    for summary in engine.play_all():
        if commentary:
            fixture = engine.fixtures[summary.match_number - 1]
            for event in fixture.match.events:
                console.print(ball_line(event, pool))
        _print_match_summary(summary, pool)

    _print_player_stats(engine)
    _print_points_table(engine)

    champion = engine.get_champion()
    best = engine.get_player_of_tournament()
    console.print(Panel("[bold]Tournament Awards[/bold]"))
    console.print(f"[bold green]Champion:[/bold green] {champion.name if champion else '-'}")
    console.print(f"[bold]Player of the Tournament:[/bold] {best.name if best else '-'}")


def _print_player_stats(engine: TournamentEngine):
    table = Table(title="Player Statistics")
    table.add_column("Name", style="cyan")
    table.add_column("Team")
    table.add_column("Role")
    table.add_column("Runs", justify="right")
    table.add_column("Balls", justify="right")
    table.add_column("SR", justify="right")
    table.add_column("Wkts", justify="right")
    table.add_column("Econ", justify="right")
    table.add_column("Credits", justify="right", style="green")

    bpo = engine.fmt.balls_per_over
    for team in engine.teams:
        for p in engine.pool.many(team.roster):
            table.add_row(
                p.name,
                team.short_name,
                p.role.value,
                str(p.career_batting.runs),
                str(p.career_batting.balls),
                f"{p.career_batting.strike_rate:.1f}",
                str(p.career_bowling.wickets),
                f"{p.career_bowling.economy(bpo):.1f}",
                str(p.career_credits),
            )
    console.print(table)


def _print_points_table(engine: TournamentEngine):
    table = Table(title="Points Table")
    table.add_column("#", justify="right")
    table.add_column("Team", style="cyan")
    table.add_column("P", justify="right")
    table.add_column("W", justify="right")
    table.add_column("L", justify="right")
    table.add_column("T", justify="right")
    table.add_column("Pts", justify="right", style="green")

    for s in engine.get_points_table():
        table.add_row(
            str(s.position),
            s.team.name,
            str(s.played),
            str(s.won),
            str(s.lost),
            str(s.tied),
            str(s.points),
        )
    console.print(table)


@cli.command()
@format_options
@click.option("--matches", default=500, help="Number of matches to simulate")
def benchmark(fmt: MatchFormat, seed, matches: int):
    """Run many simulations and report score statistics"""
    rng = random.Random(seed)
    stats = defaultdict(list)
    end_reasons = Counter()

    console.print(f"[yellow]Running {matches} simulations...[/yellow]")

    for _ in track(range(matches), description="Simulating..."):
        match_seed = rng.randrange(2**32)
        pool, teams = TeamGenerator.build_league(2, fmt.squad_size, seed=match_seed)
        engine = MatchEngine(pool, fmt, seed=match_seed)
        match = engine.create_match(*teams)
        summary = engine.play_match(match, *teams)

        for innings_engine, innings in ((engine.innings1, summary.innings1), (engine.innings2, summary.innings2)):
            stats["scores"].append(innings.runs)
            stats["wickets"].append(innings.wickets)
            stats["balls"].append(innings_engine.state.total_balls)
            if innings_engine.state.batters_exhausted:
                end_reasons["out of batters"] += 1
            elif innings.wickets >= fmt.max_wickets:
                end_reasons["wickets"] += 1
            else:
                end_reasons["overs"] += 1
        stats["ties"].append(1 if summary.winner is None else 0)

    console.print(Panel("[bold]Simulation Statistics[/bold]"))

    scores = stats["scores"]
    console.print(f"[cyan]Average Score:[/cyan] {sum(scores) / len(scores):.1f}")
    console.print(f"[cyan]Min Score:[/cyan] {min(scores)}")
    console.print(f"[cyan]Max Score:[/cyan] {max(scores)}")
    console.print(f"[cyan]Average Wickets:[/cyan] {sum(stats['wickets']) / len(stats['wickets']):.2f}")
    console.print(f"[cyan]Average Innings Length:[/cyan] {sum(stats['balls']) / len(stats['balls']):.1f} balls")
    console.print(f"[cyan]Tie %:[/cyan] {sum(stats['ties']) / len(stats['ties']) * 100:.1f}%")

    console.print("\n[bold]Innings ended by:[/bold]")
    total = sum(end_reasons.values())
    for reason, count in end_reasons.most_common():
        pct = count / total * 100
        bar = "█" * int(pct / 2)
        console.print(f"  {reason:>15}: {bar} {pct:.1f}%")


if __name__ == "__main__":
    cli()
