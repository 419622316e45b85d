"""ABOUTME: CLI entry point for battlecoach commands.
ABOUTME: Provides analyze, bench, matchup, and weaknesses commands via Typer."""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from battlecoach.analysis import analyze_matchup, rank_bench
from battlecoach.config import ScoringWeights, load_scoring_config
from battlecoach.logs import init_logging
from battlecoach.models import Creature, SuggestionCategory
from battlecoach.settings import settings
from battlecoach.snapshot import BattleRecord, PokemonRecord, active_matchup, load_battle, load_party
from battlecoach.utils.type_chart import (
    TYPE_COLORS,
    ElementalType,
    UnknownTypeError,
    dual_type_effectiveness,
    get_immunities,
    get_neutral,
    get_resistances,
    get_weaknesses,
    parse_type,
)

app = typer.Typer(
    name="battlecoach",
    help="Type matchups and tactical battle suggestions from game snapshots.",
    no_args_is_help=True,
)

console = Console()

CATEGORY_STYLES: dict[SuggestionCategory, str] = {
    SuggestionCategory.SAFE: "bold #4caf50",
    SuggestionCategory.BALANCED: "bold #2196f3",
    SuggestionCategory.RISKY: "bold #f44336",
}


def _badge(elemental_type: ElementalType) -> str:
    """Coloured type label for Rich markup."""
    return f"[{TYPE_COLORS[elemental_type]}]{elemental_type.label}[/]"


def _badges(types: list[ElementalType]) -> str:
    return ", ".join(_badge(t) for t in types) if types else "-"


def _parse_types(raw_types: list[str]) -> list[ElementalType]:
    try:
        return [parse_type(raw) for raw in raw_types]
    except UnknownTypeError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _load_weights(config_path: Path | None) -> ScoringWeights:
    try:
        return load_scoring_config(config_path)
    except FileNotFoundError:
        if config_path is not None:
            console.print(f"[red]Error:[/] Scoring config not found: {config_path}")
            raise typer.Exit(1) from None
        return ScoringWeights()
    except ValidationError as e:
        console.print(f"[red]Invalid scoring config:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _load_snapshot(
    battle_path: Path, party_path: Path | None
) -> tuple[BattleRecord, tuple[Creature, Creature, list[Creature]] | None]:
    """Load the battle and party dumps, exiting with an error line on bad input."""
    try:
        battle = load_battle(battle_path)
        party: list[PokemonRecord] = load_party(party_path) if party_path else []
        return battle, active_matchup(battle, party)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Invalid snapshot:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.callback()
def main(
    log_config: Path | None = typer.Option(None, "--log-config", help="Logging config yaml file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analyzer details at DEBUG level"),
) -> None:
    """Type matchups and tactical battle suggestions from game snapshots."""
    config_path = log_config
    if config_path is None and verbose and settings.logging_config_path.exists():
        config_path = settings.logging_config_path
    if config_path is None:
        return

    try:
        init_logging(config_path, level="DEBUG" if verbose else None)
    except FileNotFoundError:
        console.print(f"[red]Error:[/] Logging config not found: {config_path}")
        raise typer.Exit(1) from None
    except ValueError as e:
        console.print(f"[red]Invalid logging config:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def analyze(
    battle_file: Path = typer.Argument(..., help="JSON dump of the battle endpoint"),
    party_file: Path | None = typer.Option(None, "--party", "-p", help="JSON dump of the party endpoint"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Scoring config yaml file"),
) -> None:
    """Print Safe/Balanced/Risky suggestions for the current battle."""
    weights = _load_weights(config)
    battle, snapshot = _load_snapshot(battle_file, party_file)

    if snapshot is None:
        reason = escape(battle.error or "no active battle with typed creatures on both sides")
        console.print(f"[yellow]Nothing to analyze:[/] {reason}")
        return

    active_player, active_opponent, roster = snapshot
    console.print(
        f"[bold]{active_player.species}[/] ({_badges(list(active_player.types))}) "
        f"vs [bold]{active_opponent.species}[/] ({_badges(list(active_opponent.types))})"
    )
    for suggestion in analyze_matchup(active_player, active_opponent, roster, weights):
        style = CATEGORY_STYLES[suggestion.category]
        console.print(f"{suggestion.icon} [{style}]{suggestion.category.value.upper()}[/] {suggestion.title}")
        console.print(f"   {suggestion.description}")


@app.command()
def bench(
    battle_file: Path = typer.Argument(..., help="JSON dump of the battle endpoint"),
    party_file: Path = typer.Option(..., "--party", "-p", help="JSON dump of the party endpoint"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Scoring config yaml file"),
) -> None:
    """Print every bench member's switch score against the active opponent."""
    weights = _load_weights(config)
    _battle, snapshot = _load_snapshot(battle_file, party_file)

    if snapshot is None:
        console.print("[yellow]Nothing to analyze:[/] no active battle with typed creatures on both sides")
        return

    active_player, active_opponent, roster = snapshot
    df = rank_bench(active_player, active_opponent, roster, weights)
    if df.is_empty():
        console.print("[yellow]No bench members with type data.[/]")
        return

    table = Table(title=f"Bench vs {active_opponent.species}")
    for column in ("species", "hp", "incoming", "best_move", "outgoing", "score"):
        table.add_column(column)
    for row in df.iter_rows(named=True):
        style = None if row["eligible"] else "dim"
        table.add_row(
            row["species"],
            f"{row['hp']}/{row['max_hp']}",
            f"{row['incoming']:g}x",
            row["best_move"] or "-",
            f"{row['outgoing']:g}x",
            str(row["score"]),
            style=style,
        )
    console.print(table)


@app.command()
def matchup(
    attacking: str = typer.Argument(..., help="Attacking type"),
    defending: list[str] = typer.Argument(..., help="One or two defending types"),
) -> None:
    """Print the multiplier of an attacking type against one or two defending types."""
    atk_type = _parse_types([attacking])[0]
    def_types = _parse_types(defending)
    try:
        multiplier = dual_type_effectiveness(atk_type, def_types)
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    console.print(f"{_badge(atk_type)} -> {_badges(def_types)}: [bold]{multiplier:g}x[/]")


@app.command()
def weaknesses(
    types: list[str] = typer.Argument(..., help="One or two defending types"),
) -> None:
    """Print the defensive profile of a typing, from weaknesses to neutral matchups."""
    def_types = _parse_types(types)
    if len(def_types) > 2:  # noqa: PLR2004
        console.print("[red]Error:[/] at most two types")
        raise typer.Exit(1)

    console.print(f"[bold]Weak to:[/] {_badges(get_weaknesses(def_types))}")
    console.print(f"[bold]Resists:[/] {_badges(get_resistances(def_types))}")
    console.print(f"[bold]Immune to:[/] {_badges(get_immunities(def_types))}")
    console.print(f"[bold]Neutral:[/] {_badges(get_neutral(def_types))}")


if __name__ == "__main__":
    app()
