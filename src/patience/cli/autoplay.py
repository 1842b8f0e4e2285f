"""CLI command for letting the advisor play whole games."""

from __future__ import annotations

import json
import logging
import sys

import click

from patience.playtest.autoplay import autoplay
from patience.playtest.display import StateRenderer
from patience.playtest.session import GameSession, SessionConfig
from patience.rules.defaults import RULE_SETS
from patience.rules.serialization import load_rules
from patience.rules.validation import RuleConfigError

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Seed of the first game (later games use seed+1, seed+2, ...)")
@click.option("-n", "--games", type=int, default=1, help="Number of games to play")
@click.option("--max-steps", type=int, default=1000, help="Move limit per game")
@click.option("--rules", "rules_path", type=click.Path(exists=True), default=None, help="Rules JSON file")
@click.option(
    "--variant",
    type=click.Choice(sorted(RULE_SETS)),
    default="klondike",
    help="Built-in rule set (ignored with --rules)",
)
@click.option("--show-moves", is_flag=True, help="Print every move with its explanation")
@click.option("--check-invariants", is_flag=True, help="Verify state invariants after every move")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    games: int,
    max_steps: int,
    rules_path: str | None,
    variant: str,
    show_moves: bool,
    check_invariants: bool,
    verbose: bool,
):
    """Play games by always applying the suggested move, then report outcomes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        rules = load_rules(rules_path) if rules_path else RULE_SETS[variant]()
    except (RuleConfigError, json.JSONDecodeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    outcomes: dict[str, int] = {}
    renderer = StateRenderer()

    for game in range(games):
        game_seed = None if seed is None else seed + game
        session = GameSession(SessionConfig(seed=game_seed, rules=rules))

        def echo_step(move, message):
            click.echo(f"  {message}")

        click.echo(f"Game {game + 1} (seed {session.seed})")
        result = autoplay(
            session,
            max_steps=max_steps,
            check_invariants=check_invariants,
            on_step=echo_step if show_moves else None,
        )
        outcomes[result.outcome] = outcomes.get(result.outcome, 0) + 1

        suffix = f" ({result.stuck_reason})" if result.stuck_reason else ""
        click.echo(
            f"  -> {result.outcome}{suffix} after {result.steps} moves, "
            f"{result.final_state.foundation_card_count()} cards on foundations"
        )
        if show_moves:
            click.echo(renderer.render(result.final_state))
        click.echo("")

    summary = ", ".join(f"{name}: {count}" for name, count in sorted(outcomes.items()))
    won = outcomes.get("won", 0)
    click.echo(f"Played {games} game(s) - {summary} - win rate {won / max(games, 1):.1%}")


if __name__ == "__main__":
    main()
