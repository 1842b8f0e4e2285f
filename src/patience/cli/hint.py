"""CLI command for asking the advisor about a position."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from patience.advisor.advisor import get_suggestion, rank_moves
from patience.playtest.display import MovePresenter, StateRenderer
from patience.rules.defaults import RULE_SETS
from patience.rules.engine import RulesEngine
from patience.rules.serialization import load_rules
from patience.rules.validation import RuleConfigError
from patience.simulation.deal import deal_game
from patience.simulation.serialization import state_from_dict, state_to_json

logger = logging.getLogger(__name__)


@click.command()
@click.option("--state", "state_path", type=click.Path(exists=True), default=None, help="GameState JSON file (deals a new game if omitted)")
@click.option("--seed", type=int, default=None, help="Random seed for the deal")
@click.option("--rules", "rules_path", type=click.Path(exists=True), default=None, help="Rules JSON file")
@click.option(
    "--variant",
    type=click.Choice(sorted(RULE_SETS)),
    default="klondike",
    help="Built-in rule set (ignored with --rules)",
)
@click.option("--top", type=int, default=5, help="How many ranked candidates to list")
@click.option("--dump-state", type=click.Path(), default=None, help="Write the position to this JSON file")
@click.option("--debug", is_flag=True, help="Show face-down cards")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    state_path: str | None,
    seed: int | None,
    rules_path: str | None,
    variant: str,
    top: int,
    dump_state: str | None,
    debug: bool,
    verbose: bool,
):
    """Show a position and the advisor's suggested move."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        rules = load_rules(rules_path) if rules_path else RULE_SETS[variant]()
    except (RuleConfigError, json.JSONDecodeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    engine = RulesEngine(rules)

    if state_path:
        try:
            with open(state_path) as f:
                state = state_from_dict(json.load(f))
        except (KeyError, TypeError, ValueError) as e:
            click.echo(f"Error: could not read state from {state_path}: {e}", err=True)
            sys.exit(1)
    else:
        state = deal_game(seed=seed)

    click.echo(StateRenderer().render(state, debug=debug))
    click.echo("")

    if top > 0:
        click.echo(MovePresenter().present(rank_moves(state, engine), limit=top))
        click.echo("")

    suggestion = get_suggestion(state, engine)
    click.echo(f"Hint: {suggestion.message}")

    if dump_state:
        Path(dump_state).write_text(state_to_json(state))
        click.echo(f"\nPosition saved to {dump_state}")


if __name__ == "__main__":
    main()
