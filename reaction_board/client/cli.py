"""Terminal front end: press Enter instead of clicking."""

from __future__ import annotations

import click

from ..core import REACTION_BOARD_URL, TimeFilter, configure_logging
from .api import ReactionBoardClient
from .game import GameState, ReactionGame
from .scoreboard import Scoreboard

_PROMPTS = {
    GameState.WAITING: "Press Enter to start.",
    GameState.READY: "Wait for green...",
    GameState.GREEN: "GREEN! Press Enter now!",
    GameState.FALSE_START: "False start! Press Enter to retry.",
}


def _render(scoreboard: Scoreboard) -> None:
    click.echo(f"\nLeaderboard ({scoreboard.time_filter.value}):")
    if not scoreboard.leaderboard:
        click.echo("  no results yet")
    for entry in scoreboard.leaderboard:
        click.echo(f"  {entry.rank:>2}. {entry.participant_name:<20} {entry.reaction_time_ms}ms")
    if scoreboard.personal_best is not None:
        click.echo(f"Personal best: {scoreboard.personal_best.reaction_time_ms}ms")


@click.command("reaction-board-play")
@click.option("--url", default=REACTION_BOARD_URL, show_default=True, help="API base URL.")
@click.option("--name", "participant_name", prompt="Your name", help="Leaderboard name.")
@click.option(
    "--filter",
    "time_filter",
    type=click.Choice([f.value for f in TimeFilter]),
    default=TimeFilter.ALL_TIME.value,
    show_default=True,
)
def play(url: str, participant_name: str, time_filter: str) -> None:
    """Play rounds until you type q."""

    configure_logging()
    client = ReactionBoardClient.connect(url)
    scoreboard = Scoreboard(client, time_filter=TimeFilter(time_filter))

    def announce(state: GameState) -> None:
        if state in _PROMPTS:
            click.echo(_PROMPTS[state])

    game = ReactionGame(on_change=announce)
    scoreboard.load_leaderboard()
    scoreboard.load_personal_best(participant_name)
    _render(scoreboard)
    click.echo(_PROMPTS[GameState.WAITING] + " Type q to quit.")

    try:
        while True:
            line = click.prompt("", default="", show_default=False, prompt_suffix="")
            if line.strip().lower() == "q":
                break
            state = game.click()
            if state is GameState.FINISHED:
                click.echo(f"{game.reaction_time_ms}ms")
                if scoreboard.submit(game, participant_name) is None:
                    click.echo("Result not saved. Press Enter to play again.")
                else:
                    _render(scoreboard)
    finally:
        game.reset()
        client.close()


if __name__ == "__main__":
    play()
