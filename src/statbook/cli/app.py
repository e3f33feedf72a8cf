from __future__ import annotations

import logging

import typer

from statbook.cli.players import app as players_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(players_app, name="player")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Player stats and news from MySportsFeeds and NewsAPI."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
