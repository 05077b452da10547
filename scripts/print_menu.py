#!/usr/bin/env python3
"""
Print a canteen's menu from its Atom feed.

Usage:
    python scripts/print_menu.py                       # Whole feed, default canteen
    python scripts/print_menu.py --day today           # Only today's menu
    python scripts/print_menu.py --day 2023-01-15
    python scripts/print_menu.py --file feed.xml       # Parse a saved feed
    python scripts/print_menu.py --url https://...     # Any compatible feed
"""

import os
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from akafo.contexts.parsing import MenuParsingError, parse_menu
from akafo.contexts.parsing.logger import _log_error, _log_success, setup_parsing_logger
from akafo.contexts.retrieval import FeedRetrievalError, fetch_feed
from akafo.utils.canteens import get_canteen
from akafo.utils.menu_formatter import format_menu, format_menu_day
from akafo.utils.timestamp import format_date, now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(add_completion=False, help="Print a canteen menu from its Atom feed.")


def resolve_day(day: str, today: Optional[date] = None) -> date:
    """Turn 'today', 'tomorrow' or a YYYY-MM-DD string into a date."""
    today = today or date.today()
    if day == "today":
        return today
    if day == "tomorrow":
        return today + timedelta(days=1)
    try:
        return datetime.strptime(day, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Expected 'today', 'tomorrow' or YYYY-MM-DD, got '{day}'")


@app.command()
def main(
    canteen: Optional[str] = typer.Option(
        None, "--canteen", "-c", help="Canteen key from canteens.yaml (default: config default)"
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Feed URL (overrides --canteen)"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read the feed from a file"
    ),
    day: Optional[str] = typer.Option(
        None, "--day", "-d", help="'today', 'tomorrow' or YYYY-MM-DD (default: all days)"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Directory for the session log (default: LOGS_PATH/menu_<time>)"
    ),
):
    """Fetch (or read) the feed, parse it and print the menu."""
    selected_day = resolve_day(day) if day else None

    if file is not None:
        source = str(file)
    elif url is not None:
        source = url
    else:
        try:
            source = get_canteen(canteen).url
        except ValueError as e:
            typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    log_dir = log_dir or LOGS_PATH / f"menu_{now()}"
    setup_parsing_logger(log_dir, source=source)

    try:
        text = file.read_bytes() if file is not None else fetch_feed(source)
        menu = parse_menu(text)
    except (FeedRetrievalError, MenuParsingError) as e:
        _log_error(f"{type(e).__name__}: {e.message}")
        typer.secho(f"ERROR: {type(e).__name__}: {e.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _log_success(f"Parsed {len(menu.day_menus)} days from '{menu.title}'")

    if selected_day is None:
        typer.echo(format_menu(menu))
        return

    menu_day = menu.get_day(selected_day)
    if menu_day is None:
        typer.secho(
            f"ERROR: No menu for {format_date(selected_day)}", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    typer.echo(format_menu_day(menu_day))


if __name__ == "__main__":
    app()
