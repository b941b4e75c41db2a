from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ledger_grammar.config import settings
from ledger_grammar.logging_setup import configure_logging
from ledger_grammar.parsers.base import LedgerSyntaxError
from ledger_grammar.services.loader import load_price_db, parse_text


app = typer.Typer(help="Ledger journal grammar CLI")


@app.callback()
def main(
    log_level: Annotated[str, typer.Option(help="Logging level, e.g. DEBUG or INFO")] = settings.log_level,
) -> None:
    configure_logging(log_level)


@app.command("prices")
def prices_cmd(
    path: Annotated[Path | None, typer.Argument(help="Price database file")] = None,
) -> None:
    """Parse a price database and print a summary."""
    try:
        report = load_price_db(path)
    except LedgerSyntaxError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    except OSError as exc:
        typer.echo(f"Cannot read {path or settings.prices_path}: {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(report.to_dict())


@app.command("parse")
def parse_cmd(
    production: Annotated[str, typer.Argument(help="header, amount, symbol, quantity, date, account, price or price-db")],
    text: Annotated[str, typer.Argument(help="Text to parse")],
) -> None:
    """Parse a snippet with one production and print the record."""
    try:
        value = parse_text(production, text)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    except LedgerSyntaxError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(repr(value))


if __name__ == "__main__":
    app()
