"""Typer entry point for the tea timer."""
from __future__ import annotations

import typer
from rich.markup import escape

from tea_timer.config import load_config
from tea_timer.core.errors import ConfigError, MissingArgumentsError
from tea_timer.engine import run_timer
from tea_timer.utils.ui import console

typer_app = typer.Typer(help="Tea Time(r) - a tea brewing timer", add_completion=False)


@typer_app.command()
def main(
    ctx: typer.Context,
    tea: str = typer.Option(None, "--tea", "-t", help="Type of tea to prepare (either the name or the ID, see --list)"),
    duration: str = typer.Option(
        None,
        "--duration",
        "-d",
        help="Timer duration. Xs/m/h overwrites the tea's steep time, +Xs/m/h or -Xs/m/h adjusts it",
    ),
    list_teas: bool = typer.Option(False, "--list", "-l", help="List all available teas and exit"),
    file: str = typer.Option(None, "--file", "-f", help="Path to a JSON file with tea specifications"),
    no_notify: bool = typer.Option(False, "--no-notify", help="Skip the desktop notification"),
):
    """Brew a tea: pick it by name or ID, or just give a duration."""
    try:
        config = load_config(
            tea=tea,
            duration=duration,
            list_teas=list_teas,
            file_path=file,
            notify_override=False if no_notify else None,
        )
        code = run_timer(config)
    except MissingArgumentsError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]", highlight=False, soft_wrap=True)
        typer.echo(ctx.get_help())
        raise typer.Exit(1)
    except ConfigError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    raise typer.Exit(code)


def app():
    typer_app()


if __name__ == "__main__":
    app()
