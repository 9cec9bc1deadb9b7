import time
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text

from tea_timer.core.countdown import Countdown
from tea_timer.core.duration import format_steep_time

console = Console()

LOGO = r"""
      Tea Time(r)
         ____    ,-^-,
      ,|'----'|  * L *
     ((|      |  '-.-'
      \|      |
       |      |
       '------'
     ^^^^^^^^^^^^"""


def print_logo():
    console.print(Text(LOGO, style="bold green"))


def format_tea(tea):
    """Multi-line details block for one tea."""
    return (
        f"[bold]ID:[/bold]\t\t{tea.id}\n"
        f"[bold]Name:[/bold]\t\t{escape(tea.name)}\n"
        f"[bold]Type:[/bold]\t\t{escape(tea.category)}\n"
        f"[bold]Steep Time:[/bold]\t{format_steep_time(tea.steep_time)}\n"
        f"[bold]Temperature:[/bold]\t{tea.temperature}°"
    )


def print_tea(tea):
    console.print(format_tea(tea), highlight=False)


def print_teas(teas):
    for i, tea in enumerate(teas):
        if i != 0:
            console.print(Rule(style="dim"))
        print_tea(tea)


def countdown(total, sleep=time.sleep):
    """Run the countdown, redrawing a single progress line in place"""
    with Live(Text(""), console=console, auto_refresh=False, transient=False) as live:
        def on_event(event_type, data):
            if event_type == "tick":
                live.update(Text(data["line"], style="cyan"), refresh=True)

        return Countdown(total, on_event=on_event, sleep=sleep).run()
