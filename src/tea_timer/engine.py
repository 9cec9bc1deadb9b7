import sys
import time

from loguru import logger
from rich.markup import escape

from tea_timer.config import READY_MESSAGE
from tea_timer.core.catalog import resolve
from tea_timer.core.duration import resolve_duration
from tea_timer.core.errors import MissingArgumentsError, TeaTimerError
from tea_timer.core.models import load_catalog, load_catalog_file
from tea_timer.utils.notify import notify_ready
from tea_timer.utils.ui import console, countdown, print_logo, print_tea, print_teas


def configure_logging(level):
    logger.remove()
    logger.add(sys.stderr, level=level)


def load_teas(config):
    """Built-in teas, or the ones from config.file_path. Parse problems only warn."""
    if config.file_path is None:
        teas, _ = load_catalog()
        return teas

    teas, warning = load_catalog_file(config.file_path)
    if warning is not None:
        console.print(f"[yellow]{escape(str(warning))}[/yellow]", highlight=False, soft_wrap=True)
    return teas


def get_duration_and_tea(config, teas):
    """Selected tea (or None) and the countdown length for this run."""
    # At least one of the arguments has to set the duration
    if not config.tea and not config.duration:
        raise MissingArgumentsError()

    tea = resolve(config.tea, teas) if config.tea else None
    return resolve_duration(config.duration or "", tea), tea


def run_timer(config, sleep=time.sleep):
    """Full run: list or resolve, countdown, notify. Returns the exit code."""
    configure_logging(config.log_level)
    try:
        teas = load_teas(config)

        if config.list_teas:
            print_logo()
            print_teas(teas)
            return 0

        duration, tea = get_duration_and_tea(config, teas)
    except MissingArgumentsError:
        raise
    except TeaTimerError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]", highlight=False, soft_wrap=True)
        return 1

    if tea is not None:
        print_tea(tea)
    print_logo()

    countdown(duration, sleep=sleep)

    if config.notify:
        notify_ready(timeout_ms=config.notify_timeout_ms)
    console.print(f"[bold green]{READY_MESSAGE}[/bold green]")
    return 0
