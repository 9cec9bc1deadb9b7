import time
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

TICK = timedelta(seconds=1)
BAR_CELLS = 10


class Phase(Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass
class CountdownState:
    total: timedelta
    remaining: timedelta


def percent_elapsed(remaining, total):
    if total <= timedelta(0):
        return 100.0
    return 100 * (total - remaining) / total


def render_progress(remaining, total):
    """Progress line, e.g. 'Progress: [#####-----] ( 50%) |  60/120 seconds remaining'."""
    percent = percent_elapsed(remaining, total)
    # Round half up so 5% already shows the first cell
    filled = min(BAR_CELLS, int(percent / 10 + 0.5))
    bar = "#" * filled + "-" * (BAR_CELLS - filled)
    return (
        f"Progress: [{bar}] ({int(percent):3d}%) | "
        f"{remaining.total_seconds():3.0f}/{total.total_seconds():3.0f} seconds remaining"
    )


class Countdown:
    def __init__(self, total, on_event=None, sleep=time.sleep, clock=time.monotonic):
        self.state = CountdownState(total=total, remaining=total)
        self.phase = Phase.RUNNING
        self.on_event = on_event  # Callback function(event_type, data)
        self.ticks = 0
        self._sleep = sleep
        self._clock = clock
        self._started_at = None

    def _emit(self, event_type, data):
        """Send event to callback if registered."""
        if self.on_event:
            self.on_event(event_type, data)

    def step(self):
        """Render the current state, then either finish or wait for the next second."""
        if self.phase is Phase.DONE:
            return self.phase
        if self._started_at is None:
            self._started_at = self._clock()

        remaining, total = self.state.remaining, self.state.total
        self._emit("tick", {
            "remaining": remaining,
            "total": total,
            "percent": percent_elapsed(remaining, total),
            "line": render_progress(remaining, total),
        })

        if remaining <= timedelta(0):
            self.phase = Phase.DONE
            self._emit("done", {"total": total})
            return self.phase

        self.ticks += 1
        # Sleep to the next whole-second boundary since start so renders do not drift
        target = min(self.ticks * TICK, total).total_seconds()
        self._sleep(max(0.0, target - (self._clock() - self._started_at)))
        self.state.remaining = max(remaining - TICK, timedelta(0))
        return self.phase

    def run(self):
        while self.step() is Phase.RUNNING:
            pass
        return self.state
