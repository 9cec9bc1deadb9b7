from datetime import timedelta

import pytest

from tea_timer.config import TimerConfig
from tea_timer.core.errors import MissingArgumentsError, NotFoundError
from tea_timer.core.models import default_catalog
from tea_timer.engine import get_duration_and_tea, run_timer


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr("tea_timer.engine.configure_logging", lambda level: None)


def test_duration_and_tea_from_selector():
    duration, tea = get_duration_and_tea(TimerConfig(tea="Lapsang Souchong"), default_catalog())
    assert tea.id == 3
    assert duration == timedelta(minutes=2)


def test_duration_override_without_tea():
    duration, tea = get_duration_and_tea(TimerConfig(duration="90s"), default_catalog())
    assert tea is None
    assert duration == timedelta(seconds=90)


def test_requires_tea_or_duration():
    with pytest.raises(MissingArgumentsError):
        get_duration_and_tea(TimerConfig(), default_catalog())


def test_unknown_tea_propagates():
    with pytest.raises(NotFoundError):
        get_duration_and_tea(TimerConfig(tea="Earl Grey"), default_catalog())


def test_run_timer_orders_output(monkeypatch):
    """Profile, logo, countdown, notification and ready message run in sequence."""
    order = []
    monkeypatch.setattr("tea_timer.engine.print_tea", lambda tea: order.append(("tea", tea.name)))
    monkeypatch.setattr("tea_timer.engine.print_logo", lambda: order.append(("logo",)))
    monkeypatch.setattr("tea_timer.engine.countdown", lambda total, sleep=None: order.append(("countdown", total)))
    monkeypatch.setattr("tea_timer.engine.notify_ready", lambda **kw: order.append(("notify",)) or False)

    code = run_timer(TimerConfig(tea="1", duration="-30s"))

    assert code == 0
    assert order == [
        ("tea", "Temple of Heaven"),
        ("logo",),
        ("countdown", timedelta(seconds=90)),
        ("notify",),
    ]


def test_run_timer_with_real_countdown(capsys, monkeypatch):
    monkeypatch.setattr("tea_timer.engine.notify_ready", lambda **kw: True)
    sleeps = []

    code = run_timer(TimerConfig(duration="2s"), sleep=sleeps.append)

    assert code == 0
    assert len(sleeps) == 2
    out = capsys.readouterr().out
    assert "(100%)" in out
    assert "Your tea is ready! Enjoy :)" in out
