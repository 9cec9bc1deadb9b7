import pytest

from tea_timer.core.catalog import resolve
from tea_timer.core.errors import NotFoundError
from tea_timer.core.models import DEFAULT_TEAS, default_catalog


@pytest.fixture
def teas():
    return default_catalog()


@pytest.mark.parametrize("tea", DEFAULT_TEAS, ids=lambda t: t.name)
def test_resolve_by_id(teas, tea):
    assert resolve(str(tea.id), teas) == tea


@pytest.mark.parametrize("tea", DEFAULT_TEAS, ids=lambda t: t.name)
def test_resolve_by_name_ignores_case_and_whitespace(teas, tea):
    assert resolve(tea.name, teas) == tea
    assert resolve(tea.name.upper(), teas) == tea
    assert resolve(f" {tea.name} ", teas) == tea


def test_unknown_name(teas):
    with pytest.raises(NotFoundError) as exc_info:
        resolve("doesnotexist", teas)
    assert exc_info.value.selector == "doesnotexist"
    assert "doesnotexist" in str(exc_info.value)


def test_unknown_id(teas):
    with pytest.raises(NotFoundError):
        resolve("42", teas)


def test_no_prefix_matching(teas):
    with pytest.raises(NotFoundError):
        resolve("Green", teas)


def test_numeric_selector_never_matches_names():
    from datetime import timedelta
    from tea_timer.core.models import TeaProfile

    odd = [TeaProfile(7, "Oolong", "1", timedelta(minutes=3), 90)]
    with pytest.raises(NotFoundError):
        resolve("1", odd)


def test_first_duplicate_wins():
    from datetime import timedelta
    from tea_timer.core.models import TeaProfile

    first = TeaProfile(1, "Green", "Sencha", timedelta(minutes=1), 75)
    second = TeaProfile(1, "Green", "Gyokuro", timedelta(minutes=2), 60)
    assert resolve("1", [first, second]) is first


def test_non_ascii_digits_are_names():
    from datetime import timedelta
    from tea_timer.core.models import TeaProfile

    teas = [
        TeaProfile(3, "Black", "Assam", timedelta(minutes=4), 100),
        TeaProfile(9, "Green", "٣", timedelta(minutes=2), 80),
    ]
    assert resolve("٣", teas).id == 9
    with pytest.raises(NotFoundError):
        resolve("٣", teas[:1])
