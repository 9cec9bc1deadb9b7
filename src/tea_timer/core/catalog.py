"""Selecting a tea from the catalog by ID or by name."""
import re

from tea_timer.core.errors import NotFoundError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def get_tea_by_id(tea_id, teas):
    for tea in teas:
        if tea.id == tea_id:
            return tea
    return None


def get_tea_by_name(name, teas):
    wanted = name.strip().lower()
    for tea in teas:
        if tea.name.strip().lower() == wanted:
            return tea
    return None


def resolve(selector, teas):
    """Find a tea by ID when the selector is an integer, otherwise by exact name.

    Name matching ignores case and surrounding whitespace. Raises
    NotFoundError carrying the original selector when nothing matches.
    """
    if _INTEGER.fullmatch(selector):
        tea = get_tea_by_id(int(selector), teas)
    else:
        tea = get_tea_by_name(selector, teas)

    if tea is None:
        raise NotFoundError(selector)
    return tea
