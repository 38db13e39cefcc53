"""Utilities for parsing human-friendly duration strings."""

from datetime import timedelta

from .convert_many import convert_many


def parse_duration(expr: str) -> timedelta:
    """Convert a duration expression into a :class:`~datetime.timedelta`.

    The expression holds one or more ``<number><unit>`` tokens with any time
    unit known to :mod:`unitsum.units`, e.g. ``"1d 12h"`` or ``"90min -30s"``.
    A bare number is interpreted as seconds. Whitespace around the
    expression is ignored.

    Parameters
    ----------
    expr:
        Duration expression to parse.

    Returns
    -------
    datetime.timedelta
        A timedelta representing the supplied duration.

    Raises
    ------
    ValueError
        If the expression is empty, holds no duration token, names a unit
        that is not a unit of time, or lies outside the timedelta range.
    """

    expr = expr.strip()
    if not expr:
        raise ValueError("Duration expression cannot be empty")
    try:
        seconds = float(expr)
    except ValueError:
        seconds = convert_many(expr).to("s")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as exc:
        raise ValueError(f"Duration out of range: {expr}") from exc
