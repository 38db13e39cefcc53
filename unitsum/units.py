"""Unit table used by the single-unit converter.

Every unit belongs to a *measure* (time, length, mass, data) and carries an
exact :class:`~fractions.Fraction` factor relative to the measure's base unit.
Factors are kept exact so that conversions between whole units such as days
and milliseconds do not pick up floating point noise.
"""

from fractions import Fraction
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from .errors import UnknownUnitError

METRIC = "metric"
IMPERIAL = "imperial"
KINDS = (METRIC, IMPERIAL)


class Unit(NamedTuple):
    name: str
    measure: str
    factor: Fraction
    aliases: Tuple[str, ...] = ()
    case_sensitive: bool = False


def _unit(
    name: str,
    measure: str,
    factor,
    *aliases: str,
    case_sensitive: bool = False,
) -> Unit:
    return Unit(name, measure, Fraction(factor), tuple(aliases), case_sensitive)


NS_PER_S = 10**9

UNITS: List[Unit] = [
    # time, base nanosecond
    _unit("ns", "time", 1, "nanosecond", "nanoseconds"),
    _unit("μs", "time", 10**3, "µs", "us", "microsecond", "microseconds"),
    _unit("ms", "time", 10**6, "millisecond", "milliseconds", "msec", "msecs"),
    _unit("s", "time", NS_PER_S, "sec", "secs", "second", "seconds"),
    _unit("min", "time", 60 * NS_PER_S, "mins", "minute", "minutes"),
    _unit("h", "time", 3600 * NS_PER_S, "hr", "hrs", "hour", "hours"),
    _unit("d", "time", 86400 * NS_PER_S, "day", "days"),
    _unit("week", "time", 7 * 86400 * NS_PER_S, "w", "wk", "wks", "weeks"),
    # length, base nanometre
    _unit("nm", "length", 1, "nanometer", "nanometers", "nanometre", "nanometres"),
    _unit("μm", "length", 10**3, "µm", "um", "micrometer", "micrometers"),
    _unit("mm", "length", 10**6, "millimeter", "millimeters", "millimetre"),
    _unit("cm", "length", 10**7, "centimeter", "centimeters", "centimetre"),
    _unit("m", "length", 10**9, "meter", "meters", "metre", "metres"),
    _unit("km", "length", 10**12, "kilometer", "kilometers", "kilometre"),
    _unit("in", "length", 25_400_000, "inch", "inches"),
    _unit("ft", "length", 12 * 25_400_000, "foot", "feet"),
    _unit("yd", "length", 36 * 25_400_000, "yard", "yards"),
    _unit("mi", "length", 63_360 * 25_400_000, "mile", "miles"),
    # mass, base milligram
    _unit("mg", "mass", 1, "milligram", "milligrams"),
    _unit("g", "mass", 10**3, "gram", "grams"),
    _unit("kg", "mass", 10**6, "kilogram", "kilograms", "kilo", "kilos"),
    _unit("t", "mass", 10**9, "tonne", "tonnes"),
    _unit("oz", "mass", Fraction("28349.523125"), "ounce", "ounces"),
    _unit("lb", "mass", Fraction("453592.37"), "lbs", "pound", "pounds"),
    _unit("st", "mass", 14 * Fraction("453592.37"), "stone", "stones"),
    # data, base bit
    _unit("b", "data", 1, "bit", "bits", case_sensitive=True),
    _unit("B", "data", 8, "byte", "bytes", case_sensitive=True),
    _unit("KB", "data", 8 * 10**3, "kB", "kilobyte", "kilobytes", case_sensitive=True),
    _unit("MB", "data", 8 * 10**6, "megabyte", "megabytes", case_sensitive=True),
    _unit("GB", "data", 8 * 10**9, "gigabyte", "gigabytes", case_sensitive=True),
    _unit("TB", "data", 8 * 10**12, "terabyte", "terabytes", case_sensitive=True),
    _unit("PB", "data", 8 * 10**15, "petabyte", "petabytes", case_sensitive=True),
    _unit("KiB", "data", 8 * 2**10, "kibibyte", "kibibytes", case_sensitive=True),
    _unit("MiB", "data", 8 * 2**20, "mebibyte", "mebibytes", case_sensitive=True),
    _unit("GiB", "data", 8 * 2**30, "gibibyte", "gibibytes", case_sensitive=True),
    _unit("TiB", "data", 8 * 2**40, "tebibyte", "tebibytes", case_sensitive=True),
]

# Candidate units for "best" conversions, smallest first.
BEST_UNITS: Dict[str, Dict[str, List[str]]] = {
    "time": {METRIC: ["ns", "μs", "ms", "s", "min", "h", "d"]},
    "length": {
        METRIC: ["mm", "cm", "m", "km"],
        IMPERIAL: ["in", "ft", "yd", "mi"],
    },
    "mass": {
        METRIC: ["mg", "g", "kg", "t"],
        IMPERIAL: ["oz", "lb", "st"],
    },
    "data": {
        METRIC: ["B", "KB", "MB", "GB", "TB", "PB"],
        IMPERIAL: ["B", "KiB", "MiB", "GiB", "TiB"],
    },
}


def _build_indexes(
    units: Iterable[Unit],
) -> Tuple[Dict[str, Unit], Dict[str, Unit]]:
    exact: Dict[str, Unit] = {}
    folded: Dict[str, Unit] = {}
    for unit in units:
        for alias in (unit.name, *unit.aliases):
            if alias in exact:
                raise RuntimeError(f"duplicate unit alias {alias!r}")
            exact[alias] = unit
            if not unit.case_sensitive:
                folded.setdefault(alias.lower(), unit)
    return exact, folded


_EXACT, _FOLDED = _build_indexes(UNITS)
_BY_NAME: Dict[str, Unit] = {unit.name: unit for unit in UNITS}


def resolve_unit(text: str) -> Unit:
    """Look up a unit by its symbol or one of its aliases.

    Exact matches win; otherwise case-insensitive units are matched ignoring
    case (``"Hours"``), while data units such as ``b``/``B`` stay exact.
    """
    unit = _EXACT.get(text)
    if unit is None:
        unit = _FOLDED.get(text.lower())
    if unit is None:
        raise UnknownUnitError(text)
    return unit


def best_units(measure: str, kind: Optional[str] = None) -> List[Unit]:
    kind = kind or METRIC
    if kind not in KINDS:
        raise ValueError(f"Unknown best unit kind: {kind!r}")
    candidates = BEST_UNITS[measure]
    names = candidates.get(kind) or candidates[METRIC]
    return [_BY_NAME[name] for name in names]


def list_units(measure: Optional[str] = None) -> Dict[str, List[str]]:
    """Map each measure to its canonical unit symbols."""
    listing: Dict[str, List[str]] = {}
    for unit in UNITS:
        if measure is not None and unit.measure != measure:
            continue
        listing.setdefault(unit.measure, []).append(unit.name)
    return listing
