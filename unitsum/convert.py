"""Single-unit conversion: one quantity, one source unit, one target."""

from fractions import Fraction
from typing import NamedTuple, Optional, Union

from .errors import IncompatibleUnitsError
from .units import Unit, best_units, resolve_unit

BEST = "best"


class BestConversion(NamedTuple):
    """A quantity expressed in the unit judged most readable for it."""

    quantity: float
    unit: str

    def to_string(self, decimals: Optional[int] = None) -> str:
        if decimals is None:
            return f"{self.quantity:.15g}{self.unit}"
        return f"{self.quantity:.{decimals}f}{self.unit}"

    def __str__(self) -> str:
        return self.to_string()


def _scale(quantity: float, ratio: Fraction) -> float:
    # Multiply before dividing so exact ratios such as 1/1000 stay exact.
    return quantity * ratio.numerator / ratio.denominator


class Converter:
    def __init__(self, quantity: float, unit: Union[str, Unit]) -> None:
        self.quantity = quantity
        self.unit = unit if isinstance(unit, Unit) else resolve_unit(unit)

    def __repr__(self) -> str:
        return f"Converter({self.quantity!r}, {self.unit.name!r})"

    def to(
        self, unit: str, kind: Optional[str] = None
    ) -> Union[float, BestConversion]:
        """Convert to ``unit``, or to the best-fitting unit when ``unit`` is ``"best"``.

        ``kind`` only applies to ``"best"`` and picks the family of candidate
        units (``"metric"`` by default, or ``"imperial"``).
        """
        if unit == BEST:
            return self._best(kind)
        target = resolve_unit(unit)
        return self._to_unit(target)

    def _to_unit(self, target: Unit) -> float:
        if target.measure != self.unit.measure:
            raise IncompatibleUnitsError(self.unit.name, target.name)
        return _scale(self.quantity, self.unit.factor / target.factor)

    def _best(self, kind: Optional[str]) -> BestConversion:
        candidates = best_units(self.unit.measure, kind)
        chosen = candidates[0]
        quantity = self._to_unit(chosen)
        for candidate in candidates[1:]:
            value = self._to_unit(candidate)
            if abs(value) < 1:
                break
            chosen, quantity = candidate, value
        return BestConversion(quantity, chosen.name)


def convert(quantity: float, unit: Union[str, Unit]) -> Converter:
    """Start a conversion of ``quantity`` expressed in ``unit``.

    >>> convert(36, "hours").to("d")
    1.5
    >>> convert(90, "min").to("best")
    BestConversion(quantity=1.5, unit='h')
    """
    return Converter(quantity, unit)
