"""Convert strings holding several quantities into a single unit."""

from typing import Optional, Union

from .convert import BEST, BestConversion, convert
from .errors import InputFormatError
from .tokenizer import SPLIT_EXPRESSION, Token, TokenStream


class ManyConverter:
    """Converter bound to one parsed input string.

    The input is checked for at least one token on construction. Every call
    to :meth:`to` scans the string again from the start, so a handle can be
    reused with different target units.
    """

    def __init__(self, value: str) -> None:
        first = TokenStream(value).next_token()
        if first is None:
            if __debug__:
                raise InputFormatError(
                    f"value {value!r} did not match expression "
                    f"{SPLIT_EXPRESSION.pattern}"
                )
            raise InputFormatError("value did not match expression")
        self.value = value
        self.first: Token = first

    def __repr__(self) -> str:
        return f"ManyConverter({self.value!r})"

    def to(
        self, unit: str, kind: Optional[str] = None
    ) -> Union[float, BestConversion]:
        """Sum every token converted to ``unit``.

        With ``unit="best"`` the first token is converted to its best unit and
        that unit becomes the resolution target for the remaining tokens. The
        choice is anchored on the first token's magnitude, not on the total.
        The total is then converted to ``"best"`` once more using ``kind``.
        """
        is_best = unit == BEST
        resolved_unit: Optional[str] = None
        result = 0.0

        for token in TokenStream(self.value):
            if is_best and resolved_unit is None:
                best = convert(token.quantity, token.unit).to(BEST)
                result += best.quantity
                resolved_unit = best.unit
            else:
                result += convert(token.quantity, token.unit).to(
                    resolved_unit if is_best else unit
                )

        if is_best:
            return convert(result, resolved_unit).to(BEST, kind)
        return result


def convert_many(value: str) -> ManyConverter:
    """Convert several values in a string into a single unit.

    >>> convert_many("1d 12h").to("hours")
    36.0

    Raises :class:`~unitsum.errors.InputFormatError` when ``value`` holds no
    ``<quantity><unit>`` token.
    """
    return ManyConverter(value)


def ms(value: str) -> float:
    """Convert a duration string to milliseconds.

    >>> ms("1d 2h 30min")
    95400000.0
    """
    return convert_many(value).to("ms")
