"""Split strings such as ``"1d 12h 30min"`` into quantity/unit tokens."""

import re
from typing import Iterator, List, NamedTuple, Optional

# A signed decimal number immediately followed by its unit. The unit runs up
# to the next whitespace, digit, decimal point or minus sign, so exponent
# notation is not read: "1e3s" scans as 1 "e" and 3 "s".
SPLIT_EXPRESSION: re.Pattern[str] = re.compile(r"(-?\d*\.?\d+)([^\s\d.\-]+)")


class Token(NamedTuple):
    quantity: float
    unit: str


class TokenStream:
    """Lazy scan over one source string.

    Each stream owns its cursor, so several streams over the same string (or
    the same compiled pattern) never interfere with each other.
    """

    def __init__(self, source: str, pattern: re.Pattern[str] = SPLIT_EXPRESSION):
        self._source = source
        self._pattern = pattern
        self._position = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    def next_token(self) -> Optional[Token]:
        match = self._pattern.search(self._source, self._position)
        if match is None:
            self._position = len(self._source)
            return None
        self._position = match.end()
        quantity, unit = match.groups()
        return Token(float(quantity), unit)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def tokenize(value: str) -> List[Token]:
    return list(TokenStream(value))
