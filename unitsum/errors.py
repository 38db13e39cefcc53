"""Exceptions raised while parsing and converting unit expressions."""


class UnitsumError(ValueError):
    """Base class for every error raised by unitsum."""


class InputFormatError(UnitsumError):
    """The input string holds no ``<quantity><unit>`` token."""


class UnknownUnitError(UnitsumError):
    def __init__(self, unit: str) -> None:
        super().__init__(f"Unknown unit: {unit!r}")
        self.unit = unit


class IncompatibleUnitsError(UnitsumError):
    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"Cannot convert {source!r} to {target!r}")
        self.source = source
        self.target = target
