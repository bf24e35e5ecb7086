class ChartError(Exception):
    """Base class for errors raised by the chart."""


class InvalidSpan(ChartError, ValueError):
    """A span or position lies outside ``[0, N]`` or has ``start > end``."""

    def __init__(self, start: int, end: int, n: int) -> None:
        super().__init__(f"Span ({start}, {end}) is not valid for a chart over positions 0..{n}")
        self.start = start
        self.end = end
        self.n = n


class UnsupportedItemShape(ChartError, TypeError):
    """An object offered to the chart does not expose ``id`` and ``span``."""


class GrammarError(ValueError):
    pass
