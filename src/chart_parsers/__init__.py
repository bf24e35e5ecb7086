from .chart import Chart
from .cyk import CYKParser
from .earley import EarleyParser
from .errors import ChartError, GrammarError, InvalidSpan, UnsupportedItemShape
from .grammar import CFG, Rule
from .items import ChartItem, CYKItem, EarleyItem, ItemKind, Span

__all__ = [
    "Chart",
    "ChartItem",
    "EarleyItem",
    "CYKItem",
    "ItemKind",
    "Span",
    "CFG",
    "Rule",
    "EarleyParser",
    "CYKParser",
    "ChartError",
    "InvalidSpan",
    "UnsupportedItemShape",
    "GrammarError",
]
