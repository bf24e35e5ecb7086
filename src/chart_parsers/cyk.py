import logging
from collections.abc import Sequence

from nltk import Tree

from .chart import Chart
from .errors import GrammarError
from .grammar import CFG
from .items import CYKItem, ItemKind, Span

logger = logging.getLogger(__name__)


class CYKParser:
    """CYK parser for grammars in Chomsky normal form.

    Constituents are filled in by increasing span width; each distinct
    derivation of a constituent becomes its own ``CYKItem`` on the chart.
    """

    def __init__(self, grammar: CFG, start_symbol: str | None = None):
        if not grammar.is_cnf():
            raise GrammarError("CYK parsing needs a grammar in Chomsky normal form")
        self.G = grammar
        self.S = start_symbol if start_symbol is not None else grammar.start_symbol

    def parse(self, tokens: Sequence[str]) -> Chart:
        n = len(tokens)
        chart = Chart(n)
        for i, word in enumerate(tokens):
            for r in self.G.lexical_rules_for(word):
                chart.insert(CYKItem(r, Span(i, i + 1), (word,)))

        for width in range(2, n + 1):
            for i in range(n - width + 1):
                j = i + width
                for m in range(i + 1, j):
                    self._combine(chart, i, m, j)
        logger.debug("CYK parse of %d tokens: %d items", n, chart.total_item_count())
        return chart

    def _combine(self, chart: Chart, i: int, m: int, j: int) -> None:
        lefts = [it for it in chart.complete_items_spanning(i, m) if it.kind is ItemKind.CYK]
        rights = [it for it in chart.complete_items_spanning(m, j) if it.kind is ItemKind.CYK]
        for left in lefts:
            for right in rights:
                for r in self.G.binary_rules_for(left.rule.lhs, right.rule.lhs):
                    chart.insert(CYKItem(r, Span(i, j), (left, right)))

    def recognize(self, tokens: Sequence[str]) -> bool:
        return bool(self.parse(tokens).full_parse_items(self.S))

    def parse_trees(self, tokens: Sequence[str]) -> list[Tree]:
        return self.parse(tokens).parse_trees(self.S, ItemKind.CYK)
