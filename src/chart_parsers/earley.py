import logging
from collections import deque
from collections.abc import Sequence

from nltk import Tree

from .chart import Chart
from .errors import GrammarError
from .grammar import CFG, Rule
from .items import EarleyItem, ItemKind, Span

logger = logging.getLogger(__name__)

GAMMA = "γ"


class EarleyParser:
    """Earley parser storing its dotted items, with their derivations, on a ``Chart``.

    Restrictions:
      - No ε-productions and no cyclic unit productions; either would let a
        span hold unboundedly many distinct derivations.
    """

    def __init__(self, grammar: CFG, start_symbol: str | None = None):
        if grammar.has_epsilon_rules():
            raise GrammarError("Epsilon (empty) productions are not supported")
        if grammar.has_unit_cycle():
            raise GrammarError("Cyclic unit productions are not supported")
        self.G = grammar
        self.S = start_symbol if start_symbol is not None else grammar.start_symbol
        self._start_rule = Rule(GAMMA, (self.S,))

    def parse(self, tokens: Sequence[str]) -> Chart:
        n = len(tokens)
        chart = Chart(n)
        chart.insert(EarleyItem(self._start_rule, 0, Span(0, 0)))
        for k in range(n + 1):
            self._closure(chart, tokens, k)
        logger.debug("Earley parse of %d tokens: %d items", n, chart.total_item_count())
        return chart

    def recognize(self, tokens: Sequence[str]) -> bool:
        return bool(self.parse(tokens).full_parse_items(self.S))

    def parse_trees(self, tokens: Sequence[str]) -> list[Tree]:
        return self.parse(tokens).parse_trees(self.S, ItemKind.EARLEY)

    # -------------------- internal closure --------------------
    def _closure(self, chart: Chart, tokens: Sequence[str], k: int) -> None:
        # Items ending at k; the loop stops once insert reports nothing new.
        queue = deque(chart.items_to(k))
        while queue:
            it = queue.popleft()
            nxt = it.next_symbol()
            if nxt is None:
                # COMPLETER: advance parents waiting for it.rule.lhs at its start
                for pit in chart.items_to(it.span.start):
                    if pit.kind is ItemKind.EARLEY and pit.next_symbol() == it.rule.lhs:
                        nit = pit.advance(it, k)
                        if chart.insert(nit):
                            queue.append(nit)
            elif not self.G.is_terminal(nxt):
                # PREDICTOR
                for r in self.G.rules_for(nxt):
                    nit = EarleyItem(r, 0, Span(k, k))
                    if chart.insert(nit):
                        queue.append(nit)
            elif k < len(tokens) and tokens[k] == nxt:
                # SCANNER: the new item belongs to the closure at k + 1
                chart.insert(it.advance(nxt, k + 1))
