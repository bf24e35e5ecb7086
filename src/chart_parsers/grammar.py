from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import GrammarError


@dataclass(frozen=True)
class Rule:
    lhs: str
    rhs: tuple[str, ...]

    def __str__(self) -> str:
        rhs_s = " ".join(self.rhs) if self.rhs else "ε"
        return f"{self.lhs} -> {rhs_s}"


class CFG:
    """A context-free grammar indexed by left-hand side.

    Terminals are symbols that never appear on the left-hand side.
    Rules keep the order in which they were given, so parsers built on the
    grammar produce items (and trees) in a reproducible order.
    """

    def __init__(self, rules: Iterable[tuple[str, Iterable[str]]], start_symbol: str):
        by_lhs: dict[str, list[Rule]] = defaultdict(list)
        for lhs, rhs in rules:
            rule = Rule(lhs, tuple(rhs))
            if rule not in by_lhs[lhs]:
                by_lhs[lhs].append(rule)
        if not by_lhs:
            raise GrammarError("A grammar needs at least one rule")
        if start_symbol not in by_lhs:
            raise GrammarError(f"Start symbol {start_symbol!r} has no rules")
        self._rules: dict[str, list[Rule]] = dict(by_lhs)
        self._lhs_set: frozenset[str] = frozenset(self._rules.keys())
        self.start_symbol = start_symbol

        # Reverse indices used by bottom-up parsers
        self._lexical: dict[str, list[Rule]] = defaultdict(list)
        self._binary: dict[tuple[str, str], list[Rule]] = defaultdict(list)
        for r in self.rules():
            if len(r.rhs) == 1 and self.is_terminal(r.rhs[0]):
                self._lexical[r.rhs[0]].append(r)
            elif len(r.rhs) == 2 and not any(self.is_terminal(s) for s in r.rhs):
                self._binary[(r.rhs[0], r.rhs[1])].append(r)

    def rules(self) -> list[Rule]:
        return [r for rlist in self._rules.values() for r in rlist]

    def rules_for(self, lhs: str) -> list[Rule]:
        return self._rules.get(lhs, [])

    def lexical_rules_for(self, word: str) -> list[Rule]:
        return self._lexical.get(word, [])

    def binary_rules_for(self, left: str, right: str) -> list[Rule]:
        return self._binary.get((left, right), [])

    @property
    def nonterminals(self) -> frozenset[str]:
        return self._lhs_set

    def is_terminal(self, sym: str) -> bool:
        return sym not in self._lhs_set

    def is_cnf(self) -> bool:
        """True if every rule is ``A -> B C`` (nonterminals) or ``A -> a`` (terminal)."""
        for r in self.rules():
            if len(r.rhs) == 1 and self.is_terminal(r.rhs[0]):
                continue
            if len(r.rhs) == 2 and not any(self.is_terminal(s) for s in r.rhs):
                continue
            return False
        return True

    def has_epsilon_rules(self) -> bool:
        return any(len(r.rhs) == 0 for r in self.rules())

    def has_unit_cycle(self) -> bool:
        """Detect derivations ``A =>+ A`` made only of unit productions."""
        graph: dict[str, set[str]] = defaultdict(set)
        for r in self.rules():
            if len(r.rhs) == 1 and not self.is_terminal(r.rhs[0]):
                graph[r.lhs].add(r.rhs[0])

        for origin in graph:
            seen: set[str] = set()
            stack = list(graph[origin])
            while stack:
                sym = stack.pop()
                if sym == origin:
                    return True
                if sym in seen:
                    continue
                seen.add(sym)
                stack.extend(graph.get(sym, ()))
        return False
