from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Protocol, Union

from nltk import Tree

from .grammar import Rule


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


class ItemKind(enum.Enum):
    EARLEY = "earley"
    CYK = "cyk"


class ChartItem(Protocol):
    """What the chart needs from an item.

    Equality must be structural, including through child items: the chart
    relies on ``==`` to recognise duplicate derivations.
    """

    @property
    def id(self) -> Hashable: ...

    @property
    def span(self) -> Span: ...

    @property
    def rule(self) -> Rule: ...

    @property
    def kind(self) -> ItemKind: ...

    def is_complete(self) -> bool: ...

    def create_parse_tree(self) -> Tree: ...


# A child is either a sub-derivation or a scanned word.
Child = Union["EarleyItem", "CYKItem", str]


def _subtree(child: Child) -> Tree | str:
    if isinstance(child, str):
        return child
    return child.create_parse_tree()


@dataclass(frozen=True)
class EarleyItem:
    """Dotted rule ``A -> α • β`` over ``span``, with the derivation of ``α``."""
    rule: Rule
    dot: int
    span: Span
    children: tuple[Child, ...] = field(default=())

    kind = ItemKind.EARLEY

    @property
    def id(self) -> str:
        return f"Earley({self.rule}, {self.dot}, {self.span.start}, {self.span.end})"

    def next_symbol(self) -> str | None:
        return self.rule.rhs[self.dot] if self.dot < len(self.rule.rhs) else None

    def is_complete(self) -> bool:
        return self.dot >= len(self.rule.rhs)

    def advance(self, child: Child, end: int) -> EarleyItem:
        return EarleyItem(self.rule, self.dot + 1, Span(self.span.start, end), self.children + (child,))

    def create_parse_tree(self) -> Tree:
        return Tree(self.rule.lhs, [_subtree(c) for c in self.children])

    def __str__(self) -> str:
        rhs = list(self.rule.rhs)
        rhs.insert(self.dot, "•")
        return f"{self.rule.lhs} -> {' '.join(rhs)} {self.span}"


@dataclass(frozen=True)
class CYKItem:
    """A complete constituent ``A`` over ``span``; no dotted state."""
    rule: Rule
    span: Span
    children: tuple[Child, ...]

    kind = ItemKind.CYK

    @property
    def id(self) -> str:
        return f"CYK({self.rule.lhs}, {self.span.start}, {self.span.end})"

    def is_complete(self) -> bool:
        return True

    def create_parse_tree(self) -> Tree:
        return Tree(self.rule.lhs, [_subtree(c) for c in self.children])

    def __str__(self) -> str:
        return f"{self.rule} {self.span}"
