from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from nltk import Tree

from .errors import InvalidSpan, UnsupportedItemShape
from .items import ChartItem, ItemKind

LOGGER = logging.getLogger(__name__)

Bucket = dict[Hashable, list[ChartItem]]


class Chart:
    """Items of one input of length ``n``, indexed by both ends of their span.

    ``outgoing[i]`` maps an item id to the items starting at ``i``;
    ``incoming[j]`` maps an item id to the items ending at ``j``. Every item
    sits in exactly one bucket of each index. Items with the same id are
    compared structurally (``==``) and only added when no equal item is
    already present, so a driving parser can stop once ``insert`` keeps
    returning ``False``.

    The chart only grows: nothing is removed or replaced once inserted.
    """

    def __init__(self, n: int, *, logger: logging.Logger | None = None) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"Chart length must be a non-negative integer, got {n!r}")
        self._n = n
        self._log = logger if logger is not None else LOGGER
        self._log.debug("Chart: %d", n)
        self.outgoing: list[Bucket] = [{} for _ in range(n + 1)]
        self.incoming: list[Bucket] = [{} for _ in range(n + 1)]

    @property
    def n(self) -> int:
        return self._n

    # -------------------- validation --------------------
    def _key_and_span(self, item: Any) -> tuple[Hashable, int, int]:
        try:
            key = item.id
            start, end = item.span.start, item.span.end
        except AttributeError as exc:
            raise UnsupportedItemShape(
                f"Chart items need an 'id' and a 'span' with 'start' and 'end': {item!r}"
            ) from exc
        try:
            hash(key)
        except TypeError as exc:
            raise UnsupportedItemShape(f"Item id must be hashable, got {key!r}") from exc
        if not (isinstance(start, int) and isinstance(end, int)):
            raise UnsupportedItemShape(f"Span positions must be integers, got ({start!r}, {end!r})")
        if not 0 <= start <= end <= self._n:
            raise InvalidSpan(start, end, self._n)
        return key, start, end

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos <= self._n:
            raise InvalidSpan(pos, pos, self._n)

    def _find(self, item: ChartItem, key: Hashable, start: int) -> bool:
        # Linear scan; grammars keep these buckets small in practice.
        bucket = self.outgoing[start].get(key)
        if bucket is None:
            return False
        return any(other is item or other == item for other in bucket)

    # -------------------- mutation --------------------
    def insert(self, item: ChartItem) -> bool:
        """Add ``item`` unless a structurally equal item is already on the chart.

        Returns True if the item was added.
        """
        key, start, end = self._key_and_span(item)
        self._log.debug("Enter Chart.insert: %s", key)
        if self._find(item, key, start):
            self._log.debug("Exit Chart.insert: duplicate")
            return False
        self.outgoing[start].setdefault(key, []).append(item)
        self.incoming[end].setdefault(key, []).append(item)
        self._log.debug("Exit Chart.insert: added at (%d, %d)", start, end)
        return True

    # -------------------- queries --------------------
    def contains(self, item: ChartItem) -> bool:
        key, start, _ = self._key_and_span(item)
        found = self._find(item, key, start)
        self._log.debug("Chart.contains(%s): %s", key, found)
        return found

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def items_spanning(self, start: int, end: int) -> list[ChartItem]:
        """All items spanning ``start`` to ``end``, by id then insertion order."""
        self._check_position(start)
        self._check_position(end)
        if start > end:
            raise InvalidSpan(start, end, self._n)
        # Every item is checked: ids are not required to fix the end position.
        res = [it for bucket in self.outgoing[start].values() for it in bucket if it.span.end == end]
        self._log.debug("Chart.items_spanning(%d, %d): %d items", start, end, len(res))
        return res

    def items_from(self, start: int) -> list[ChartItem]:
        self._check_position(start)
        res = [it for bucket in self.outgoing[start].values() for it in bucket]
        self._log.debug("Chart.items_from(%d): %d items", start, len(res))
        return res

    def items_to(self, end: int) -> list[ChartItem]:
        self._check_position(end)
        res = [it for bucket in self.incoming[end].values() for it in bucket]
        self._log.debug("Chart.items_to(%d): %d items", end, len(res))
        return res

    def count_items_to(self, end: int) -> int:
        self._check_position(end)
        return sum(len(bucket) for bucket in self.incoming[end].values())

    def complete_items_spanning(self, start: int, end: int) -> list[ChartItem]:
        return [it for it in self.items_spanning(start, end) if it.is_complete()]

    def full_parse_items(self, symbol: str) -> list[ChartItem]:
        """Complete items over the whole input whose rule derives ``symbol``.

        A non-empty result means the input is recognised as ``symbol``.
        """
        items = [it for it in self.complete_items_spanning(0, self._n) if it.rule.lhs == symbol]
        self._log.debug("Chart.full_parse_items(%s): %d items", symbol, len(items))
        return items

    def parse_trees(self, symbol: str, item_kind: ItemKind) -> list[Tree]:
        """Parse trees of the complete ``item_kind`` items over the whole input.

        Only items of the requested kind are asked for a tree; other item
        variants on the same chart are skipped.
        """
        parses = []
        for it in self.items_spanning(0, self._n):
            if getattr(it, "kind", None) != item_kind:
                continue
            if it.rule.lhs == symbol and it.is_complete():
                parses.append(it.create_parse_tree())
        self._log.debug("Chart.parse_trees(%s, %s): %d trees", symbol, item_kind, len(parses))
        return parses

    def total_item_count(self) -> int:
        return sum(self.count_items_to(p) for p in range(self._n + 1))

    def __len__(self) -> int:
        return self.total_item_count()
