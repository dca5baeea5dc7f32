"""Article selection state for the next newsletter issue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence


@dataclass(frozen=True)
class SelectionSet:
    """Immutable set of selected article ids.

    Every operation returns a new SelectionSet, so a selection is a pure
    function of the toggles applied to the empty set.
    """

    selected: frozenset = field(default_factory=frozenset)

    def toggle(self, article_id: Hashable) -> SelectionSet:
        if article_id in self.selected:
            return SelectionSet(self.selected - {article_id})
        return SelectionSet(self.selected | {article_id})

    def cleared(self) -> SelectionSet:
        return SelectionSet()

    def contains(self, article_id: Hashable) -> bool:
        return article_id in self.selected

    @property
    def count(self) -> int:
        return len(self.selected)

    @property
    def can_generate(self) -> bool:
        return self.count > 0

    def ordered(self, article_ids: Sequence[Hashable]) -> list:
        """Selected ids in the order of the loaded article list."""
        return [article_id for article_id in article_ids if article_id in self.selected]
