"""Case-insensitive lookup of parts and nets by name and details."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence


class SearchMode(Enum):
    """How a search term has to match a name."""

    SUB = "sub"
    PREFIX = "prefix"
    WHOLE = "whole"


def _details(item: Any) -> Iterable[str]:
    provider = getattr(item, "searchable_details", None)
    if provider is None:
        return ()
    return provider() if callable(provider) else provider


@dataclass
class Searcher:
    """Finds nets and parts whose name (or details) match a search term.

    Items are any objects with a ``name`` string. When ``search_details``
    is on, an optional ``searchable_details`` method or attribute giving
    further strings is searched as well.
    """

    nets: Sequence[Any] = field(default_factory=list)
    parts: Sequence[Any] = field(default_factory=list)
    mode: SearchMode = SearchMode.SUB
    search_details: bool = False

    def matches(self, haystack: str, needle: str) -> bool:
        """Tell whether ``needle`` matches ``haystack`` in the current mode."""
        position = haystack.lower().find(needle.lower())
        if position < 0:
            return False
        if self.mode is SearchMode.SUB:
            return True
        if self.mode is SearchMode.PREFIX:
            return position == 0
        return position == 0 and len(needle) == len(haystack)

    def _search(self, search: str, items: Iterable[Any], limit: int | None) -> list[Any]:
        results: list[Any] = []
        if not search or limit == 0:
            return results
        for item in items:
            match = self.matches(item.name, search)
            if self.search_details and not match:
                match = any(self.matches(detail, search) for detail in _details(item))
            if match:
                results.append(item)
                if limit is not None and limit > 0 and len(results) >= limit:
                    break
        return results

    def search_parts(self, search: str, limit: int | None = None) -> list[Any]:
        """Return matching parts; ``limit`` None or negative means no limit."""
        return self._search(search, self.parts, limit)

    def search_nets(self, search: str, limit: int | None = None) -> list[Any]:
        """Return matching nets; ``limit`` None or negative means no limit."""
        return self._search(search, self.nets, limit)