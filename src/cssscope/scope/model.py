"""Scope model: ScopeBlock and Rule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScopeBlock:
    """A region of source text between a SCOPE marker and its END marker.

    ``start`` and ``end`` delimit the whole region, markers included, so the
    extractor can splice the rewritten body back in place of it.
    """

    name: str
    body: str
    start: int
    end: int

    @property
    def prefix(self) -> str:
        return "." + self.name


@dataclass(frozen=True)
class Rule:
    """A single CSS rule as written: its selector list and braced body."""

    selectors: tuple[str, ...]
    body: str  # includes the surrounding braces
    comments: tuple[str, ...] = ()  # written among the selectors
