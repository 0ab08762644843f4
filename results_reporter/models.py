from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, NamedTuple

import params


class VoteCount(NamedTuple):
    """A pair of counts, candidate A first. Used for tallies and totals alike."""
    a: int = 0
    b: int = 0

    @property
    def total(self) -> int:
        return self.a + self.b


class VoteShare(NamedTuple):
    a: float
    b: float


class CountyRecord(NamedTuple):
    state: str
    lat: float
    lng: float
    winner: str  # 'A' or 'B'


class StateSummary(NamedTuple):
    state: str
    a: int
    b: int
    total: int
    pct_a: float
    pct_b: float
    winner: str  # 'A', 'B' or 'Tie'
    electoral_votes: int


class PartialReport(NamedTuple):
    hour: int
    reported: int
    total_states: int
    reported_pct: float
    states: List[str]
    popular: VoteCount
    electoral: VoteCount


@dataclass(frozen=True)
class CandidateLabels:
    a: str = params.DEFAULT_CANDIDATES[0]
    b: str = params.DEFAULT_CANDIDATES[1]

    def label(self, winner: str) -> str:
        if winner == 'A':
            return self.a
        if winner == 'B':
            return self.b
        return "Tie"


@dataclass(frozen=True)
class ElectionData:
    """State-level inputs, read-only once built.

    electoral_votes: state id -> electoral votes
    results: state id -> VoteCount
    """
    electoral_votes: Mapping[str, int] = field(default_factory=dict)
    results: Mapping[str, VoteCount] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "electoral_votes", MappingProxyType(dict(self.electoral_votes)))
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))
