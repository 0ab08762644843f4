"""Aggregate state vote tallies into percentages, popular totals and electoral totals.

All functions are pure: they take the loaded maps and return new values.
"""
from typing import Dict, Iterable, Mapping, Optional

import pandas as pd

import utils
from .errors import StateNotFoundError
from .models import StateSummary, VoteCount, VoteShare


def winner_of(votes: VoteCount) -> str:
    """'A' or 'B' for a strict majority, 'Tie' otherwise."""
    if votes.a > votes.b:
        return 'A'
    if votes.b > votes.a:
        return 'B'
    return 'Tie'


def vote_share(votes: VoteCount) -> Optional[VoteShare]:
    total = votes.total
    if total <= 0:
        return None
    return VoteShare(a=votes.a * 100.0 / total, b=votes.b * 100.0 / total)


def state_percentages(results: Mapping[str, VoteCount]) -> Dict[str, VoteShare]:
    """Percent of the two-candidate vote per state. States with no votes are left out."""
    shares = {}
    for state, votes in results.items():
        share = vote_share(votes)
        if share is not None:
            shares[state] = share
    return shares


def popular_totals(results: Mapping[str, VoteCount], states: Optional[Iterable[str]] = None) -> VoteCount:
    keys = results.keys() if states is None else states
    a_total = 0
    b_total = 0
    for state in keys:
        votes = results[state]
        a_total += votes.a
        b_total += votes.b
    return VoteCount(a_total, b_total)


def electoral_totals(results: Mapping[str, VoteCount], electoral_votes: Mapping[str, int],
                     states: Optional[Iterable[str]] = None) -> VoteCount:
    """Winner-take-all electoral votes. Ties award nobody; states without an allocation add nothing."""
    keys = results.keys() if states is None else states
    a_ev = 0
    b_ev = 0
    for state in keys:
        ev = electoral_votes.get(state, 0)
        winner = winner_of(results[state])
        if winner == 'A':
            a_ev += ev
        elif winner == 'B':
            b_ev += ev
    return VoteCount(a_ev, b_ev)


def state_summary(state: str, results: Mapping[str, VoteCount], electoral_votes: Mapping[str, int]) -> StateSummary:
    key = utils.normalize_state_id(state)
    if key not in results:
        raise StateNotFoundError(key)
    votes = results[key]
    # a state with no votes reports 0% for both rather than dividing by zero
    share = vote_share(votes) or VoteShare(0.0, 0.0)
    return StateSummary(
        state=key,
        a=votes.a,
        b=votes.b,
        total=votes.total,
        pct_a=share.a,
        pct_b=share.b,
        winner=winner_of(votes),
        electoral_votes=electoral_votes.get(key, 0),
    )


def results_frame(results: Mapping[str, VoteCount], electoral_votes: Mapping[str, int]) -> pd.DataFrame:
    """One row per state, sorted by state id.

    Columns: abbr, A_votes, B_votes, total_votes, A_pct, B_pct, margin, margin_str,
    winner, electoral_votes. Percentages and margin are NaN for states with no votes.
    """
    rows = []
    for state in sorted(results):
        votes = results[state]
        share = vote_share(votes)
        margin = (votes.a - votes.b) / votes.total if votes.total > 0 else None
        rows.append({
            'abbr': state,
            'A_votes': votes.a,
            'B_votes': votes.b,
            'total_votes': votes.total,
            'A_pct': share.a if share else float('nan'),
            'B_pct': share.b if share else float('nan'),
            'margin': margin if margin is not None else float('nan'),
            'margin_str': utils.margin_str(margin),
            'winner': winner_of(votes),
            'electoral_votes': electoral_votes.get(state, 0),
        })
    columns = ['abbr', 'A_votes', 'B_votes', 'total_votes', 'A_pct', 'B_pct',
               'margin', 'margin_str', 'winner', 'electoral_votes']
    return pd.DataFrame(rows, columns=columns)
