"""Simulated partial reporting over a 24-hour cycle.

States report in ascending order of their id; by cutoff hour h the first
floor(h / 24 * n) of the n states are in.
"""
import re
from typing import Iterable, List, Mapping, Optional

import params
from .errors import InvalidHourError
from .models import PartialReport, VoteCount
from .tally import electoral_totals, popular_totals


_WHOLE_HOUR = re.compile(r"[+-]?[0-9]+")


def parse_cutoff_hour(text) -> int:
    """Whole hour with an optional sign; underscores, decimals and blanks are rejected."""
    raw = str(text).strip()
    if not _WHOLE_HOUR.fullmatch(raw):
        raise InvalidHourError(text)
    return int(raw)


def reported_count(hour: int, total_states: int) -> int:
    """Number of states reported by `hour`. The hour is not range-checked, the count is clamped."""
    # integer floor division, so arbitrarily large hours never go through float
    count = (hour * total_states) // int(params.HOURS_PER_DAY)
    return max(0, min(count, total_states))


def simulate_partial(results: Mapping[str, VoteCount], electoral_votes: Mapping[str, int],
                     hour: int) -> PartialReport:
    ordered = sorted(results)
    total_states = len(ordered)
    reported = reported_count(hour, total_states)
    states = ordered[:reported]
    reported_pct = (reported * 100.0 / total_states) if total_states else 0.0
    return PartialReport(
        hour=hour,
        reported=reported,
        total_states=total_states,
        reported_pct=reported_pct,
        states=states,
        popular=popular_totals(results, states),
        electoral=electoral_totals(results, electoral_votes, states),
    )


def reporting_timeline(results: Mapping[str, VoteCount], electoral_votes: Mapping[str, int],
                       hours: Optional[Iterable[int]] = None) -> List[PartialReport]:
    if hours is None:
        hours = range(0, int(params.HOURS_PER_DAY) + 1, params.TIMELINE_STEP_HOURS)
    return [simulate_partial(results, electoral_votes, h) for h in hours]
