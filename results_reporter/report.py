from pathlib import Path
from typing import List, Mapping

import pandas as pd

from .io_utils import ensure_dir
from .models import CandidateLabels, PartialReport, StateSummary, VoteCount, VoteShare
from .tally import winner_of


def section(title: str):
    print(f"\n========== {title} ==========")


def print_state_percentages(percentages: Mapping[str, VoteShare], labels: CandidateLabels):
    section("STATE PERCENTAGES")
    for state in sorted(percentages):
        pct = percentages[state]
        print(f"{state}: {labels.a} {pct.a:.2f}% | {labels.b} {pct.b:.2f}%")


def print_popular_vote(totals: VoteCount, labels: CandidateLabels):
    section("POPULAR VOTE")
    print(f"{labels.a} Total Votes: {totals.a}")
    print(f"{labels.b} Total Votes: {totals.b}")
    winner = winner_of(totals)
    if winner == 'Tie':
        print("Popular Vote Result: Tie")
    else:
        print(f"Popular Vote Winner: {labels.label(winner)}")


def summary_table(popular: VoteCount, electoral: VoteCount, labels: CandidateLabels) -> pd.DataFrame:
    return pd.DataFrame({
        'Candidate': [labels.a, labels.b],
        'Popular Votes': [popular.a, popular.b],
        'Electoral Votes': [electoral.a, electoral.b],
    })


def print_electoral_summary(electoral: VoteCount, popular: VoteCount, labels: CandidateLabels):
    section("ELECTION SUMMARY")
    print(summary_table(popular, electoral, labels).to_string(index=False))
    winner = winner_of(electoral)
    if winner == 'Tie':
        print("Result: Tie")
    else:
        print(f"Winner: {labels.label(winner)}")


def print_state_summary(summary: StateSummary, labels: CandidateLabels):
    print(f"\nSummary for {summary.state}")
    print(f"Total Votes: {summary.total}")
    print(f"{labels.a}: {summary.a} ({summary.pct_a:.2f}%)")
    print(f"{labels.b}: {summary.b} ({summary.pct_b:.2f}%)")
    print(f"Winner: {labels.label(summary.winner)}")
    print(f"Electoral Votes: {summary.electoral_votes}")


def print_partial_report(report: PartialReport, labels: CandidateLabels):
    section("PARTIAL RESULTS")
    print(f"Reporting Time: {report.hour:02d}:00 "
          f"({report.reported}/{report.total_states} states, {report.reported_pct:.1f}%)")
    print(f"{labels.a} Partial Votes: {report.popular.a}")
    print(f"{labels.b} Partial Votes: {report.popular.b}")
    print(f"{labels.a} Partial EV: {report.electoral.a}")
    print(f"{labels.b} Partial EV: {report.electoral.b}")


def print_timeline(reports: List[PartialReport], labels: CandidateLabels):
    section("REPORTING TIMELINE")
    df = pd.DataFrame([{
        'Hour': f"{r.hour:02d}:00",
        'States': f"{r.reported}/{r.total_states}",
        'Reported %': round(r.reported_pct, 1),
        f'{labels.a} Votes': r.popular.a,
        f'{labels.b} Votes': r.popular.b,
        f'{labels.a} EV': r.electoral.a,
        f'{labels.b} EV': r.electoral.b,
    } for r in reports])
    print(df.to_string(index=False))


def export_state_table(frame: pd.DataFrame, path) -> Path:
    path = Path(path)
    ensure_dir(path.parent)
    frame.to_csv(path, index=False)
    print(f"Wrote {path} with {len(frame):,} rows")
    return path
