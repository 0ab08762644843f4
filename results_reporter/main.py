from typing import Callable, Optional

from .config import BANNER, COUNTIES_CSV, MAP_IMAGE, PLOTS_DIR, STATE_INFO_CSV, VOTE_RESULTS_XLSX
from .errors import InvalidHourError, SheetNotFoundError, StateNotFoundError
from .loaders import load_counties, load_electoral_votes, load_vote_results
from .models import CandidateLabels, ElectionData
from .partial import parse_cutoff_hour, reporting_timeline, simulate_partial
from .plots import plot_county_map, plot_totals, show_figures
from .report import (
    export_state_table,
    print_electoral_summary,
    print_partial_report,
    print_popular_vote,
    print_state_percentages,
    print_state_summary,
    print_timeline,
)
from .tally import electoral_totals, popular_totals, results_frame, state_percentages, state_summary


def _answer(given: Optional[str], prompt: str, ask: Callable[[str], str]) -> str:
    if given is not None:
        return given
    try:
        return ask(prompt)
    except EOFError:
        return ''


def ask_candidate_labels(ask: Callable[[str], str], a: Optional[str] = None, b: Optional[str] = None) -> CandidateLabels:
    defaults = CandidateLabels()
    a = _answer(a, f"Enter name for candidate A [{defaults.a}]: ", ask).strip() or defaults.a
    b = _answer(b, f"Enter name for candidate B [{defaults.b}]: ", ask).strip() or defaults.b
    return CandidateLabels(a, b)


def load_data(state_info=STATE_INFO_CSV, results=VOTE_RESULTS_XLSX) -> ElectionData:
    return ElectionData(
        electoral_votes=load_electoral_votes(state_info),
        results=load_vote_results(results),
    )


def run(
    state_info=STATE_INFO_CSV,
    results=VOTE_RESULTS_XLSX,
    counties=COUNTIES_CSV,
    map_image=MAP_IMAGE,
    out_dir=PLOTS_DIR,
    candidate_a: Optional[str] = None,
    candidate_b: Optional[str] = None,
    state: Optional[str] = None,
    hour: Optional[str] = None,
    map_state: Optional[str] = None,
    timeline: bool = False,
    export: Optional[str] = None,
    plots: bool = True,
    show: bool = False,
    ask: Callable[[str], str] = input,
) -> int:
    """Load, compute, print, simulate and render. Returns a process exit code."""
    print(BANNER)
    try:
        labels = ask_candidate_labels(ask, candidate_a, candidate_b)

        data = load_data(state_info, results)
        county_points = load_counties(counties)

        percentages = state_percentages(data.results)
        popular = popular_totals(data.results)
        electoral = electoral_totals(data.results, data.electoral_votes)

        print_state_percentages(percentages, labels)
        print_popular_vote(popular, labels)
        print_electoral_summary(electoral, popular, labels)

        if export:
            export_state_table(results_frame(data.results, data.electoral_votes), export)

        summary_state = _answer(state, "\nEnter State ID for summary: ", ask)
        try:
            print_state_summary(state_summary(summary_state, data.results, data.electoral_votes), labels)
        except StateNotFoundError:
            print("State not found.")

        raw_hour = _answer(hour, "\nEnter report cutoff hour (e.g., 12 or 18): ", ask)
        try:
            report = simulate_partial(data.results, data.electoral_votes, parse_cutoff_hour(raw_hour))
            print_partial_report(report, labels)
        except InvalidHourError:
            print("Invalid input. Skipping simulation.")

        if timeline:
            print_timeline(reporting_timeline(data.results, data.electoral_votes), labels)

        if plots:
            chart = plot_totals(popular, electoral, labels, out_dir, show=show)
            print(f"Wrote {chart}")
            national = plot_county_map(county_points, labels, out_dir, background=map_image, show=show)
            print(f"Wrote {national}")

            focus = _answer(map_state, "\nEnter a State ID to plot (e.g., CA, TX, PA): ", ask).strip()
            if focus:
                state_map = plot_county_map(county_points, labels, out_dir, state=focus,
                                            background=map_image, show=show)
                print(f"Wrote {state_map}")

        print("\nAnalysis complete.")
        if plots and show:
            show_figures()
        return 0
    except (FileNotFoundError, SheetNotFoundError) as e:
        print(f"Error: One or more files not found: {e}")
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}")
        return 2
