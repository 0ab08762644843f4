"""Thin command-line wrapper around results_reporter.main.run."""
import argparse
import sys

from results_reporter.config import COUNTIES_CSV, MAP_IMAGE, PLOTS_DIR, STATE_INFO_CSV, VOTE_RESULTS_XLSX
from results_reporter.main import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize state election results, simulate partial reporting and plot county winners")
    parser.add_argument("--state-info", default=STATE_INFO_CSV, help="State info CSV (electoral votes in column 15)")
    parser.add_argument("--results", default=VOTE_RESULTS_XLSX, help="Vote results workbook (.xlsx)")
    parser.add_argument("--counties", default=COUNTIES_CSV, help="County results CSV")
    parser.add_argument("--map-image", default=MAP_IMAGE, help="Background image for the county map")
    parser.add_argument("--out-dir", default=PLOTS_DIR, help="Directory for the PNG output")
    parser.add_argument("--candidate-a", default=None)
    parser.add_argument("--candidate-b", default=None)
    parser.add_argument("--state", default=None, help="State ID for the single-state summary (skips the prompt)")
    parser.add_argument("--hour", default=None, help="Reporting cutoff hour, 0-24 (skips the prompt)")
    parser.add_argument("--map-state", default=None, help="State ID for the state county map; '' for none")
    parser.add_argument("--timeline", action="store_true", help="Print partial results every few hours")
    parser.add_argument("--export", default=None, help="Write the per-state table to this CSV")
    parser.add_argument("--no-plots", action="store_true", help="Skip the chart and maps")
    parser.add_argument("--show", action="store_true", help="Open the figures in a window when done")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return run(
        state_info=args.state_info,
        results=args.results,
        counties=args.counties,
        map_image=args.map_image,
        out_dir=args.out_dir,
        candidate_a=args.candidate_a,
        candidate_b=args.candidate_b,
        state=args.state,
        hour=args.hour,
        map_state=args.map_state,
        timeline=args.timeline,
        export=args.export,
        plots=not args.no_plots,
        show=args.show,
    )


if __name__ == "__main__":
    sys.exit(main())
