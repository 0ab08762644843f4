"""Load the three inputs: electoral votes (state-info CSV), vote results
(xlsx workbook) and county points (counties CSV).

Row-level problems never abort a load. Bad electoral-vote rows are skipped,
bad vote counts become 0, bad county rows are skipped. A missing state-info or
results file raises FileNotFoundError; the counties loader only reports it.
"""
import re
from pathlib import Path
from typing import Dict, List, Optional

from openpyxl import load_workbook

import params
import utils
from .errors import SheetNotFoundError
from .io_utils import read_records
from .models import CountyRecord, VoteCount


_NON_NUMERIC = re.compile(r"[^0-9.]")


def load_electoral_votes(path) -> Dict[str, int]:
    """Return state id -> electoral votes from the state-info table.

    The first two rows are headers. Field 1 holds the state id and field 14 the
    electoral votes, possibly with a unit suffix ("10 votes").
    """
    electoral_votes: Dict[str, int] = {}
    records = read_records(path)
    for i, parts in enumerate(records):
        if i < params.STATE_INFO_HEADER_ROWS:
            continue
        if len(parts) < params.STATE_INFO_MIN_FIELDS:
            continue
        state = utils.normalize_state_id(parts[params.STATE_INFO_ABBR_COL])
        ev_str = _NON_NUMERIC.sub('', parts[params.STATE_INFO_EV_COL].strip())
        if not ev_str:
            continue
        try:
            electoral_votes[state] = int(float(ev_str))
        except (ValueError, OverflowError):
            print(f"Warning: skipping invalid EV for {state}: {ev_str}")
    print(f"Loaded {len(electoral_votes)} state electoral entries.")
    return electoral_votes


def coerce_count(value) -> int:
    """Vote count from a worksheet cell: numbers truncate, text parses as int, anything else is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    if isinstance(value, str):
        return utils.safe_int(value.strip())
    return 0


def _cell_text(value) -> str:
    # numeric state cells are tolerated; 12.0 reads back as "12"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return utils.normalize_state_id(value)


def _cell(row, idx):
    return row[idx] if len(row) > idx else None


def load_vote_results(path, sheet_name: str = params.RESULTS_SHEET) -> Dict[str, VoteCount]:
    """Return state id -> VoteCount from the results workbook.

    Column 1 is the state id, column 3 candidate B and column 4 candidate A.
    The named sheet is preferred; otherwise the first sheet is used.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    results: Dict[str, VoteCount] = {}
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        if sheet_name in wb.sheetnames:
            ws = wb[sheet_name]
        elif wb.worksheets:
            ws = wb.worksheets[0]
            print(f"Warning: sheet '{sheet_name}' not found in {path.name}, using '{ws.title}'")
        else:
            raise SheetNotFoundError(f"No sheets in workbook: {path}")

        for row in ws.iter_rows(min_row=params.RESULTS_HEADER_ROWS + 1, values_only=True):
            state_cell = _cell(row, params.RESULTS_ABBR_COL)
            b_cell = _cell(row, params.RESULTS_B_COL)
            a_cell = _cell(row, params.RESULTS_A_COL)
            if state_cell is None or b_cell is None or a_cell is None:
                continue
            state = _cell_text(state_cell)
            if not state:
                continue
            results[state] = VoteCount(a=coerce_count(a_cell), b=coerce_count(b_cell))
    finally:
        wb.close()

    print(f"Loaded {len(results)} state vote results.")
    return results


def resolve_columns(headers: List[str]) -> Dict[str, Optional[int]]:
    """Map each county field to its column index using the accepted header spellings."""
    idx = {h.strip().lower(): i for i, h in enumerate(headers)}
    resolved: Dict[str, Optional[int]] = {}
    for key, aliases in params.COUNTY_HEADER_ALIASES.items():
        resolved[key] = next((idx[a] for a in aliases if a in idx), None)
    return resolved


def load_counties(path) -> List[CountyRecord]:
    """Return county points in file order. Never raises; problems are printed."""
    counties: List[CountyRecord] = []
    try:
        records = read_records(path)
    except FileNotFoundError:
        print(f"Warning: counties CSV not found: {path}")
        return counties

    headers = next(records, None)
    if headers is None:
        print(f"Warning: counties CSV is empty: {path}")
        return counties

    cols = resolve_columns(headers)
    if any(i is None for i in cols.values()):
        print("Warning: header mismatch, expected lat,lng,state_id,a_votes,b_votes")
        print(f"Found headers: {[h.strip() for h in headers]}")
        return counties

    last_col = max(cols.values())
    for parts in records:
        if len(parts) <= last_col:
            continue
        try:
            lat = float(parts[cols["lat"]])
            lng = float(parts[cols["lng"]])
            a_votes = int(parts[cols["a_votes"]])
            b_votes = int(parts[cols["b_votes"]])
        except ValueError:
            continue
        state = utils.normalize_state_id(parts[cols["state"]])
        winner = 'A' if a_votes > b_votes else 'B'
        counties.append(CountyRecord(state, lat, lng, winner))

    print(f"Loaded {len(counties)} counties for visualization.")
    return counties
