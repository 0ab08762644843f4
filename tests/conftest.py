import matplotlib

matplotlib.use("Agg")

import pytest
from openpyxl import Workbook

from results_reporter.models import VoteCount


def state_info_line(state, ev) -> str:
    # 15 fields: state id in field 1, electoral votes in field 14
    return ",".join(["x", state] + [""] * 12 + [ev])


def write_state_info(path, rows):
    lines = ["State Info,,", "name,abbr,,,"] + [state_info_line(s, ev) for s, ev in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_results(path, rows, sheet="Results"):
    """rows: (state, b_votes, a_votes) written to columns 1, 3 and 4 after two header rows."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet
    ws.append(["2024 Results"])
    ws.append(["#", "State", "Name", "B Votes", "A Votes"])
    for state, b_votes, a_votes in rows:
        ws.append([None, state, None, b_votes, a_votes])
    wb.save(path)
    return path


def write_counties(path, header, rows):
    lines = [header] + [",".join(str(v) for v in r) for r in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def results():
    return {
        "AA": VoteCount(a=60, b=40),
        "BB": VoteCount(a=10, b=90),
    }


@pytest.fixture
def electoral_votes():
    return {"AA": 3, "BB": 5}


@pytest.fixture
def data_files(tmp_path):
    state_info = write_state_info(tmp_path / "State-Info.csv", [("AA", "3"), ("BB", "5 votes"), ("CC", "4")])
    results_xlsx = write_results(tmp_path / "Vote-Results.xlsx", [("AA", 40, 60), ("BB", 90, 10), ("CC", 50, 50)])
    counties = write_counties(
        tmp_path / "Voting-Counties.csv",
        "lat,lng,state_id,a_votes,b_votes",
        [(35.1, -90.2, "aa", 10, 5), (36.0, -91.0, "AA", 3, 3), (40.5, -100.0, "BB", 1, 9)],
    )
    return {
        "state_info": state_info,
        "results": results_xlsx,
        "counties": counties,
        "map_image": tmp_path / "missing_map.png",
        "out_dir": tmp_path / "plots",
    }
