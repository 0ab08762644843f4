import pytest

import analyze_results
from results_reporter.main import ask_candidate_labels, load_data, run
from results_reporter.models import CandidateLabels, VoteCount


def scripted(*answers):
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return ask


def test_full_run_prints_sections_in_order(data_files, capsys):
    code = run(**data_files, ask=scripted("Green", "Magenta", "aa", "12", "bb"))
    out = capsys.readouterr().out
    assert code == 0
    order = ["STATE PERCENTAGES", "POPULAR VOTE", "ELECTION SUMMARY", "Summary for AA", "PARTIAL RESULTS"]
    positions = [out.index(s) for s in order]
    assert positions == sorted(positions)
    assert "Popular Vote Winner: Magenta" in out
    assert "Reporting Time: 12:00 (1/3 states, 33.3%)" in out
    assert "Analysis complete." in out
    plots = data_files["out_dir"]
    assert (plots / "results_totals.png").exists()
    assert (plots / "county_map_national.png").exists()
    assert (plots / "county_map_BB.png").exists()


def test_bad_inputs_only_skip_their_step(data_files, capsys):
    code = run(**data_files, candidate_a="A", candidate_b="B", state="ZZ", hour="soon",
               map_state="", plots=False, ask=scripted())
    out = capsys.readouterr().out
    assert code == 0
    assert "State not found." in out
    assert "Invalid input. Skipping simulation." in out
    assert "PARTIAL RESULTS" not in out
    assert "Analysis complete." in out


def test_missing_file_is_fatal(data_files, tmp_path, capsys):
    data_files["results"] = tmp_path / "missing.xlsx"
    code = run(**data_files, ask=scripted())
    out = capsys.readouterr().out
    assert code == 1
    assert "Error: One or more files not found" in out
    assert "STATE PERCENTAGES" not in out


def test_unexpected_error(data_files, monkeypatch, capsys):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("results_reporter.main.load_counties", boom)
    assert run(**data_files, plots=False, ask=scripted()) == 2
    assert "Unexpected error: boom" in capsys.readouterr().out


def test_load_data_is_read_only(data_files):
    data = load_data(data_files["state_info"], data_files["results"])
    assert data.electoral_votes == {"AA": 3, "BB": 5, "CC": 4}
    assert data.results["CC"] == VoteCount(50, 50)
    with pytest.raises(TypeError):
        data.results["DD"] = VoteCount(1, 1)


def test_load_data_missing_state_info(data_files, tmp_path):
    with pytest.raises(FileNotFoundError):
        load_data(tmp_path / "missing.csv", data_files["results"])


def test_candidate_labels_default_on_blank():
    assert ask_candidate_labels(scripted("", "  Rivera ")) == CandidateLabels("Candidate A", "Rivera")


def test_cli(data_files, tmp_path, capsys):
    export = tmp_path / "states.csv"
    code = analyze_results.main([
        "--state-info", str(data_files["state_info"]),
        "--results", str(data_files["results"]),
        "--counties", str(data_files["counties"]),
        "--candidate-a", "Green", "--candidate-b", "Magenta",
        "--state", "CC", "--hour", "24",
        "--timeline", "--export", str(export), "--no-plots",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert "Winner: Tie" in out
    assert "REPORTING TIMELINE" in out
    assert export.exists()


def test_huge_hour_still_runs_every_step(data_files, capsys):
    code = run(**data_files, candidate_a="A", candidate_b="B", state="AA",
               hour="1" + "0" * 400, map_state="", plots=False, ask=scripted())
    out = capsys.readouterr().out
    assert code == 0
    assert "(3/3 states, 100.0%)" in out
    assert "Analysis complete." in out


def test_missing_file_message_names_path_once(data_files, tmp_path, capsys):
    missing = tmp_path / "missing.xlsx"
    data_files["results"] = missing
    assert run(**data_files, plots=False, ask=scripted()) == 1
    out = capsys.readouterr().out
    assert f"Error: One or more files not found: {missing}" in out
    assert "File not found" not in out
