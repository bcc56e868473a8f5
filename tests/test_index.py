import os

import pytest

from scheduler_sim.index import main


@pytest.fixture
def process_file(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("1,5,0\n2,3,1\n3,2,2\n")
    return str(path)


def _run(argv, tmp_path):
    return main(argv + ["--log-file", str(tmp_path / "sim.log")])


def _banner(title):
    return "\n" + " " * (len(title) // 2) + " " + title + "\n"


def test_prints_all_reports_in_order(process_file, tmp_path, capsys):
    assert _run([process_file], tmp_path) == 0
    out = capsys.readouterr().out
    titles = ("First-come, first-serve", "Shortest-job-first", "Priority", "Round-robin")
    positions = [out.index(_banner(title)) for title in titles]
    assert positions == sorted(positions)
    assert out.count("Schedule table") == 4


def test_quantum_option_changes_round_robin(process_file, tmp_path, capsys):
    assert _run([process_file, "--quantum", "5"], tmp_path) == 0
    out = capsys.readouterr().out
    rr_section = out[out.index("Round-robin"):]
    assert "0\t5\t8\t10" in rr_section


@pytest.mark.parametrize("argv", [[], ["a.csv", "b.csv"]])
def test_wrong_argument_count_is_usage_error(argv, tmp_path, capsys, caplog):
    assert main(argv) == 1
    assert capsys.readouterr().err.count("usage error") == 1
    assert not caplog.records


def test_bad_quantum_is_usage_error(process_file, tmp_path, capsys):
    assert _run([process_file, "--quantum", "0"], tmp_path) == 1
    assert "usage error" in capsys.readouterr().err


def test_missing_file_is_fatal(tmp_path, capsys):
    assert _run([str(tmp_path / "missing.csv")], tmp_path) == 1
    captured = capsys.readouterr()
    assert "io error" in captured.err
    assert captured.out == ""


def test_bad_data_prints_nothing(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("1,5,0\n2,three,1\n")
    assert _run([str(path)], tmp_path) == 1
    captured = capsys.readouterr()
    assert "data error" in captured.err
    assert captured.out == ""


def test_chart_and_export_options(process_file, tmp_path, capsys):
    chart_dir = tmp_path / "charts"
    base = tmp_path / "report"
    assert _run([process_file, "--chart-dir", str(chart_dir), "--export", str(base)], tmp_path) == 0
    assert sorted(os.listdir(chart_dir)) == [
        "first-come-first-serve.png", "priority.png", "round-robin.png", "shortest-job-first.png",
    ]
    exported = sorted(name for name in os.listdir(tmp_path) if name.startswith("report_"))
    assert len(exported) == 2
    assert exported[0].endswith(".csv") and exported[1].endswith(".json")
    assert "Report saved to:" in capsys.readouterr().out


def test_log_file_records_actions_and_switches(tmp_path, capsys):
    path = tmp_path / "two.csv"
    path.write_text("1,3,0\n2,1,1\n")
    log_path = tmp_path / "verbose.log"
    assert main([str(path), "--log-file", str(log_path), "-v"]) == 0
    text = log_path.read_text()
    assert "INFO: Loaded 2 processes" in text
    assert "INFO: Ran Round-robin over 2 processes" in text
    assert "DEBUG: Shortest-job-first t=1: 1 preempted by 2" in text
    assert "dispatch" in text


def test_log_file_skips_switches_without_verbose(process_file, tmp_path, capsys):
    log_path = tmp_path / "quiet.log"
    assert main([process_file, "--log-file", str(log_path)]) == 0
    text = log_path.read_text()
    assert "Loaded 3 processes" in text
    assert "DEBUG" not in text


def test_bad_data_is_logged(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("1,0,0\n")
    log_path = tmp_path / "err.log"
    assert main([str(path), "--log-file", str(log_path)]) == 1
    assert "ERROR: data error: line 1: burst duration must be positive" in log_path.read_text()
