import csv
import json

from mastermind.game import new_session
from mastermind.harness import format_code, run_case, run_sweep, summarize, write_csv, write_manifest


def test_run_case_smoke():
    s = new_session(2, 2, "minimax")
    r = run_case(s, (1, 0))
    assert r["success"] is True
    assert r["guesses"] == 3
    assert r["answer"] == (1, 0)
    assert r["history"][-1][0] == (1, 0)
    assert r["solver_id"] == "minimax"


def test_run_sweep_and_summary_2x2():
    results = run_sweep(2, 2, "minimax", runs=2)
    assert len(results) == 8
    summary = summarize(results)
    assert summary["games"] == 8
    assert summary["wins"] == 8 and summary["losses"] == 0
    assert summary["maximum"] <= 3
    assert sum(summary["distribution"].values()) == 8
    assert summary["average"] == sum(r["guesses"] for r in results) / 8


def test_run_sweep_sample_is_seeded():
    a = run_sweep(3, 3, "first_available", sample=5, seed=7)
    b = run_sweep(3, 3, "first_available", sample=5, seed=7)
    assert len(a) == 5
    assert [r["answer"] for r in a] == [r["answer"] for r in b]


def test_summarize_known_values():
    results = [{"guesses": g, "success": g < 20} for g in (1, 3, 3, 5, 20)]
    s = summarize(results)
    assert s["average"] == 6.4
    assert s["maximum"] == 20
    assert s["losses"] == 1
    assert s["distribution"] == {1: 1, 3: 2, 5: 1, 20: 1}
    assert summarize([])["games"] == 0


def test_format_code():
    assert format_code((0, 0, 1, 1)) == "0011"
    assert format_code((10, 2)) == "10.2"


def test_write_outputs(tmp_path):
    results = run_sweep(2, 2, "first_available")
    out = write_csv(results, str(tmp_path / "runs" / "r.csv"), max_turns=4)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert rows[0]["answer"] == "'00"
    assert rows[0]["guess_1"] == "'00" and rows[0]["fb_1"] == "2B0W"
    assert rows[0]["guess_2"] == ""

    m = write_manifest({"run_id": "x", "summary": summarize(results)}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["summary"]["games"] == 4
