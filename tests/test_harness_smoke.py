import csv
import json

from packages.harness import run_case, run_batch, write_csv, write_manifest, summarize, pretty_stats


def test_run_case_smoke():
    r = run_case("first_candidate", "7890")
    assert r["success"] is True and r["outcome"] == "solved"
    assert r["guesses"] == 5
    assert r["history"][0] == ("0123", "0A1B")
    assert r["history"][-1] == ("7890", "4A0B")
    assert r["remaining"][0] == 5040
    assert r["strategy_id"] == "first_candidate"


def test_run_case_round_budget():
    r = run_case("first_candidate", "7890", max_rounds=2)
    assert r["success"] is False and r["outcome"] == "budget" and r["guesses"] == 2


def test_run_batch_and_stats():
    results = run_batch("random_consistent", ["0123", "9876", "5031"], seed=42)
    assert len(results) == 3 and all(r["success"] for r in results)
    s = summarize(results)
    assert s["games"] == 3 and s["success_rate"] == 1.0
    assert sum(s["histogram"].values()) == 3
    assert s["max_guesses"] >= s["median_guesses"] >= 1
    assert "games=3" in pretty_stats(s)


def test_summarize_empty():
    assert summarize([])["games"] == 0


def test_write_csv_and_manifest(tmp_path):
    results = run_batch("first_candidate", ["7890", "0123"])
    out = write_csv(results, str(tmp_path / "run.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["secret"] == "'7890"
    assert rows[0]["guess_1"] == "'0123" and rows[0]["fb_1"] == "0A1B"
    assert rows[1]["guesses"] == "1" and rows[1]["guess_5"] == ""

    m = write_manifest({"stats": summarize(results)}, str(tmp_path / "m" / "manifest.json"))
    assert json.loads(open(m, encoding="utf-8").read())["stats"]["games"] == 2
