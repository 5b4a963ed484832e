"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, stats, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Codes are prefixed with an apostrophe to keep Excel from reading "0123"
  as the number 123 (the leading zero is part of the code).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_code(code: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "0123" -> "'0123"
    """
    return "'" + code if code else code


def write_csv(results: List[Dict], path: str, max_turns: int | None = None) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      strategy, secret, success, outcome, guesses, time_ms,
      guess_1, fb_1, guess_2, fb_2, ..., guess_max_turns, fb_max_turns

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.
      max_turns: number of guess/feedback column pairs; defaults to the
                 longest game in `results`.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["strategy", "secret", "success", "outcome", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"fb_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "strategy": r.get("strategy_id", "?"),
                "secret": _excel_safe_code(r["secret"]),
                "success": r["success"],
                "outcome": r.get("outcome", ""),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns; longer games are truncated
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = _excel_safe_code(g)
                    row[f"fb_{i}"] = fb
                else:
                    row[f"guess_{i}"] = ""
                    row[f"fb_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (strategy, sample, seed, cases, outdir)
      - cases: output of datasets.validate_codes(...) when a case file is used
      - stats: output of harness.stats.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
