"""
I/O utilities for experiment runs.

Responsibilities:
- format_code:   compact text form of a code ("0011", or "10.2.0.11" past 9).
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Codes are prefixed with an apostrophe so spreadsheet apps keep them as
  text ("0011" would otherwise display as 11).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence
import csv
import json
import subprocess
import datetime as dt


def format_code(code: Sequence[int]) -> str:
    if all(0 <= s <= 9 for s in code):
        return "".join(str(s) for s in code)
    return ".".join(str(s) for s in code)


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "0011" -> "'0011"
    """
    return "'" + text if text else text


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, run, answer, success, guesses, time_ms,
      guess_1, fb_1, guess_2, fb_2, ..., guess_<max_turns>, fb_<max_turns>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "run", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"fb_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "run": r.get("run", 1),
                "answer": _excel_safe(format_code(r["answer"])),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = _excel_safe(format_code(g))
                    row[f"fb_{i}"] = f"{fb[0]}B{fb[1]}W"
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
      - config: CLI args (strategies, holes, colors, runs, seed, sample)
      - summary: output of harness.summarize(...) per strategy
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
