# apps/cli/run.py
"""
CLI entry point for strategy comparison runs.

This script:
  1) Builds one Session per strategy on a (holes, colors) board.
  2) Plays every possible hidden code (or a seeded sample) `--runs` times,
     with a live progress indicator.
  3) Prints the average and maximum number of guesses per strategy and,
     when --outdir is given, writes:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, summaries, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from mastermind.game import DEFAULT_MAX_TURNS
from mastermind.harness import run_sweep, summarize
from mastermind.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from mastermind.solvers import get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


class _Progress:
    """Progress callback for run_sweep: tqdm bar, throttled stderr ticker, or nothing."""

    def __init__(self, label: str, total: int, mode: str):
        self.label = label
        self.total = total
        self.mode = mode
        self.done = 0
        self.start = time.time()
        self.last_print = 0.0
        self.bar = tqdm(total=total, ncols=80, desc=label, unit="game") if mode == "bar" else None

    def __call__(self, _result) -> None:
        self.done += 1
        if self.bar is not None:
            self.bar.update(1)
        elif self.mode == "plain":
            now = time.time()
            if (now - self.last_print >= 1.0) or (self.done == self.total):
                elapsed = now - self.start
                rate = (self.done / elapsed) if elapsed > 0 else 0.0
                remaining = (self.total - self.done) / rate if rate > 0 else 0.0
                pct = 100.0 * self.done / max(1, self.total)
                sys.stderr.write(
                    f"\r[{self.label}] {self.done}/{self.total} {pct:5.1f}% "
                    f"| elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                self.last_print = now

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
        elif self.mode == "plain":
            sys.stderr.write("\n")
            sys.stderr.flush()


def main():
    """
    Parse CLI args, run each strategy, print summaries and optionally write outputs.
    """
    registered = get_solver_ids()

    ap = argparse.ArgumentParser(description="mastermind: compare solver strategies")
    ap.add_argument("--strategies", nargs="+", default=["first_available", "minimax"],
                    help=f"strategy ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--holes", type=int, default=4, help="code length")
    ap.add_argument("--colors", type=int, default=6, help="number of symbols")
    ap.add_argument("--runs", type=int, default=1,
                    help="how many times to sweep the set of hidden codes")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS, help="guess budget per game")
    ap.add_argument("--sample", type=int,
                    help="play only this many hidden codes (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", help="directory for CSV + manifest output (skipped if unset)")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if len(args.strategies) == 1 and args.strategies[0].lower() == "all":
        todo = registered
    else:
        todo = args.strategies
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown strategy ids: {missing}. Registered: {registered}")

    total_codes = args.colors ** args.holes
    per_run = min(args.sample, total_codes) if args.sample else total_codes
    mode = _progress_mode(args.progress)

    run_id = timestamp_id()
    summaries = {}
    for sid in todo:
        print(f'==== Using "{sid}" strategy ====')
        if sid == "minimax":
            print("WARNING: May take a long time to complete.")

        progress = _Progress(sid, per_run * args.runs, mode)
        try:
            results = run_sweep(
                args.holes, args.colors, sid,
                max_turns=args.max_turns, runs=args.runs,
                sample=args.sample, seed=args.seed,
                on_case=progress if mode != "off" else None,
            )
        except ValueError as e:
            raise SystemExit(str(e)) from e
        finally:
            progress.close()

        summary = summarize(results)
        summaries[sid] = summary
        print(f"The average number of guesses is: {summary['average']:.4f}")
        print(f"The maximum number of guesses is: {summary['maximum']}")
        if summary["losses"]:
            print(f"Games not solved within {args.max_turns} guesses: {summary['losses']}")
        print()

        if args.outdir:
            csv_path = Path(args.outdir) / sid / f"run_{run_id}.csv"
            write_csv(results, str(csv_path), max_turns=args.max_turns)
            print(f"Wrote: {csv_path}")

    if args.outdir:
        manifest_path = Path(args.outdir) / f"run_{run_id}_manifest.json"
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "summary": summaries,
        }, str(manifest_path))
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
