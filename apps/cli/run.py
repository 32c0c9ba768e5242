# apps/cli/run.py
"""
CLI entry point for running wordlebench benchmarks.

This script:
  1) Validates the answer list (prints counts + SHA).
  2) Loads the list and instantiates the requested guesser.
  3) Plays one game per answer with a live progress indicator, prints a
     summary, and writes:
       - CSV:  per-game results + guess/mask history columns
       - JSON: manifest with config, answer-list hash, summary, git commit
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from wordlebench.datasets import DEFAULT_ANSWERS_PATH, load_answers, validate_answers, pretty_summary
from wordlebench.engine import WORD_LENGTH
from wordlebench.harness import DEFAULT_MAX_ROUNDS, run_batch, summarize
from wordlebench.harness.core import PROGRESS_MODES
from wordlebench.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlebench.harness.report import pretty_summary as pretty_results
from wordlebench.solvers import create_guesser, get_guesser_ids

DEFAULT_ANSWERS = str(DEFAULT_ANSWERS_PATH)


def build_parser() -> argparse.ArgumentParser:
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="wordlebench — run guesser benchmarks")
    ap.add_argument("--guesser", default="naive",
                    help=f"guesser id (one of: {guesser_choices})")
    ap.add_argument("--answers", default=DEFAULT_ANSWERS,
                    help="path to the answers list (whitespace-separated words)")
    ap.add_argument("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS,
                    help="round bound per game (6 for real Wordle rules)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-write", action="store_true", help="print the summary only")
    ap.add_argument(
        "--progress",
        choices=list(PROGRESS_MODES),
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    return ap


def run(argv=None) -> dict:
    """
    Parse CLI args, validate the answer list, run the batch, and write outputs.
    Returns the batch summary.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.sample is not None and args.sample < 1:
        ap.error(f"--sample must be >= 1; got {args.sample}")
    if args.max_rounds < 1:
        ap.error(f"--max-rounds must be >= 1; got {args.max_rounds}")

    if args.guesser not in get_guesser_ids():
        raise SystemExit(f"Unknown guesser id: {args.guesser}. Registered: {get_guesser_ids()}")

    # 1) Validate answer list and print a one-liner summary
    rep = validate_answers(WORD_LENGTH, args.answers)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"answers file not found: {args.answers}")

    # 2) Load list (lowercased, 5-letter a-z tokens only; the rest is skipped)
    answers = load_answers(args.answers)

    # 3) Instantiate guesser by id
    guesser = create_guesser(args.guesser)

    # 4) Choose cases (deterministic sample by seed)
    if args.sample is not None and args.sample < len(answers):
        cases = list(answers)
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    else:
        cases = list(answers)

    # 5) Run batch; the full answer list stays the candidate pool
    results = run_batch(
        guesser, cases, pool=answers, max_rounds=args.max_rounds,
        seed=args.seed, progress=args.progress,
    )
    summary = summarize(results)
    print(f"[{guesser.id}] {pretty_results(summary)}")

    if args.no_write:
        return summary

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_rounds=args.max_rounds)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "answers": rep,
        "num_cases": len(results),
        "guesser_id": guesser.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return summary


def main(argv=None) -> None:
    run(argv)


if __name__ == "__main__":
    main()
