"""
I/O utilities for benchmark runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Masks are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordlebench.engine import format_mask


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List, path: str, max_rounds: int) -> str:
    """
    Serialize a batch of GameResult to CSV.

    Schema (columns):
      guesser, answer, solved, rounds, time_ms,
      guess_1, mask_1, ..., guess_<max_rounds>, mask_<max_rounds>

    `rounds` is empty for unsolved games. The winning guess is not part of the
    history, so a game won in round k fills k-1 guess/mask pairs.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["guesser", "answer", "solved", "rounds", "time_ms"]
    for i in range(1, max_rounds + 1):
        fields += [f"guess_{i}", f"mask_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "guesser": r.guesser_id,
                "answer": r.answer,
                "solved": r.solved,
                "rounds": "" if r.rounds is None else r.rounds,
                "time_ms": round(float(r.time_ms), 3),
            }

            # Expand history into fixed columns (Excel-safe masks)
            hist = r.history
            for i in range(1, max_rounds + 1):
                if i <= len(hist):
                    rec = hist[i - 1]
                    row[f"guess_{i}"] = rec.word
                    row[f"mask_{i}"] = _excel_safe_pattern(format_mask(rec.mask))
                else:
                    row[f"guess_{i}"] = ""
                    row[f"mask_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (guesser, paths, max_rounds, seed, sample, outdir)
      - answers: output of datasets.validate_answers(...)
      - summary: output of harness.summarize(...)
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
