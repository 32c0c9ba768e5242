"""
Answer-list validator for wordlebench.

What this module does:
- Validate the answers file (whitespace-separated words, one game per word).
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Detect duplicates and invalid tokens; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordlebench.datasets import validate_answers, pretty_summary
    rep = validate_answers(5, "data/answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_tokens: int  # number of invalid tokens encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], List[str]]:
    """
    Split the file on whitespace and sort tokens into (valid, invalid).

    A valid token is already lowercase, a–z only, and exactly N long.
    """
    valid: List[str] = []
    invalid: List[str] = []
    for tok in path.read_text(encoding="utf-8").split():
        if len(tok) == N and tok.isascii() and tok.isalpha() and tok.islower():
            valid.append(tok)
        else:
            invalid.append(tok)
    return valid, invalid


def validate_answers(N: int, answers_path: str) -> Dict:
    """
    Validate the answers list for word length N.

    Returns a JSON-serializable dict (see FileReport). `passed` is strict:
    the file must exist, contain at least one valid word and no invalid tokens.
    Duplicates are reported as an issue but do not fail validation, since a
    repeated answer just means the same game is played twice.
    """
    p = Path(answers_path)
    if not p.exists():
        rep = FileReport(N, answers_path, False, 0, 0, 0, "", False,
                         [f"answers file not found: {answers_path}"])
        return asdict(rep)

    valid, invalid = _load_and_check(p, N)
    unique = set(valid)

    issues: List[str] = []
    if not valid:
        issues.append("answers file contains 0 valid words")
    if invalid:
        # Surface a few examples to debug quickly
        issues.append(f"answers has {len(invalid)} invalid token(s) (e.g., {invalid[:5]})")
    if len(unique) != len(valid):
        issues.append("answers contains duplicate words")

    rep = FileReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(valid),
        unique_count=len(unique),
        invalid_tokens=len(invalid),
        sha256=_sha256_file(p),
        passed=bool(valid) and not invalid,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | answers=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | answers={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_tokens']}, sha={sha}) | {status}"
    )
