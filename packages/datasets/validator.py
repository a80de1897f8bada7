"""
Start-word list validator.

What this module does:
- Validate the start-word resource (one root word per line, no header).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters).
- Detect duplicates, blank and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

A missing file is reported (exists=False, passed=False) rather than raised;
the game itself treats a missing resource as fatal, see packages.game.

Typical use:
    from packages.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class StartWordsReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # blank or malformed lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Rules:
      - one word per line, surrounding whitespace ignored
      - must be lowercase a–z, at least `min_length` letters
      - empty/whitespace-only lines are INVALID
        (a trailing newline at EOF does not produce an empty line)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_start_words(path: str, min_length: int = 3) -> Dict:
    """
    Validate a start-word list.

    Returns a JSON-serializable dict (see StartWordsReport). `passed` is strict:
    file exists, at least one valid word, no invalid lines, no duplicates.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"start-word file not found: {path}")
        return asdict(StartWordsReport(path, False, 0, 0, 0, "", False, issues))

    words, invalid = _load_and_check(p, min_length)
    unique_count = len(set(words))

    if not words:
        issues.append("start-word file contains 0 valid words")
    if invalid:
        issues.append(f"start-word file has {invalid} invalid line(s)")
    if unique_count != len(words):
        issues.append("start-word file contains duplicate lines")

    rep = StartWordsReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique_count,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console output.

    Example:
        start.txt | words=120 (uniq=120, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
