"""
Case-file validator.

A case file lists secrets to benchmark against, one code per line
(e.g. written by script/write_codes.py).

What this module does:
- Enforce formatting rules (4 decimal digits, all distinct, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_codes, pretty_summary
    rep = validate_codes("cases/sample_500.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import is_valid


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class CodesReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID codes
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid codes
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], List[int]]:
    """
    Load codes from a text file and validate them.

    Rules:
      - one code per line (surrounding whitespace ignored)
      - must be a valid code (see engine.codes.is_valid)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_codes, invalid_line_numbers)
    """
    valid: List[str] = []
    invalid: List[int] = []

    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            code = raw.strip()
            if is_valid(code):
                valid.append(code)
            else:
                invalid.append(lineno)

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_codes(path: str) -> Dict:
    """
    Validate a case file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see CodesReport schema) with counts,
        SHA-256, duplicate/invalid diagnostics, a strict `passed` flag
        (non-empty and no invalid lines) and `issues` (list of strings).
    """
    p = Path(path)
    if not p.exists():
        rep = CodesReport(path, False, 0, "", 0, 0, issues=[f"case file not found: {path}"])
        return asdict(rep)

    codes, invalid = _load_and_check(p)
    rep = CodesReport(
        path=str(p),
        exists=True,
        count=len(codes),
        sha256=_sha256_file(p),
        unique_count=len(set(codes)),
        invalid_lines=len(invalid),
    )

    if rep.count == 0:
        rep.issues.append("case file contains 0 valid codes")
    if invalid:
        # Surface a few line numbers to debug quickly
        rep.issues.append(f"{len(invalid)} invalid line(s) (e.g., lines {invalid[:5]})")
    if rep.count != rep.unique_count:
        rep.issues.append("case file contains duplicate codes")

    rep.passed = rep.count > 0 and not invalid
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        cases=cases/all.txt | codes=5040 (uniq=5040, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"cases={report['path']} | codes={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
