from pathlib import Path
from packages.datasets import validate_codes, pretty_summary, read_codes, write_lines


def test_validate_codes_happy_path(tmp_path: Path):
    p = write_lines(["0123", "9876", "5031"], tmp_path / "cases.txt")
    rep = validate_codes(p)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert "OK" in pretty_summary(rep)
    assert read_codes(p) == ["0123", "9876", "5031"]


def test_validate_codes_flags_errors(tmp_path: Path):
    p = tmp_path / "cases.txt"
    p.write_text("0123\n0011\n\n12345\n0123\n", encoding="utf-8")
    rep = validate_codes(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_codes_missing_file(tmp_path: Path):
    rep = validate_codes(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)
