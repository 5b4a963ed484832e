from .validator import validate_codes, pretty_summary
from .io import read_lines, read_codes, write_lines

__all__ = ["validate_codes", "pretty_summary", "read_lines", "read_codes", "write_lines"]
