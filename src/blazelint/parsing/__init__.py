"""
Plan parsing from line-oriented and JSON inputs.
"""

from .parser import parse_file, parse_json, parse_lines, parse_records

__all__ = ["parse_file", "parse_json", "parse_lines", "parse_records"]
