from __future__ import annotations

import re
from dataclasses import dataclass, field

"""Delimited-text (CSV) parser for published spreadsheet exports.

- First non-blank line is the header row, every following non-blank line
  is one data row.
- Double quotes protect commas; a doubled quote inside a quoted field is a
  literal quote. An unmatched quote keeps the rest of the line quoted.
- Records never span physical lines: the text is split on line breaks
  before fields are scanned.
"""

__all__ = [
    "ParsedSheet",
    "parse_csv",
    "parse_csv_line",
]

_LINE_BREAK_RE = re.compile(r"\r?\n")
_BOM = "\ufeff"


@dataclass
class ParsedSheet:
    headers: list[str] = field(default_factory=list)
    rows: list[dict[str, str]] = field(default_factory=list)  # header -> trimmed value


def parse_csv_line(line: str) -> list[str]:
    """Split one line into raw (untrimmed) fields."""
    out: list[str] = []
    cur: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                cur.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            out.append("".join(cur))
            cur = []
        else:
            cur.append(ch)
        i += 1
    out.append("".join(cur))
    return out


def parse_csv(text: str) -> ParsedSheet:
    """Parse a whole export into headers and header-keyed rows.

    Short rows are padded with ``''``; fields past the last header are
    dropped since they have no name to be addressed by.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    lines = [line for line in _LINE_BREAK_RE.split(text) if line.strip() != ""]
    if not lines:
        return ParsedSheet()

    headers = [h.strip() for h in parse_csv_line(lines[0])]
    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        row: dict[str, str] = {}
        for i, header in enumerate(headers):
            row[header] = values[i].strip() if i < len(values) else ""
        rows.append(row)
    return ParsedSheet(headers=headers, rows=rows)
