from __future__ import annotations

from typing import List


def parse_csv_line(line: str) -> List[str]:
    """Split a single CSV line into raw field values.

    Double quotes group text containing commas, and a doubled quote inside a
    quoted section yields a literal quote. The last field is always emitted,
    so a trailing comma produces a trailing empty string. Unbalanced quotes
    are tolerated: whatever was accumulated is returned as-is.
    """
    values: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1  # skip escaped quote
            else:
                in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            values.append(''.join(current))
            current = []
        else:
            current.append(char)
        i += 1

    values.append(''.join(current))
    return values
