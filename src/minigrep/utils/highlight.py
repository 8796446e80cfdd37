# src/minigrep/utils/highlight.py
from bisect import bisect_left, bisect_right
from typing import List

from minigrep.config import ANSI_RED, ANSI_RESET


def folded_offsets(text: str) -> List[int]:
    """
    offsets[i] is where original character i starts in text.lower().
    Some characters lower-case to more than one code point (e.g. 'İ'),
    so the two strings can differ in length.
    """
    offsets = [0]
    for ch in text:
        offsets.append(offsets[-1] + len(ch.lower()))
    return offsets


def highlight(line: str, pattern: str, case_insensitive: bool = False,
              start: str = ANSI_RED, end: str = ANSI_RESET) -> str:
    """Wraps every non-overlapping occurrence of pattern in line with colour codes."""
    if not pattern:
        return line

    if not case_insensitive:
        haystack, needle = line, pattern
        offsets = None
    else:
        haystack, needle = line.lower(), pattern.lower()
        offsets = folded_offsets(line)

    parts = []
    cursor = 0      # position in line
    search_at = 0   # position in haystack
    while True:
        pos = haystack.find(needle, search_at)
        if pos == -1:
            break
        match_end = pos + len(needle)

        if offsets is None:
            first, last = pos, match_end
        else:
            # Widen to whole original characters
            first = bisect_right(offsets, pos) - 1
            last = min(bisect_left(offsets, match_end), len(line))
            match_end = offsets[last]

        parts.append(line[cursor:first])
        # Slice from the original line so the match keeps its casing
        parts.append(f"{start}{line[first:last]}{end}")
        cursor = last
        search_at = match_end

    parts.append(line[cursor:])
    return "".join(parts)
