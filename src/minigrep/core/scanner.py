# src/minigrep/core/scanner.py
import sys
from typing import Iterable, Iterator, Optional, TextIO

from minigrep.errors import FileReadError
from minigrep.models import RunConfig
from minigrep.utils.highlight import highlight


def decode_line(raw: bytes) -> str:
    """Decodes one UTF-8 line, dropping a trailing '\\n' and then a trailing '\\r'."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw.decode("utf-8")


class LineScanner:
    def __init__(self, config: RunConfig, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.config = config
        self.out = out
        self.err = err
        self.effective_pattern = config.pattern.lower() if config.case_insensitive else config.pattern

    def is_match(self, line: str) -> bool:
        haystack = line.lower() if self.config.case_insensitive else line
        return self.effective_pattern in haystack

    def should_emit(self, is_match: bool) -> bool:
        return is_match != self.config.invert_match

    def format_line(self, path: str, line_number: int, line: str, is_match: bool) -> str:
        """Assembles '<path>: <n>: <body>' according to the enabled options."""
        cfg = self.config
        prefix = ""
        if cfg.show_filenames:
            prefix += f"{path}: "
        if cfg.show_line_numbers:
            prefix += f"{line_number}: "

        if cfg.color_output and is_match and not cfg.invert_match:
            body = highlight(line, self.effective_pattern, cfg.case_insensitive)
        else:
            body = line
        return prefix + body

    def search_file(self, path: str) -> Iterator[str]:
        """
        Yields the formatted output lines for one file.
        Lines are split on '\\n' only and decoded one at a time, so a bad
        byte raises FileReadError after the earlier lines were yielded.
        """
        try:
            with open(path, "rb") as f:
                # Line numbers count every line read, emitted or not
                for line_number, raw in enumerate(f, start=1):
                    line = decode_line(raw)
                    matched = self.is_match(line)
                    if self.should_emit(matched):
                        yield self.format_line(path, line_number, line, matched)
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, e) from e

    def scan(self, paths: Iterable[str]) -> int:
        """
        Searches each file in order, printing results to stdout.
        Unreadable files are reported on stderr and skipped.
        Returns the number of files that failed.
        """
        out = self.out or sys.stdout
        err = self.err or sys.stderr
        failures = 0

        for path in paths:
            try:
                for output_line in self.search_file(path):
                    print(output_line, file=out)
            except FileReadError as e:
                failures += 1
                print(str(e), file=err)

        return failures
