# src/minigrep/models.py
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class RunConfig:
    """Immutable options for a single search run."""
    case_insensitive: bool = False
    show_line_numbers: bool = False
    invert_match: bool = False
    recursive: bool = False
    show_filenames: bool = False
    color_output: bool = False
    help_requested: bool = False
    pattern: str = ""
    targets: Tuple[str, ...] = ()

    @property
    def should_search(self) -> bool:
        return not self.help_requested and bool(self.pattern) and bool(self.targets)
