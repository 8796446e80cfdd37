# src/minigrep/core/expander.py
import os
from pathlib import Path
from typing import Iterable, Iterator


def walk_files(directory: str) -> Iterator[str]:
    """Yields every regular file below directory, in os.walk order."""
    # Symlinks are neither followed nor reported, so each directory is entered once
    for root, _dirs, files in os.walk(directory):
        for name in files:
            file_path = os.path.join(root, name)
            if os.path.isfile(file_path) and not os.path.islink(file_path):
                yield file_path


def expand_targets(targets: Iterable[str], recursive: bool) -> Iterator[str]:
    """
    Turns command-line targets into the ordered list of files to scan.
    Without recursion every target is passed through verbatim, even a
    directory (it fails later when opened). Missing paths also pass through.
    """
    for target in targets:
        if recursive and Path(target).is_dir():
            yield from walk_files(target)
        else:
            yield target
