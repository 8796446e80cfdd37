# src/minigrep/cli.py
import sys
from typing import List, Optional

# Module imports
from minigrep.config import USAGE_TEXT
from minigrep.core.args import parse_args
from minigrep.core.expander import expand_targets
from minigrep.core.scanner import LineScanner
from minigrep.errors import ArgumentParseError, UsageError
from minigrep.models import RunConfig


def print_usage():
    print(USAGE_TEXT, end="")


def load_config(argv: List[str]) -> RunConfig:
    """Parses argv, raising UsageError when no search should run."""
    config = parse_args(argv)
    if not config.should_search:
        raise UsageError("help requested or pattern/targets missing")
    return config


def run(config: RunConfig) -> int:
    files = expand_targets(config.targets, config.recursive)
    scanner = LineScanner(config)
    return scanner.scan(files)


def main(argv: Optional[List[str]] = None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        # 1. Arguments
        try:
            config = load_config(argv)
        except ArgumentParseError as e:
            print_usage()
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(e.exit_code)
        except UsageError:
            print_usage()
            return

        # 2. Expand targets and scan; read errors are reported per file
        run(config)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

if __name__ == "__main__":
    main()
