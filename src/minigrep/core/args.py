# src/minigrep/core/args.py
from typing import Dict, List, Sequence

from minigrep.config import FLAG_FIELDS, HELP_TOKENS
from minigrep.errors import ArgumentParseError
from minigrep.models import RunConfig


def is_flag_cluster(token: str) -> bool:
    return token.startswith("-") and len(token) >= 2


def parse_args(tokens: Sequence[str]) -> RunConfig:
    """
    Builds a RunConfig from command-line tokens (program name excluded).

    - '-h' / '--help' request help and take no argument.
    - Any other '-xyz' token is a cluster of single-character flags.
      Unknown characters (including a stray '-') are ignored.
    - Everything else is an operand: the first is the pattern, the rest
      are targets.
    """
    flags: Dict[str, bool] = {}
    operands: List[str] = []

    for token in tokens:
        if not isinstance(token, str):
            raise ArgumentParseError(f"Unsupported argument: {token!r}")

        if token in HELP_TOKENS:
            flags["help_requested"] = True
            continue

        if is_flag_cluster(token):
            for ch in token[1:]:
                field = FLAG_FIELDS.get(ch)
                if field:
                    flags[field] = True
            continue

        operands.append(token)

    pattern = operands[0] if operands else ""
    targets = tuple(operands[1:])

    return RunConfig(pattern=pattern, targets=targets, **flags)
