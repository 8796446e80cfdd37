# src/minigrep/config.py

USAGE_TEXT = """Usage: grep [OPTIONS] <pattern> <files...>

Options:
-i                Case-insensitive search
-n                Print line numbers
-v                Invert match (exclude lines that match the pattern)
-r                Recursive directory search
-f                Print filenames
-c                Enable colored output
-h, --help        Show help information
"""

HELP_TOKENS = ("-h", "--help")

# Short flag character -> RunConfig field
FLAG_FIELDS = {
    "i": "case_insensitive",
    "n": "show_line_numbers",
    "v": "invert_match",
    "r": "recursive",
    "f": "show_filenames",
    "c": "color_output",
    "h": "help_requested",
}

ANSI_RED = "\x1b[31m"
ANSI_RESET = "\x1b[0m"
