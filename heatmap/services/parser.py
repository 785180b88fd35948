# services/parser.py
# Reads the readings file and turns it into integers

import re
from pathlib import Path
from typing import List, Union

from heatmap.errors import InputReadError, ReadingParseError

# Optional sign then digits; int() alone would also take "1_000"
INTEGER_TOKEN = re.compile(r"[+-]?\d+")


def read_input(path: Union[str, Path]) -> str:
    """Read the whole readings file. Relative paths resolve against the cwd."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Could not read input file {path}: {e}") from e


def parse_readings(text: str) -> List[int]:
    """
    Split on commas and parse each trimmed token as an int.

    Blank tokens at the end ("1,2,3," or a trailing newline) are dropped;
    a blank token anywhere else is an error. The count isn't checked here;
    assembling features does that.
    """
    tokens = [token.strip() for token in text.split(",")]
    while tokens and not tokens[-1]:
        tokens.pop()
    if not tokens:
        raise ReadingParseError("Input contains no readings")

    readings = []
    for pos, token in enumerate(tokens, start=1):
        if not INTEGER_TOKEN.fullmatch(token):
            raise ReadingParseError(f"Reading {pos} is not an integer: {token!r}")
        readings.append(int(token))
    return readings
