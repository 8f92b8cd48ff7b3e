"""
Extraction of the fields every interval format shares.

The functions here are pure: they take an already split line and a column
layout and either return the parsed fields or the reason the line is
unusable. Counting and logging dropped lines is the parse engine's job.
"""

import re
from typing import List, NamedTuple, Optional, Union

from .columns import DISABLED, BaseColumns

STRANDS = ("+", "-", "*")
UNSTRANDED = "*"

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ExtractedFields(NamedTuple):
    chromosome: str
    left: int
    right: int
    strand: str


class ExtractionFailure(NamedTuple):
    reason: str


ExtractionResult = Union[ExtractedFields, ExtractionFailure]


def parse_int(token: str) -> Optional[int]:
    """
    Parse a 32-bit signed integer token.

    Surrounding whitespace and a leading sign are accepted; digit group
    separators, decimals and out-of-range values are not.
    """
    if not _INT_PATTERN.match(token):
        return None
    value = int(token)
    if value < _INT32_MIN or value > _INT32_MAX:
        return None
    return value


def parse_float(token: str) -> Optional[float]:
    """Parse a float token, returning None when it is not a number."""
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def normalize_chromosome(token: str) -> Optional[str]:
    """
    Normalize a chromosome token.

    Tokens already starting with ``chr`` (any case) are kept as written,
    bare integers ``N`` become ``chrN``; anything else is rejected.
    """
    if token.lower().startswith("chr"):
        return token
    number = parse_int(token)
    if number is not None:
        return f"chr{number}"
    return None


def normalize_strand(tokens: List[str], strand_column: int) -> str:
    if strand_column == DISABLED or strand_column >= len(tokens):
        return UNSTRANDED
    token = tokens[strand_column]
    return token if token in STRANDS else UNSTRANDED


def extract_fields(tokens: List[str], columns: BaseColumns) -> ExtractionResult:
    """
    Extract chromosome, left, right and strand from a tokenized line.

    Parameters
    ----------
    tokens : list of str
        The line split on the configured delimiter.
    columns : BaseColumns
        Column layout of the file.

    Returns
    -------
    ExtractedFields or ExtractionFailure
        The parsed fields, or the reason the line has to be dropped.
    """
    left = parse_int(tokens[columns.left]) if columns.left < len(tokens) else None
    if left is None:
        return ExtractionFailure("Invalid start/position column")

    if columns.right == DISABLED:
        right = left + 1
    else:
        right = parse_int(tokens[columns.right]) if columns.right < len(tokens) else None
        if right is None:
            return ExtractionFailure("Invalid stop column")

    if columns.chr >= len(tokens):
        return ExtractionFailure("Invalid chromosome column")
    chromosome = normalize_chromosome(tokens[columns.chr])
    if chromosome is None:
        return ExtractionFailure(f"Invalid chromosome ( {tokens[columns.chr]} )")

    return ExtractedFields(chromosome, left, right, normalize_strand(tokens, columns.strand))
