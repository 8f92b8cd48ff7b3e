# File: genointervals/__init__.py
# Location: genointervals/genointervals/__init__.py

"""
genointervals Package.

This package parses line-oriented genomic interval files (BED, GTF, VCF,
RefSeq gene tables) into intervals grouped by chromosome and strand, with
per-chromosome statistics and reconciliation against a reference assembly.
"""

from .errors import GenoIntervalsError, ParserConfigurationError, UnknownAssemblyError
from .formats import BedParser, GtfParser, RefSeqParser, VcfParser, create_parser, parse_file
from .models import ParsedDataset
from .parser import IntervalParser, ParseOptions
from .version import __version__

__all__ = [
    "BedParser",
    "GenoIntervalsError",
    "GtfParser",
    "IntervalParser",
    "ParseOptions",
    "ParsedDataset",
    "ParserConfigurationError",
    "RefSeqParser",
    "UnknownAssemblyError",
    "VcfParser",
    "__version__",
    "create_parser",
    "parse_file",
]
