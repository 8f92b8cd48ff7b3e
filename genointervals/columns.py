# File: genointervals/columns.py
# Location: genointervals/genointervals/columns.py

"""
Column layouts for the supported interval formats.

A layout maps logical fields to zero-based token indices. Optional fields use
-1 to mean "not present in this file". Defaults follow the published format
descriptions (BED, GTF, VCF, UCSC refGene-style tables).
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .errors import ParserConfigurationError

DISABLED = -1


@dataclass
class BaseColumns:
    """Columns shared by every format: chromosome, left, right and strand."""

    chr: int = 0
    left: int = 1
    right: int = 2
    strand: int = DISABLED

    def validate(self) -> None:
        """Check that required columns point at a real index."""
        for name in ("chr", "left"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ParserConfigurationError(
                    f"Column '{name}' must be a non-negative integer, got {value!r}", name
                )
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or value < DISABLED:
                raise ParserConfigurationError(
                    f"Column '{f.name}' must be an integer >= {DISABLED}, got {value!r}", f.name
                )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "BaseColumns":
        """Build a layout from a mapping, ignoring keys the layout does not know."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in values.items() if k in known})


@dataclass
class BedColumns(BaseColumns):
    name: int = 3
    value: int = 4
    summit: int = DISABLED


@dataclass
class GtfColumns(BaseColumns):
    chr: int = 0
    source: int = 1
    feature: int = 2
    left: int = 3
    right: int = 4
    score: int = 5
    strand: int = 6
    frame: int = 7
    attribute: int = 8


@dataclass
class VcfColumns(BaseColumns):
    """VCF rows carry a single position; ``right`` is derived as ``left + 1``."""

    chr: int = 0
    left: int = 1
    right: int = DISABLED
    id: int = 2
    ref_base: int = 3
    alt_base: int = 4
    quality: int = 5
    filter: int = 6
    info: int = 7
    strand: int = DISABLED


@dataclass
class RefSeqColumns(BaseColumns):
    refseq_id: int = 3
    gene_symbol: int = 4
