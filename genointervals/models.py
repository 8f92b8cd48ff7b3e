# File: genointervals/models.py
# Location: genointervals/genointervals/models.py

"""
Data model of parsed interval files.

Intervals are immutable once built. A ParsedDataset is filled in by the parse
engine during a single pass over a file, finalized (statistics and assembly
reconciliation) after the pass, and not modified afterwards.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

import pandas as pd

NAN = float("nan")


class Base(str, Enum):
    A = "A"
    C = "C"
    G = "G"
    N = "N"
    T = "T"
    U = "U"


@dataclass(frozen=True)
class Interval:
    """A genomic region with integer ``left``/``right`` ends and a hash key."""

    left: int
    right: int
    hash_key: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def value(self) -> float:
        """Scalar summarized in per-chromosome statistics; NaN when the format has none."""
        return NAN


@dataclass(frozen=True)
class Peak(Interval):
    """A BED peak: p-value, optional name and summit position."""

    p_value: float = NAN
    name: Optional[str] = None
    summit: int = -1

    @property
    def value(self) -> float:
        return self.p_value


@dataclass(frozen=True)
class GeneralFeature(Interval):
    """A GTF/GFF feature."""

    source: Optional[str] = None
    feature: Optional[str] = None
    score: float = NAN
    frame: Optional[str] = None
    attribute: Optional[str] = None

    @property
    def value(self) -> float:
        return self.score


@dataclass(frozen=True)
class Variant(Interval):
    """A VCF record; ``right`` is always ``left + 1``."""

    id: Optional[str] = None
    ref_base: Tuple[Base, ...] = ()
    alt_base: Tuple[Base, ...] = ()
    quality: float = NAN
    filter: Optional[str] = None
    info: Optional[str] = None

    @property
    def value(self) -> float:
        return self.quality


@dataclass(frozen=True)
class Gene(Interval):
    """A RefSeq gene record."""

    refseq_id: Optional[str] = None
    gene_symbol: Optional[str] = None


@dataclass
class ChrStatistics:
    """Chromosome-wide descriptive statistics of accepted intervals."""

    count: int = 0
    width_min: int = 0
    width_max: int = 0
    width_mean: float = 0.0
    width_stdev: float = 0.0
    value_min: float = NAN
    value_max: float = NAN
    value_mean: float = NAN
    value_stdev: float = NAN
    coverage: float = NAN
    percentage: float = 0.0


@dataclass
class ChromosomeBucket:
    """Intervals of one chromosome partitioned by strand, plus their statistics."""

    strands: Dict[str, List[Interval]] = field(default_factory=dict)
    statistics: ChrStatistics = field(default_factory=ChrStatistics)

    def add(self, strand: str, interval: Interval) -> None:
        self.strands.setdefault(strand, []).append(interval)

    def intervals(self) -> Iterator[Interval]:
        for intervals in self.strands.values():
            yield from intervals

    def __len__(self) -> int:
        return sum(len(intervals) for intervals in self.strands.values())


@dataclass
class ParsedDataset:
    """
    Result of parsing one interval file.

    Attributes
    ----------
    chromosomes : dict
        Chromosome name to :class:`ChromosomeBucket`, in first-seen order.
    excess_chromosomes : list
        Chromosomes present in the file but not in the reference assembly.
    missing_chromosomes : list
        Reference chromosomes never seen in the file.
    messages : list
        Summary lines followed by one diagnostic per dropped line.
    value_min_key, value_max_key : int or None
        Hash keys of the intervals holding the dataset-wide extreme values.
    """

    file_path: str = ""
    file_name: str = ""
    file_hash_key: int = 0
    assembly: Optional[str] = None
    chromosomes: Dict[str, ChromosomeBucket] = field(default_factory=dict)
    excess_chromosomes: List[str] = field(default_factory=list)
    missing_chromosomes: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    intervals_count: int = 0
    dropped_lines_count: int = 0
    default_value_count: int = 0
    value_mean: float = NAN
    value_min: float = NAN
    value_max: float = NAN
    value_min_key: Optional[int] = None
    value_max_key: Optional[int] = None
    determined_features: Dict[str, int] = field(default_factory=dict)

    def intervals(self) -> Iterator[Tuple[str, str, Interval]]:
        """Yield ``(chromosome, strand, interval)`` for every stored interval."""
        for chromosome, bucket in self.chromosomes.items():
            for strand, intervals in bucket.strands.items():
                for interval in intervals:
                    yield chromosome, strand, interval

    def find(self, hash_key: int) -> Optional[Interval]:
        """Return the interval with the given hash key, if any."""
        for _, _, interval in self.intervals():
            if interval.hash_key == hash_key:
                return interval
        return None

    def statistics_frame(self) -> pd.DataFrame:
        """
        Per-chromosome statistics as a DataFrame.

        Returns
        -------
        pd.DataFrame
            One row per chromosome with a ``chromosome`` column followed by the
            :class:`ChrStatistics` fields.
        """
        columns = ["chromosome"] + list(ChrStatistics.__dataclass_fields__)
        rows = []
        for chromosome, bucket in self.chromosomes.items():
            stats = bucket.statistics
            rows.append([chromosome] + [getattr(stats, name) for name in columns[1:]])
        return pd.DataFrame(rows, columns=columns)

    def has_values(self) -> bool:
        return not math.isnan(self.value_mean)
