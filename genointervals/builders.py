# File: genointervals/builders.py
# Location: genointervals/genointervals/builders.py

"""
Record builders: the format-specific half of line parsing.

The parse engine extracts coordinates, chromosome and strand itself and hands
the rest of the line to a builder, which decodes the format's own fields and
constructs the interval. Builders hold configuration only; whether a line was
dropped or needed a default value is reported through :class:`BuildResult`.

Builders provided:
- BedRecordBuilder: peaks with p-value, name and summit.
- GtfRecordBuilder: general features with source, feature, score, frame, attribute.
- VcfRecordBuilder: variants with id, REF/ALT bases, quality, filter and info.
- RefSeqRecordBuilder: genes with RefSeq ID and gene symbol.
"""

import math
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple

from .columns import DISABLED, BedColumns, GtfColumns, RefSeqColumns, VcfColumns
from .extractor import parse_float, parse_int
from .models import Base, GeneralFeature, Gene, Interval, ParsedDataset, Peak, Variant


@dataclass(frozen=True)
class BuildResult:
    """Outcome of building one record: an interval, or the reason it was dropped."""

    interval: Optional[Interval] = None
    drop_reason: Optional[str] = None
    used_default: bool = False

    @property
    def dropped(self) -> bool:
        return self.interval is None


def drop(reason: str) -> BuildResult:
    return BuildResult(drop_reason=reason)


class RecordBuilder(Protocol):
    """Strategy decoding the format-specific fields of a line."""

    def build(
        self, left: int, right: int, tokens: List[str], line_number: int, hash_key: int
    ) -> BuildResult: ...


def _optional_token(tokens: List[str], column: int) -> Optional[str]:
    if column == DISABLED or column >= len(tokens):
        return None
    return tokens[column]


class PValueFormat(str, Enum):
    """How p-values are written in a BED file."""

    SAME_AS_INPUT = "same_as_input"
    MINUS1_LOG10 = "minus1_log10"
    MINUS10_LOG10 = "minus10_log10"
    MINUS100_LOG10 = "minus100_log10"


_PVALUE_SCALES = {
    PValueFormat.MINUS1_LOG10: 1.0,
    PValueFormat.MINUS10_LOG10: 10.0,
    PValueFormat.MINUS100_LOG10: 100.0,
}


def convert_p_value(value: float, value_format: PValueFormat) -> float:
    """Convert a ``-k*log10(p)`` value back to ``p``; plain p-values pass through."""
    scale = _PVALUE_SCALES.get(PValueFormat(value_format))
    if scale is None:
        return value
    return math.pow(10.0, value / -scale)


class BedRecordBuilder:
    """
    Build :class:`Peak` records from BED lines.

    Parameters
    ----------
    columns : BedColumns
        Column layout; ``name``, ``value`` and ``summit`` are read from it.
    default_value : float
        P-value substituted for a missing or invalid value when
        ``drop_if_invalid_value`` is False.
    drop_if_invalid_value : bool
        Drop lines with a missing or invalid p-value instead of substituting.
    value_format : PValueFormat
        Encoding of the value column.
    validate_value : bool
        Drop lines whose (converted) p-value falls outside [0, 1].
    """

    def __init__(
        self,
        columns: Optional[BedColumns] = None,
        default_value: float = 1e-8,
        drop_if_invalid_value: bool = True,
        value_format: PValueFormat = PValueFormat.SAME_AS_INPUT,
        validate_value: bool = True,
    ):
        self.columns = columns or BedColumns()
        self.default_value = default_value
        self.drop_if_invalid_value = drop_if_invalid_value
        self.value_format = PValueFormat(value_format)
        self.validate_value = validate_value

    def build(
        self, left: int, right: int, tokens: List[str], line_number: int, hash_key: int
    ) -> BuildResult:
        used_default = False
        token = _optional_token(tokens, self.columns.value)
        if token is None:
            if self.drop_if_invalid_value:
                return drop("Invalid p-value column")
            value = self.default_value
            used_default = True
        else:
            parsed = parse_float(token)
            if parsed is not None:
                value = convert_p_value(parsed, self.value_format)
            elif self.drop_if_invalid_value:
                return drop(f"Invalid p-value ( {token} )")
            else:
                value = self.default_value
                used_default = True

        if self.validate_value and not 0 <= value <= 1:
            return drop(f"Invalid p-value ( {value} )")

        summit_token = _optional_token(tokens, self.columns.summit)
        summit = parse_int(summit_token) if summit_token is not None else None
        if summit is None:
            summit = int(round((left + right) / 2.0))

        peak = Peak(
            left=left,
            right=right,
            hash_key=hash_key,
            p_value=value,
            name=_optional_token(tokens, self.columns.name),
            summit=summit,
        )
        return BuildResult(interval=peak, used_default=used_default)


class GtfRecordBuilder:
    """Build :class:`GeneralFeature` records from GTF/GFF lines."""

    def __init__(self, columns: Optional[GtfColumns] = None):
        self.columns = columns or GtfColumns()

    def build(
        self, left: int, right: int, tokens: List[str], line_number: int, hash_key: int
    ) -> BuildResult:
        score_token = _optional_token(tokens, self.columns.score)
        score = parse_float(score_token) if score_token is not None else None

        feature = None
        if self.columns.feature != DISABLED:
            feature = _optional_token(tokens, self.columns.feature)
            if feature is None:
                return drop("Invalid feature column")

        return BuildResult(
            interval=GeneralFeature(
                left=left,
                right=right,
                hash_key=hash_key,
                source=_optional_token(tokens, self.columns.source),
                feature=feature,
                score=math.nan if score is None else score,
                frame=_optional_token(tokens, self.columns.frame),
                attribute=_optional_token(tokens, self.columns.attribute),
            )
        )


def determined_features(dataset: ParsedDataset) -> Dict[str, int]:
    """Count accepted GTF intervals per feature type, in first-seen order."""
    counts: Counter = Counter()
    for _, _, interval in dataset.intervals():
        feature = getattr(interval, "feature", None)
        if feature is not None:
            counts[feature] += 1
    return dict(counts)


def parse_bases(field: str) -> Tuple[Base, ...]:
    """Parse a REF/ALT field; any character outside ACGNTU yields an empty tuple."""
    try:
        return tuple(Base(char) for char in field)
    except ValueError:
        return ()


class VcfRecordBuilder:
    """Build :class:`Variant` records from VCF lines."""

    def __init__(self, columns: Optional[VcfColumns] = None):
        self.columns = columns or VcfColumns()

    def build(
        self, left: int, right: int, tokens: List[str], line_number: int, hash_key: int
    ) -> BuildResult:
        variant_id = _optional_token(tokens, self.columns.id)
        if variant_id is None:
            return drop("Invalid ID column")

        bases = {}
        for label, column in (("REF", self.columns.ref_base), ("ALT", self.columns.alt_base)):
            token = _optional_token(tokens, column)
            parsed = parse_bases(token) if token is not None else ()
            if not parsed:
                return drop(f"Invalid {label} column")
            bases[label] = parsed

        quality_token = _optional_token(tokens, self.columns.quality)
        quality = parse_float(quality_token) if quality_token is not None else None
        if quality is None:
            return drop("Invalid quality column")

        filter_value = _optional_token(tokens, self.columns.filter)
        if filter_value is None:
            return drop("Invalid filter column")
        info = _optional_token(tokens, self.columns.info)
        if info is None:
            return drop("Invalid info column")

        return BuildResult(
            interval=Variant(
                left=left,
                right=right,
                hash_key=hash_key,
                id=variant_id,
                ref_base=bases["REF"],
                alt_base=bases["ALT"],
                quality=quality,
                filter=filter_value,
                info=info,
            )
        )


class RefSeqRecordBuilder:
    """Build :class:`Gene` records from RefSeq gene tables."""

    def __init__(self, columns: Optional[RefSeqColumns] = None):
        self.columns = columns or RefSeqColumns()

    def build(
        self, left: int, right: int, tokens: List[str], line_number: int, hash_key: int
    ) -> BuildResult:
        refseq_id = None
        if self.columns.refseq_id != DISABLED:
            refseq_id = _optional_token(tokens, self.columns.refseq_id)
            if refseq_id is None:
                return drop("Invalid RefSeq ID column")

        gene_symbol = None
        if self.columns.gene_symbol != DISABLED:
            gene_symbol = _optional_token(tokens, self.columns.gene_symbol)
            if gene_symbol is None:
                return drop("Invalid official gene symbol column")

        return BuildResult(
            interval=Gene(
                left=left,
                right=right,
                hash_key=hash_key,
                refseq_id=refseq_id,
                gene_symbol=gene_symbol,
            )
        )
