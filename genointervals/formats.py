"""
Ready-made parsers for the supported file formats.

Each parser wires the format's default column layout and record builder into
:class:`~genointervals.parser.IntervalParser`.
"""

import logging
import os
from typing import Any, Dict, Optional, Type, Union

from .builders import (
    BedRecordBuilder,
    GtfRecordBuilder,
    PValueFormat,
    RefSeqRecordBuilder,
    VcfRecordBuilder,
    determined_features,
)
from .columns import BaseColumns, BedColumns, GtfColumns, RefSeqColumns, VcfColumns
from .models import ParsedDataset
from .parser import IntervalParser, ParseOptions

logger = logging.getLogger("genointervals")


class BedParser(IntervalParser):
    """Parser for BED peak files (chr, start, stop, name, p-value)."""

    def __init__(
        self,
        columns: Optional[BedColumns] = None,
        options: Optional[ParseOptions] = None,
        default_value: float = 1e-8,
        drop_if_invalid_value: bool = True,
        value_format: Union[str, PValueFormat] = PValueFormat.SAME_AS_INPUT,
        validate_value: bool = True,
    ):
        columns = columns or BedColumns()
        builder = BedRecordBuilder(
            columns,
            default_value=default_value,
            drop_if_invalid_value=drop_if_invalid_value,
            value_format=value_format,
            validate_value=validate_value,
        )
        super().__init__(columns, builder, options)


class GtfParser(IntervalParser):
    """Parser for GTF/GFF feature files."""

    def __init__(
        self, columns: Optional[GtfColumns] = None, options: Optional[ParseOptions] = None
    ):
        columns = columns or GtfColumns()
        super().__init__(columns, GtfRecordBuilder(columns), options)

    def parse(self, path: Union[str, os.PathLike]) -> ParsedDataset:
        dataset = super().parse(path)
        dataset.determined_features = determined_features(dataset)
        logger.debug(f"Feature types found: {dataset.determined_features}")
        return dataset


class VcfParser(IntervalParser):
    """Parser for VCF variant files; each variant spans ``[pos, pos + 1)``."""

    def __init__(
        self, columns: Optional[VcfColumns] = None, options: Optional[ParseOptions] = None
    ):
        columns = columns or VcfColumns()
        super().__init__(columns, VcfRecordBuilder(columns), options)


class RefSeqParser(IntervalParser):
    """Parser for RefSeq gene tables."""

    def __init__(
        self, columns: Optional[RefSeqColumns] = None, options: Optional[ParseOptions] = None
    ):
        columns = columns or RefSeqColumns()
        super().__init__(columns, RefSeqRecordBuilder(columns), options)


FORMATS: Dict[str, Type[IntervalParser]] = {
    "bed": BedParser,
    "gtf": GtfParser,
    "vcf": VcfParser,
    "refseq": RefSeqParser,
}

COLUMN_LAYOUTS: Dict[str, Type[BaseColumns]] = {
    "bed": BedColumns,
    "gtf": GtfColumns,
    "vcf": VcfColumns,
    "refseq": RefSeqColumns,
}


def create_parser(
    file_format: str,
    columns: Optional[BaseColumns] = None,
    options: Optional[ParseOptions] = None,
    **builder_options: Any,
) -> IntervalParser:
    """
    Build the parser registered for a file format.

    Parameters
    ----------
    file_format : str
        One of ``bed``, ``gtf``, ``vcf``, ``refseq`` (case-insensitive).
    columns : BaseColumns, optional
        Column layout; the format default when omitted.
    options : ParseOptions, optional
        Parse options.
    **builder_options
        Extra keyword arguments of the format parser (BED value handling).

    Raises
    ------
    ValueError
        If the format is not supported.
    """
    key = file_format.lower()
    if key not in FORMATS:
        raise ValueError(
            f"Unsupported file format '{file_format}'. Expected one of: {', '.join(FORMATS)}"
        )
    return FORMATS[key](columns=columns, options=options, **builder_options)


def parse_file(
    path: Union[str, os.PathLike],
    file_format: str,
    columns: Optional[BaseColumns] = None,
    options: Optional[ParseOptions] = None,
    **builder_options: Any,
) -> ParsedDataset:
    """Parse ``path`` with the parser of ``file_format``; see :func:`create_parser`."""
    return create_parser(file_format, columns, options, **builder_options).parse(path)
