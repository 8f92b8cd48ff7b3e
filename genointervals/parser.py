# File: genointervals/parser.py
# Location: genointervals/genointervals/parser.py

"""
Streaming parse engine shared by every interval format.

The engine reads a delimiter-separated file once, line by line:

1. skips a fixed number of header lines,
2. reads at most ``max_lines_to_read`` further lines,
3. extracts chromosome, coordinates and strand from each line, hands the rest
   to a format-specific record builder, and stores accepted intervals by
   chromosome and strand,
4. finalizes statistics and reconciles chromosomes with the reference assembly.

A malformed line never aborts a parse. It is recorded in the dataset's
messages and counted as dropped. Only a missing input file raises.
"""

import codecs
import logging
import os
from dataclasses import dataclass, replace
from typing import Callable, List, Mapping, NamedTuple, Optional, Union

from .assemblies import Assembly, assembly_name, resolve_reference
from .builders import RecordBuilder
from .columns import BaseColumns
from .errors import ParserConfigurationError, missing_file_error
from .extractor import ExtractionFailure, extract_fields
from .hashing import HashFunction, file_hash_key, get_hash_function, interval_hash_key
from .models import ChromosomeBucket, Interval, ParsedDataset
from .reconciler import reconcile
from .statistics import StatisticsAggregator

logger = logging.getLogger("genointervals")

StatusCallback = Callable[[str], None]
_BYTE_ORDER_MARK = "\ufeff"


@dataclass
class ParseOptions:
    """
    Options of one parse invocation.

    Attributes
    ----------
    start_offset : int
        Number of leading lines discarded unconditionally (headers).
    max_lines_to_read : int or None
        Maximum number of lines read after the header; None reads everything.
    delimiter : str
        Single-character field separator.
    hash_function : HashFunction
        Algorithm used for interval hash keys.
    assembly : str, Assembly, mapping or None
        Reference assembly identifier (``"hg19"``, ``"mm10"``) or a custom
        chromosome-to-length mapping.
    strict_chromosome_filtering : bool
        When a reference is given, drop lines whose chromosome is not in it
        instead of only reporting them as excess chromosomes.
    encoding : str
        Text encoding of the input file. A leading byte-order mark is dropped
        whatever the encoding.
    """

    start_offset: int = 0
    max_lines_to_read: Optional[int] = None
    delimiter: str = "\t"
    hash_function: Union[str, HashFunction] = HashFunction.ONE_AT_A_TIME
    assembly: Union[None, str, Assembly, Mapping[str, int]] = None
    strict_chromosome_filtering: bool = True
    encoding: str = "utf-8-sig"

    def validate(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ParserConfigurationError(
                f"Delimiter must be a single character, got {self.delimiter!r}", "delimiter"
            )
        if self.start_offset < 0:
            raise ParserConfigurationError(
                f"start_offset must be >= 0, got {self.start_offset}", "start_offset"
            )
        if self.max_lines_to_read is not None and self.max_lines_to_read < 0:
            raise ParserConfigurationError(
                f"max_lines_to_read must be >= 0, got {self.max_lines_to_read}",
                "max_lines_to_read",
            )
        try:
            get_hash_function(self.hash_function)
        except ValueError as e:
            raise ParserConfigurationError(str(e), "hash_function")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ParserConfigurationError(f"Unknown encoding '{self.encoding}'", "encoding")


@dataclass(frozen=True)
class ParseCounters:
    """Per-parse tallies, replaced (never mutated) after every line."""

    lines_read: int = 0
    dropped: int = 0
    defaults_used: int = 0

    def record(self, outcome: "LineOutcome") -> "ParseCounters":
        return replace(
            self,
            lines_read=self.lines_read + 1,
            dropped=self.dropped + (1 if outcome.drop_reason is not None else 0),
            defaults_used=self.defaults_used + (1 if outcome.used_default else 0),
        )


class LineOutcome(NamedTuple):
    """Result of processing one data line."""

    chromosome: Optional[str] = None
    strand: Optional[str] = None
    interval: Optional[Interval] = None
    drop_reason: Optional[str] = None
    used_default: bool = False


class IntervalParser:
    """
    Parse delimiter-separated interval files into a :class:`ParsedDataset`.

    Parameters
    ----------
    columns : BaseColumns
        Column layout of chromosome, left, right and strand.
    builder : RecordBuilder
        Strategy decoding the format-specific fields of each line.
    options : ParseOptions, optional
        Parse options; defaults are used when omitted.

    Examples
    --------
    >>> parser = IntervalParser(BedColumns(), BedRecordBuilder())
    >>> parser.subscribe(print)
    >>> dataset = parser.parse("peaks.bed")
    """

    def __init__(
        self,
        columns: BaseColumns,
        builder: RecordBuilder,
        options: Optional[ParseOptions] = None,
    ):
        columns.validate()
        self.columns = columns
        self.builder = builder
        self.options = options or ParseOptions()
        self.options.validate()
        self._status = "0"
        self._subscribers: List[StatusCallback] = []

    @property
    def status(self) -> str:
        """Percentage of the input consumed so far, as a string."""
        return self._status

    def _set_status(self, value: str) -> None:
        if value == self._status:
            return
        self._status = value
        for callback in self._subscribers:
            callback(value)

    def subscribe(self, callback: StatusCallback) -> None:
        """Register a callback invoked with the new status whenever it changes."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: StatusCallback) -> None:
        self._subscribers.remove(callback)

    def parse(self, path: Union[str, os.PathLike]) -> ParsedDataset:
        """
        Parse an interval file.

        Parameters
        ----------
        path : str or PathLike
            Path of the file to read.

        Returns
        -------
        ParsedDataset
            Intervals by chromosome and strand, statistics, reconciliation
            results and diagnostic messages.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        """
        path = os.fspath(path)
        if not os.path.isfile(path):
            raise missing_file_error(path)

        reference = resolve_reference(self.options.assembly)
        absolute_path = os.path.abspath(path)
        dataset = ParsedDataset(
            file_path=absolute_path,
            file_name=os.path.basename(path),
            file_hash_key=file_hash_key(absolute_path),
            assembly=assembly_name(self.options.assembly),
        )
        logger.info(f"Parsing {path} (file hash key {dataset.file_hash_key})")

        self._status = "0"
        aggregator = StatisticsAggregator()
        counters = self._read(path, dataset, aggregator, reference)
        self._finalize(dataset, aggregator, counters, reference)
        self._set_status("100")

        logger.info(
            f"Parsed {dataset.intervals_count} intervals on {len(dataset.chromosomes)} "
            f"chromosomes from {dataset.file_name}"
        )
        return dataset

    def _read(
        self,
        path: str,
        dataset: ParsedDataset,
        aggregator: StatisticsAggregator,
        reference: Optional[Mapping[str, int]],
    ) -> ParseCounters:
        hash_function = get_hash_function(self.options.hash_function)
        max_lines = self.options.max_lines_to_read
        file_size = os.path.getsize(path)
        bytes_read = 0
        line_number = 0
        counters = ParseCounters()

        with open(path, "rb") as handle:
            for _ in range(self.options.start_offset):
                raw = handle.readline()
                if not raw:
                    break
                bytes_read += len(raw)
                line_number += 1

            while max_lines is None or counters.lines_read < max_lines:
                raw = handle.readline()
                if not raw:
                    break
                bytes_read += len(raw)
                line_number += 1

                line = raw.decode(self.options.encoding, errors="replace").rstrip("\r\n")
                if line_number == 1:
                    line = line.lstrip(_BYTE_ORDER_MARK)
                outcome = self._process_line(
                    line, line_number, dataset.file_hash_key, hash_function, reference
                )
                counters = counters.record(outcome)

                if outcome.drop_reason is not None:
                    message = f"Line {line_number}: {outcome.drop_reason}"
                    dataset.messages.append(message)
                    logger.debug(message)
                elif outcome.interval is not None:
                    self._store(dataset, aggregator, outcome)

                if file_size:
                    self._set_status(str(round(bytes_read * 100 / file_size)))

        return counters

    def _process_line(
        self,
        line: str,
        line_number: int,
        file_hash: int,
        hash_function: Callable[[str], int],
        reference: Optional[Mapping[str, int]],
    ) -> LineOutcome:
        """Turn one line into an accepted interval or a drop reason; no side effects."""
        if not line.strip():
            return LineOutcome()

        tokens = line.split(self.options.delimiter)
        fields = extract_fields(tokens, self.columns)
        if isinstance(fields, ExtractionFailure):
            return LineOutcome(drop_reason=fields.reason)

        if (
            reference is not None
            and self.options.strict_chromosome_filtering
            and fields.chromosome not in reference
        ):
            return LineOutcome(
                drop_reason=f"Chromosome ( {fields.chromosome} ) is not in the reference assembly"
            )

        hash_key = interval_hash_key(
            file_hash, fields.left, fields.right, line_number, hash_function
        )
        result = self.builder.build(fields.left, fields.right, tokens, line_number, hash_key)
        if result.dropped:
            return LineOutcome(drop_reason=result.drop_reason or "Invalid record")

        return LineOutcome(
            chromosome=fields.chromosome,
            strand=fields.strand,
            interval=result.interval,
            used_default=result.used_default,
        )

    @staticmethod
    def _store(
        dataset: ParsedDataset, aggregator: StatisticsAggregator, outcome: LineOutcome
    ) -> None:
        bucket = dataset.chromosomes.get(outcome.chromosome)
        if bucket is None:
            bucket = dataset.chromosomes[outcome.chromosome] = ChromosomeBucket()
        bucket.add(outcome.strand, outcome.interval)
        dataset.intervals_count += 1
        aggregator.accumulate(outcome.chromosome, outcome.interval)

    @staticmethod
    def _finalize(
        dataset: ParsedDataset,
        aggregator: StatisticsAggregator,
        counters: ParseCounters,
        reference: Optional[Mapping[str, int]],
    ) -> None:
        aggregator.finalize(dataset, reference)

        if reference is not None:
            dataset.excess_chromosomes, dataset.missing_chromosomes = reconcile(
                dataset.chromosomes.keys(), reference
            )
            if dataset.excess_chromosomes:
                excess = ", ".join(dataset.excess_chromosomes)
                logger.warning(f"Chromosomes not in the reference assembly: {excess}")

        dataset.dropped_lines_count = counters.dropped
        dataset.default_value_count = counters.defaults_used
        if counters.dropped > 0:
            dataset.messages.insert(0, f"{counters.dropped} lines dropped")
            logger.warning(f"{counters.dropped} lines dropped while parsing {dataset.file_name}")
        if counters.defaults_used > 0:
            dataset.messages.insert(0, f"Default value used {counters.defaults_used} times")
            logger.info(f"Default value used {counters.defaults_used} times in {dataset.file_name}")
