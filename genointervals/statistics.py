"""
Chromosome-wide statistics of parsed intervals.

Statistics are gathered in two passes. While the file is read, running counts,
sums and extremes are kept per chromosome. Once every interval is stored, the
means are fixed and the stored intervals are walked again to obtain population
standard deviations.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import numpy as np

from .models import ChromosomeBucket, Interval, ParsedDataset

logger = logging.getLogger("genointervals")


@dataclass
class RunningSums:
    """First-pass accumulator of one chromosome."""

    count: int = 0
    width_sum: int = 0
    width_min: Optional[int] = None
    width_max: Optional[int] = None
    value_sum: float = 0.0
    value_count: int = 0
    value_min: float = math.nan
    value_max: float = math.nan

    def update(self, interval: Interval) -> None:
        self.count += 1
        width = interval.width
        self.width_sum += width
        if self.width_min is None or width < self.width_min:
            self.width_min = width
        if self.width_max is None or width > self.width_max:
            self.width_max = width

        value = interval.value
        if math.isnan(value):
            return
        self.value_sum += value
        self.value_count += 1
        if self.value_count == 1 or value < self.value_min:
            self.value_min = value
        if self.value_count == 1 or value > self.value_max:
            self.value_max = value


class StatisticsAggregator:
    """
    Accumulate-then-finalize statistics for one parse.

    ``accumulate`` is called for every accepted interval during the read pass;
    ``finalize`` is called once afterwards and writes the results onto the
    chromosome buckets and the dataset.
    """

    def __init__(self):
        self._sums: Dict[str, RunningSums] = {}
        self._value_sum = 0.0
        self._value_count = 0
        self._value_min = math.nan
        self._value_max = math.nan
        self._value_min_key: Optional[int] = None
        self._value_max_key: Optional[int] = None

    def accumulate(self, chromosome: str, interval: Interval) -> None:
        """First pass: fold one accepted interval into the running sums."""
        sums = self._sums.get(chromosome)
        if sums is None:
            sums = self._sums[chromosome] = RunningSums()
        sums.update(interval)

        value = interval.value
        if math.isnan(value):
            return
        self._value_sum += value
        self._value_count += 1
        if self._value_count == 1 or value < self._value_min:
            self._value_min = value
            self._value_min_key = interval.hash_key
        if self._value_count == 1 or value > self._value_max:
            self._value_max = value
            self._value_max_key = interval.hash_key

    def finalize(self, dataset: ParsedDataset, reference: Optional[Mapping[str, int]]) -> None:
        """
        Second pass: means, standard deviations, coverage and percentages.

        Parameters
        ----------
        dataset : ParsedDataset
            Dataset whose buckets hold every accepted interval.
        reference : Mapping[str, int], optional
            Chromosome lengths used for coverage; NaN coverage without one.
        """
        total = sum(sums.count for sums in self._sums.values())
        for chromosome, bucket in dataset.chromosomes.items():
            sums = self._sums[chromosome]
            self._finalize_bucket(chromosome, bucket, sums, total, reference)
        logger.debug(f"Statistics finalized for {len(dataset.chromosomes)} chromosomes")

        if self._value_count > 0 and dataset.intervals_count > 0:
            dataset.value_mean = self._value_sum / dataset.intervals_count
            dataset.value_min = self._value_min
            dataset.value_max = self._value_max
            dataset.value_min_key = self._value_min_key
            dataset.value_max_key = self._value_max_key

    @staticmethod
    def _finalize_bucket(
        chromosome: str,
        bucket: ChromosomeBucket,
        sums: RunningSums,
        total: int,
        reference: Optional[Mapping[str, int]],
    ) -> None:
        stats = bucket.statistics
        stats.count = sums.count
        stats.width_min = sums.width_min if sums.width_min is not None else 0
        stats.width_max = sums.width_max if sums.width_max is not None else 0

        if sums.count == 0:
            stats.width_mean = 0.0
            stats.width_stdev = 0.0
            return

        widths = np.fromiter((iv.width for iv in bucket.intervals()), dtype=float, count=sums.count)
        stats.width_mean = sums.width_sum / sums.count
        stats.width_stdev = float(np.sqrt(np.sum((widths - stats.width_mean) ** 2) / sums.count))

        if sums.value_count > 0:
            values = np.fromiter(
                (iv.value for iv in bucket.intervals()), dtype=float, count=sums.count
            )
            values = values[~np.isnan(values)]
            stats.value_min = sums.value_min
            stats.value_max = sums.value_max
            stats.value_mean = sums.value_sum / sums.count
            deviations = (values - stats.value_mean) ** 2
            stats.value_stdev = float(np.sqrt(np.sum(deviations) / sums.count))

        if reference is not None and chromosome in reference:
            stats.coverage = sums.width_sum * 100.0 / reference[chromosome]
        stats.percentage = sums.count * 100.0 / total if total else 0.0
