"""Tests for chromosome reconciliation against a reference assembly."""

from genointervals.assemblies import get_genome_sizes
from genointervals.reconciler import reconcile


def test_excess_and_missing():
    reference = {"chr1": 100, "chr2": 200, "chr3": 300}
    excess, missing = reconcile(["chr1", "chr7", "chr3"], reference)
    assert excess == ["chr7"]
    assert missing == ["chr2"]


def test_excess_is_case_sensitive_missing_is_not():
    reference = {"chr1": 100, "chrX": 200}
    excess, missing = reconcile(["CHR1", "chrx"], reference)
    assert excess == ["CHR1", "chrx"]
    assert missing == []


def test_nothing_observed():
    reference = get_genome_sizes("hg19")
    excess, missing = reconcile([], reference)
    assert excess == []
    assert missing == list(reference)
