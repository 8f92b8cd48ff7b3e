"""Tests for the built-in reference assemblies."""

import pytest

from genointervals.assemblies import Assembly, assembly_name, get_genome_sizes, resolve_reference
from genointervals.errors import UnknownAssemblyError


class TestGenomeSizes:

    def test_hg19(self):
        sizes = get_genome_sizes("hg19")
        assert len(sizes) == 25
        assert sizes["chr1"] == 249250621
        assert sizes["chrM"] == 16569

    def test_mm10(self):
        sizes = get_genome_sizes(Assembly.MM10)
        assert len(sizes) == 22
        assert sizes["chr19"] == 61431566
        assert "chr20" not in sizes

    def test_identifier_is_case_insensitive(self):
        assert get_genome_sizes("HG19") == get_genome_sizes("hg19")

    def test_table_is_read_only(self):
        sizes = get_genome_sizes("hg19")
        with pytest.raises(TypeError):
            sizes["chr1"] = 1

    def test_unknown_assembly(self):
        with pytest.raises(UnknownAssemblyError, match="Unknown reference assembly 'hg38'"):
            get_genome_sizes("hg38")


class TestResolveReference:

    def test_none(self):
        assert resolve_reference(None) is None

    def test_custom_mapping_is_copied(self):
        custom = {"chr1": 1000}
        reference = resolve_reference(custom)
        custom["chr2"] = 5
        assert dict(reference) == {"chr1": 1000}

    def test_assembly_name(self):
        assert assembly_name(None) is None
        assert assembly_name("MM10") == "mm10"
        assert assembly_name(Assembly.HG19) == "hg19"
        assert assembly_name({"chr1": 1}) == "custom"
