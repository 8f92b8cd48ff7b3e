"""Tests for configuration loading."""

import json
import os
import tempfile

import pytest

from genointervals.columns import BedColumns, VcfColumns
from genointervals.config import (
    bed_options_from_config,
    columns_from_config,
    load_config,
    options_from_config,
)
from genointervals.errors import ParserConfigurationError
from genointervals.hashing import HashFunction


class TestLoadConfig:

    def test_default_config(self):
        cfg = load_config()
        assert cfg["delimiter"] == "\t"
        assert cfg["start_offset"] == 0
        assert cfg["max_lines_to_read"] is None
        assert cfg["bed"]["default_value"] == 1e-8
        assert set(cfg["columns"]) == {"bed", "gtf", "vcf", "refseq"}

    def test_custom_config(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump({"delimiter": ",", "assembly": "mm10"}, f)

        try:
            cfg = load_config(f.name)
            assert cfg == {"delimiter": ",", "assembly": "mm10"}
        finally:
            os.unlink(f.name)

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"))

    def test_malformed_config(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            f.write("{not json")

        try:
            with pytest.raises(ValueError, match="Error parsing JSON configuration"):
                load_config(f.name)
        finally:
            os.unlink(f.name)


class TestOptionsFromConfig:

    def test_default_config_options(self):
        options = options_from_config(load_config())
        assert options.delimiter == "\t"
        assert options.hash_function == HashFunction.ONE_AT_A_TIME.value
        assert options.assembly is None
        assert options.strict_chromosome_filtering is True

    def test_unknown_keys_ignored(self):
        options = options_from_config({"start_offset": 2, "report_title": "x"})
        assert options.start_offset == 2

    def test_invalid_value(self):
        with pytest.raises(ParserConfigurationError):
            options_from_config({"delimiter": "::"})

    def test_bed_options(self):
        assert bed_options_from_config(load_config())["value_format"] == "same_as_input"
        assert bed_options_from_config({}) == {}


class TestColumnsFromConfig:

    def test_default_layouts_match_format_defaults(self):
        cfg = load_config()
        assert columns_from_config(cfg, "bed") == BedColumns()
        assert columns_from_config(cfg, "VCF") == VcfColumns()

    def test_missing_layout(self):
        assert columns_from_config({}, "bed") is None

    def test_invalid_layout(self):
        with pytest.raises(ParserConfigurationError):
            columns_from_config({"columns": {"bed": {"chr": -1}}}, "bed")
