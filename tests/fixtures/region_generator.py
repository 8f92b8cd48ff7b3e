"""
Generator of test lines with a configurable column layout.

Moving a field onto a column another field already occupies moves that other
field to the vacated column. When the moving field had no column (-1), the
displaced field goes one past the highest column in use, so no two fields
ever share an index.
"""

from typing import Dict, List, Optional, Sequence, Type

from genointervals.columns import BaseColumns, BedColumns, GtfColumns, RefSeqColumns, VcfColumns

BED_VALUES = {
    "chr": "chr1",
    "left": "10",
    "right": "20",
    "name": "GeUtilities_01",
    "value": "0.01",
    "strand": "*",
    "summit": "15",
}

GTF_VALUES = {
    "chr": "chr1",
    "source": "HAVANA",
    "feature": "exon",
    "left": "100",
    "right": "200",
    "score": "7.5",
    "strand": "+",
    "frame": "0",
    "attribute": 'gene_id "G1";',
}

VCF_VALUES = {
    "chr": "chr1",
    "left": "100",
    "right": "101",
    "id": "rs1",
    "ref_base": "AC",
    "alt_base": "G",
    "quality": "50",
    "filter": "PASS",
    "info": "DP=10",
    "strand": "*",
}

REFSEQ_VALUES = {
    "chr": "chr1",
    "left": "5",
    "right": "50",
    "refseq_id": "NM_001",
    "gene_symbol": "BRCA1",
    "strand": "*",
}


class RegionGenerator:
    """Builds one test line and the matching column layout."""

    def __init__(
        self,
        columns_type: Type[BaseColumns] = BedColumns,
        values: Optional[Dict[str, str]] = None,
    ):
        self.columns_type = columns_type
        self._columns: Dict[str, int] = columns_type().to_dict()
        self.values: Dict[str, str] = dict(BED_VALUES if values is None else values)

    @classmethod
    def bed(cls) -> "RegionGenerator":
        return cls(BedColumns, BED_VALUES)

    @classmethod
    def gtf(cls) -> "RegionGenerator":
        return cls(GtfColumns, GTF_VALUES)

    @classmethod
    def vcf(cls) -> "RegionGenerator":
        return cls(VcfColumns, VCF_VALUES)

    @classmethod
    def refseq(cls) -> "RegionGenerator":
        return cls(RefSeqColumns, REFSEQ_VALUES)

    def column(self, field: str) -> int:
        return self._columns[field]

    def enabled_fields(self) -> List[str]:
        """Fields that currently have a column, in column order."""
        enabled = [f for f, column in self._columns.items() if column >= 0]
        return sorted(enabled, key=self._columns.__getitem__)

    def set_column(self, field: str, index: int) -> "RegionGenerator":
        """Assign ``index`` to ``field``, relocating any field already using it."""
        previous = self._columns[field]
        if index >= 0:
            for other, column in self._columns.items():
                if other != field and column == index:
                    self._columns[other] = previous if previous >= 0 else self._max_column() + 1
                    break
        self._columns[field] = index
        return self

    def arrange(self, order: Sequence[str]) -> "RegionGenerator":
        """Place the fields of ``order`` at columns 0, 1, 2, ... in that order."""
        for index, field in enumerate(order):
            self.set_column(field, index)
        return self

    def _max_column(self) -> int:
        return max(self._columns.values())

    def columns(self) -> BaseColumns:
        return self.columns_type(**self._columns)

    def tokens(self) -> List[str]:
        tokens = [""] * (self._max_column() + 1)
        for field, column in self._columns.items():
            if column >= 0:
                tokens[column] = self.values[field]
        return tokens

    def line(self, delimiter: str = "\t") -> str:
        return delimiter.join(self.tokens())

    @staticmethod
    def header(count: int) -> List[str]:
        """Header lines that would be dropped if parsed as data."""
        return [f"# header line {i}" for i in range(count)]
