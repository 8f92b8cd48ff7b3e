"""
Reference assembly chromosome sizes.

Assemblies are used to reconcile the chromosomes seen in a file with the
expected ones, to compute coverage and, under strict chromosome filtering, to
reject lines on chromosomes the assembly does not have.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from .errors import UnknownAssemblyError

logger = logging.getLogger("genointervals")


class Assembly(str, Enum):
    """
    Built-in reference assemblies.

    hg19: GRCh37.p13 (GENCODE 19). mm10: GRCm38.p2 (GENCODE M2).
    """

    HG19 = "hg19"
    MM10 = "mm10"


_HG19: Dict[str, int] = {
    "chr1": 249250621,
    "chr2": 243199373,
    "chr3": 198022430,
    "chr4": 191154276,
    "chr5": 180915260,
    "chr6": 171115067,
    "chr7": 159138663,
    "chr8": 146364022,
    "chr9": 141213431,
    "chr10": 135534747,
    "chr11": 135006516,
    "chr12": 133851895,
    "chr13": 115169878,
    "chr14": 107349540,
    "chr15": 102531392,
    "chr16": 90354753,
    "chr17": 81195210,
    "chr18": 78077248,
    "chr19": 59128983,
    "chr20": 63025520,
    "chr21": 48129895,
    "chr22": 51304566,
    "chrX": 155270560,
    "chrY": 59373566,
    "chrM": 16569,
}

_MM10: Dict[str, int] = {
    "chr1": 195471971,
    "chr2": 182113224,
    "chr3": 160039680,
    "chr4": 156508116,
    "chr5": 151834684,
    "chr6": 149736546,
    "chr7": 145441459,
    "chr8": 129401213,
    "chr9": 124595110,
    "chr10": 130694993,
    "chr11": 122082543,
    "chr12": 120129022,
    "chr13": 120421639,
    "chr14": 124902244,
    "chr15": 104043685,
    "chr16": 98207768,
    "chr17": 94987271,
    "chr18": 90702639,
    "chr19": 61431566,
    "chrX": 171031299,
    "chrY": 91744698,
    "chrM": 16299,
}

_ASSEMBLIES = {
    Assembly.HG19: _HG19,
    Assembly.MM10: _MM10,
}


def get_genome_sizes(assembly: Union[str, Assembly]) -> Mapping[str, int]:
    """
    Return the read-only chromosome size table of an assembly.

    Parameters
    ----------
    assembly : str or Assembly
        Assembly identifier, e.g. ``"hg19"``. Matching is case-insensitive.

    Returns
    -------
    Mapping[str, int]
        Chromosome name to length in base pairs.

    Raises
    ------
    UnknownAssemblyError
        If the identifier does not name a built-in assembly.
    """
    key = assembly.value if isinstance(assembly, Assembly) else str(assembly).lower()
    try:
        return MappingProxyType(_ASSEMBLIES[Assembly(key)])
    except ValueError:
        raise UnknownAssemblyError(str(assembly))


def resolve_reference(
    assembly: Union[None, str, Assembly, Mapping[str, int]],
) -> Optional[Mapping[str, int]]:
    """
    Turn an assembly option into a chromosome size mapping.

    ``None`` means no reference; strings name a built-in assembly; any other
    mapping is used as a custom reference and wrapped read-only.
    """
    if assembly is None:
        return None
    if isinstance(assembly, (str, Assembly)):
        return get_genome_sizes(assembly)
    logger.debug(f"Using custom reference assembly with {len(assembly)} chromosomes")
    return MappingProxyType({str(k): int(v) for k, v in assembly.items()})


def assembly_name(assembly: Union[None, str, Assembly, Mapping[str, int]]) -> Optional[str]:
    """Identifier recorded on a parsed dataset for the given assembly option."""
    if assembly is None:
        return None
    if isinstance(assembly, Assembly):
        return assembly.value
    if isinstance(assembly, str):
        return assembly.lower()
    return "custom"
