"""Reconciliation of observed chromosomes against a reference assembly."""

from typing import Iterable, List, Mapping, Tuple


def reconcile(observed: Iterable[str], reference: Mapping[str, int]) -> Tuple[List[str], List[str]]:
    """
    Compare chromosomes seen in a file with those of a reference assembly.

    Parameters
    ----------
    observed : iterable of str
        Chromosome names as stored while parsing, in first-seen order.
    reference : Mapping[str, int]
        Reference chromosome names to lengths.

    Returns
    -------
    tuple of (list, list)
        ``excess``: observed chromosomes absent from the reference keys
        (exact, case-sensitive match). ``missing``: reference chromosomes,
        in reference order, with no case-insensitive match among the
        observed chromosomes.
    """
    observed = list(observed)
    excess = [chromosome for chromosome in observed if chromosome not in reference]

    observed_lower = {chromosome.lower() for chromosome in observed}
    missing = [chromosome for chromosome in reference if chromosome.lower() not in observed_lower]
    return excess, missing
