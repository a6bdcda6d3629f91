"""
Mass calculations backed by PyOpenMS.
"""

import logging
from functools import lru_cache

from pyopenms import AASequence, EmpiricalFormula

from .constants import WATER_MASS

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def formula_mass(formula: str) -> float:
    """
    Get the monoisotopic mass of an empirical formula.

    Args:
        formula: Empirical formula, e.g. "H3PO4"

    Returns:
        Monoisotopic mass in Da
    """
    return EmpiricalFormula(formula).getMonoWeight()


def peptide_mass(sequence: str) -> float:
    """
    Get the neutral monoisotopic mass of a peptide.

    Args:
        sequence: Peptide sequence in OpenMS notation, e.g. "PEPS(Phospho)TIDE"

    Returns:
        Monoisotopic mass in Da, including water
    """
    return AASequence.fromString(sequence).getMonoWeight()


def cumulative_residue_masses(sequence: str):
    """
    Get the summed residue masses of every prefix of a peptide.

    Modifications in the sequence are included in the residue they decorate.

    Args:
        sequence: Peptide sequence in OpenMS notation

    Returns:
        List where element i is the mass of the first i + 1 residues
    """
    aa_seq = AASequence.fromString(sequence)
    masses = []
    for i in range(aa_seq.size()):
        masses.append(aa_seq.getPrefix(i + 1).getMonoWeight() - WATER_MASS)
    logger.debug(f"Computed {len(masses)} prefix masses for {sequence}")
    return masses
