"""
Precursor accuracy as a PSM score.
"""

from .ions import PrecursorIon
from .matches.ion_match import IonMatch
from .spectrum import Precursor


class PrecursorAccuracy:
    """The precursor m/z accuracy as a score, lower is better."""

    def get_score(
        self,
        peptide_mass: float,
        identification_charge: int,
        precursor: Precursor,
        ppm: bool,
        min_isotope: int,
        max_isotope: int,
    ) -> float:
        """
        Score the match between a peptide and a spectrum using the precursor m/z accuracy.

        Args:
            peptide_mass: Neutral monoisotopic mass of the peptide
            identification_charge: Charge of the identification
            precursor: Precursor of the spectrum
            ppm: Whether the error is in ppm
            min_isotope: Minimal isotope
            max_isotope: Maximal isotope

        Returns:
            Absolute isotope-corrected precursor error
        """
        ion_match = IonMatch(
            precursor.mz,
            precursor.intensity,
            PrecursorIon(peptide_mass),
            identification_charge,
        )
        return abs(ion_match.error(ppm, min_isotope, max_isotope))
