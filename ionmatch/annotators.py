"""
Annotators module.

This module contains simple annotators that match the theoretical ions of a
peptide, or a set of reporter ions, against an indexed spectrum.
"""

import logging
from typing import List, Sequence

from .constants import (
    PROTON_MASS,
    AMMONIA_MASS,
    CARBON_MONOXIDE_MASS,
    ION_SERIES,
)
from .ions import PeptideFragmentIon, ReporterIon
from .masses import cumulative_residue_masses, peptide_mass
from .matches.ion_match import IonMatch
from .spectrum import SpectrumIndex

logger = logging.getLogger(__name__)


class FragmentAnnotator:
    """Annotator for one series of forward and complementary fragment ions without neutral losses."""

    def __init__(self, sequence: str, ion_series: str = "by"):
        """
        Initialize a new FragmentAnnotator instance.

        Args:
            sequence: Peptide sequence in OpenMS notation, e.g. "PEPS(Phospho)TIDE"
            ion_series: One of "by", "cz" or "ax"

        Raises:
            ValueError: If the ion series is not supported
        """
        if ion_series not in ION_SERIES:
            raise ValueError(f"Ion series {ion_series} not supported.")

        self.sequence = sequence
        self.ion_series = ion_series
        self.forward_ion_type, self.complementary_ion_type = ION_SERIES[ion_series]

        residue_masses = cumulative_residue_masses(sequence)
        self.peptide_length = len(residue_masses)

        forward_offset = PROTON_MASS
        complementary_mass = peptide_mass(sequence) + 2 * PROTON_MASS
        if ion_series == "cz":
            forward_offset += AMMONIA_MASS
            complementary_mass -= AMMONIA_MASS
        elif ion_series == "ax":
            forward_offset -= CARBON_MONOXIDE_MASS
            complementary_mass += CARBON_MONOXIDE_MASS

        # m/z at charge 1 of fragments 1 .. length - 1
        self.forward_ion_mz1 = [forward_offset + m for m in residue_masses[:-1]]
        self.complementary_ion_mz1 = [
            complementary_mass - mz for mz in self.forward_ion_mz1
        ]

    def _match(self, spectrum_index, ion_mz1, ion_type, ion_number, charge, results):
        ion_mz = (ion_mz1 + (charge - 1) * PROTON_MASS) / charge
        indexes = spectrum_index.get_matching_peaks(ion_mz)
        if len(indexes) == 0:
            return

        ion = PeptideFragmentIon(ion_type, ion_number, ion_mz1 - PROTON_MASS)
        for index in indexes:
            results.append(
                IonMatch(
                    spectrum_index.mz_array[index],
                    spectrum_index.intensity_array[index],
                    ion,
                    charge,
                )
            )

    def get_ion_matches(self, spectrum_index: SpectrumIndex, peptide_charge: int) -> List[IonMatch]:
        """
        Get the ions matched in a spectrum.

        Fragments are annotated at charge 1 and at every charge from 2 up to
        the peptide charge minus one.

        Args:
            spectrum_index: Index of the spectrum
            peptide_charge: Charge of the peptide

        Returns:
            List of IonMatch objects
        """
        results = []
        n_fragments = len(self.forward_ion_mz1)

        for charge in range(1, max(peptide_charge, 2)):
            for i in range(n_fragments):
                self._match(
                    spectrum_index,
                    self.forward_ion_mz1[i],
                    self.forward_ion_type,
                    i + 1,
                    charge,
                    results,
                )
                self._match(
                    spectrum_index,
                    self.complementary_ion_mz1[i],
                    self.complementary_ion_type,
                    self.peptide_length - i - 1,
                    charge,
                    results,
                )

        logger.debug(f"{self.sequence}: {len(results)} fragment ion matches at charge {peptide_charge}")
        return results


class ReporterIonAnnotator:
    """Annotator for reporter ions."""

    def __init__(self, reporter_ions: Sequence[ReporterIon]):
        """
        Initialize a new ReporterIonAnnotator instance.

        Args:
            reporter_ions: Reporter ions to annotate
        """
        self.reporter_ions = tuple(reporter_ions)
        self.reporter_ions_mz = [ion.theoretic_mz(1) for ion in self.reporter_ions]

    def get_ion_matches(self, spectrum_index: SpectrumIndex) -> List[IonMatch]:
        """
        Get the reporter ions matched in a spectrum.

        Args:
            spectrum_index: Index of the spectrum

        Returns:
            List of IonMatch objects at charge 1
        """
        results = []
        for ion, ion_mz in zip(self.reporter_ions, self.reporter_ions_mz):
            for index in spectrum_index.get_matching_peaks(ion_mz):
                results.append(
                    IonMatch(
                        spectrum_index.mz_array[index],
                        spectrum_index.intensity_array[index],
                        ion,
                        1,
                    )
                )
        return results
