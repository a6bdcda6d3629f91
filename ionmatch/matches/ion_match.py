"""
Ion match module.

This module contains the IonMatch class, which represents the assignment of
a peak to a theoretical ion, and the mass error calculations on it.
"""

import math
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from ..atoms import C13_DELTA
from ..constants import PROTON_MASS
from ..ions import Ion
from .annotation import peak_annotation
from .keys import get_match_key


def _divide(numerator: float, denominator: float) -> float:
    # IEEE-754 semantics: x / 0 gives inf or nan instead of raising
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 ties going toward positive infinity."""
    return math.floor(value + 0.5)


class MzErrorType(Enum):
    """Supported m/z error types."""

    ABSOLUTE = ("Absolute", "Absolute error", "m/z")
    RELATIVE_PPM = ("Relative (ppm)", "Relative error in ppm", "ppm")
    STATISTICAL = (
        "Statistical",
        "Probability to reach this error according to the error distribution",
        "%p",
    )

    def __init__(self, label, description, unit):
        self.label = label
        self.description = description
        self.unit = unit

    @classmethod
    def from_index(cls, index: int) -> Optional["MzErrorType"]:
        """
        Get the error type at the given index, None if out of range.

        Args:
            index: Index of the error type in declaration order

        Returns:
            MzErrorType or None
        """
        values = list(cls)
        if 0 <= index < len(values):
            return values[index]
        return None


class IonMatch:
    """
    Class representing the assignment of a peak to a theoretical ion.

    Attributes are plain slots so the annotation pass that owns the match
    can adjust them in place.
    """

    __slots__ = ["peak_mz", "peak_intensity", "ion", "charge"]

    def __init__(self, peak_mz: float, peak_intensity: float, ion: Ion, charge: int):
        """
        Initialize a new IonMatch instance.

        Args:
            peak_mz: Matched peak m/z
            peak_intensity: Matched peak intensity
            ion: Theoretical ion
            charge: Inferred charge of the ion
        """
        self.peak_mz = float(peak_mz)
        self.peak_intensity = float(peak_intensity)
        self.ion = ion
        self.charge = int(charge)

    def _corrected_mz(self, min_isotope, max_isotope) -> float:
        if min_isotope is None and max_isotope is None:
            return self.peak_mz
        if min_isotope is None or max_isotope is None:
            raise ValueError("min_isotope and max_isotope must be given together")
        isotope = self.isotope_number(min_isotope, max_isotope)
        return self.peak_mz - _divide(isotope * C13_DELTA, self.charge)

    def absolute_error(
        self, min_isotope: Optional[int] = None, max_isotope: Optional[int] = None
    ) -> float:
        """
        Get the absolute m/z matching error in Da.

        When isotope bounds are given, the isotope number is removed from the
        measured m/z first.

        Args:
            min_isotope: Minimal isotope
            max_isotope: Maximal isotope

        Returns:
            Absolute matching error
        """
        theoretic_mz = self.ion.theoretic_mz(self.charge)
        return self._corrected_mz(min_isotope, max_isotope) - theoretic_mz

    def relative_error(
        self, min_isotope: Optional[int] = None, max_isotope: Optional[int] = None
    ) -> float:
        """
        Get the relative m/z matching error in ppm.

        Args:
            min_isotope: Minimal isotope
            max_isotope: Maximal isotope

        Returns:
            Relative matching error
        """
        theoretic_mz = self.ion.theoretic_mz(self.charge)
        measured_mz = self._corrected_mz(min_isotope, max_isotope)
        return _divide((measured_mz - theoretic_mz) * 1000000, theoretic_mz)

    def isotope_number(self, min_isotope: int, max_isotope: int) -> int:
        """
        Get the distance in number of neutrons between the experimental mass
        and theoretic mass. 1 typically indicates a 13C isotope.

        Args:
            min_isotope: Minimal isotope
            max_isotope: Maximal isotope

        Returns:
            Isotope number clamped to [min_isotope, max_isotope]
        """
        experimental_mass = self.peak_mz * self.charge - self.charge * PROTON_MASS
        raw = (experimental_mass - self.ion.theoretic_mass) / C13_DELTA
        if math.isnan(raw):
            rounded = 0
        elif math.isinf(raw):
            rounded = max_isotope if raw > 0 else min_isotope
        else:
            rounded = round_half_up(raw)
        return min(max(rounded, min_isotope), max_isotope)

    def error(
        self,
        is_ppm: bool,
        min_isotope: Optional[int] = None,
        max_isotope: Optional[int] = None,
    ) -> float:
        """
        Get the match m/z error.

        Args:
            is_ppm: Whether the error is in ppm (True) or in Da (False)
            min_isotope: Minimal isotope
            max_isotope: Maximal isotope

        Returns:
            Match m/z error
        """
        if is_ppm:
            return self.relative_error(min_isotope, max_isotope)
        return self.absolute_error(min_isotope, max_isotope)

    def peak_annotation(self, html: bool = False) -> str:
        return peak_annotation(self.ion, self.charge, html)

    def match_key(self, keys_cache=None) -> str:
        return get_match_key(self.ion, self.charge, keys_cache)

    def __repr__(self):
        return (
            f"IonMatch({self.peak_annotation()}, mz={self.peak_mz:.4f}, "
            f"intensity={self.peak_intensity:.1f})"
        )


def match_errors(
    matches: Iterable[IonMatch],
    is_ppm: bool = False,
    min_isotope: Optional[int] = None,
    max_isotope: Optional[int] = None,
) -> np.ndarray:
    """
    Get the errors of a batch of matches.

    Args:
        matches: Ion matches
        is_ppm: Whether the errors are in ppm (True) or in Da (False)
        min_isotope: Minimal isotope
        max_isotope: Maximal isotope

    Returns:
        Array of errors, in the order of the matches
    """
    return np.array(
        [match.error(is_ppm, min_isotope, max_isotope) for match in matches],
        dtype=float,
    )
