"""
Spectrum module.

This module contains the Peak and Precursor classes and the SpectrumIndex
used to look up peaks by m/z.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .constants import PROTON_MASS, PPM

logger = logging.getLogger(__name__)


class Peak:
    """Class representing a mass spectrometry peak."""

    __slots__ = ["mz", "intensity"]

    def __init__(self, mz: float, intensity: float):
        """
        Initialize a new Peak instance.

        Args:
            mz: m/z value
            intensity: Intensity
        """
        self.mz = float(mz)
        self.intensity = float(intensity)

    def mass(self, charge: int) -> float:
        """
        Get the neutral mass of the compound at the given charge.

        Args:
            charge: Charge value

        Returns:
            Neutral mass in Da
        """
        return self.mz * charge - charge * PROTON_MASS

    def __eq__(self, other):
        if not isinstance(other, Peak):
            return False
        return self.mz == other.mz and self.intensity == other.intensity

    def __hash__(self):
        return hash((self.mz, self.intensity))

    def __repr__(self):
        return f"[{self.mz},{self.intensity}]"

    def to_dict(self) -> Dict[str, Any]:
        return {"mz": self.mz, "intensity": self.intensity}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Peak":
        return cls(data["mz"], data["intensity"])

    @staticmethod
    def by_intensity(peak: "Peak") -> float:
        """Sort key for ascending intensity; use reverse=True for descending."""
        return peak.intensity

    @staticmethod
    def by_mz(peak: "Peak") -> float:
        return peak.mz


class Precursor(Peak):
    """Precursor peak of a fragment spectrum."""

    __slots__ = ["rt", "possible_charges"]

    def __init__(self, mz: float, intensity: float, rt: float = 0.0, possible_charges=()):
        """
        Initialize a new Precursor instance.

        Args:
            mz: m/z value
            intensity: Intensity
            rt: Retention time in seconds
            possible_charges: Charges the precursor may carry
        """
        super().__init__(mz, intensity)
        self.rt = float(rt)
        self.possible_charges = tuple(possible_charges)

    def __repr__(self):
        return f"Precursor(mz={self.mz:.4f}, rt={self.rt:.1f}, charges={self.possible_charges})"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["rt"] = self.rt
        data["possible_charges"] = list(self.possible_charges)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Precursor":
        return cls(data["mz"], data["intensity"], data.get("rt", 0.0), data.get("possible_charges", ()))


class SpectrumIndex:
    """Index of the peaks of a spectrum for tolerance-based m/z lookup."""

    def __init__(
        self,
        mz_array,
        intensity_array,
        tolerance: float = 0.02,
        ppm: bool = False,
        min_mz: float = 0.0,
    ):
        """
        Initialize a new SpectrumIndex instance.

        Args:
            mz_array: Array of m/z values
            intensity_array: Array of intensity values
            tolerance: Matching tolerance
            ppm: Whether the tolerance is in ppm (True) or in Da (False)
            min_mz: Peaks below this m/z are not indexed
        """
        self.tolerance = float(tolerance)
        self.ppm = ppm

        mz_array = np.asarray(mz_array, dtype=float)
        intensity_array = np.asarray(intensity_array, dtype=float)
        n = min(len(mz_array), len(intensity_array))

        valid_mask = (intensity_array[:n] > 0) & (mz_array[:n] >= min_mz)
        mz_array = mz_array[:n][valid_mask]
        intensity_array = intensity_array[:n][valid_mask]

        order = np.argsort(mz_array, kind="stable")
        self.mz_array = mz_array[order]
        self.intensity_array = intensity_array[order]

        logger.debug(f"Indexed {len(self.mz_array)} of {n} peaks")

    @classmethod
    def from_peaks(cls, peaks, **kwargs) -> "SpectrumIndex":
        return cls([p.mz for p in peaks], [p.intensity for p in peaks], **kwargs)

    @classmethod
    def from_config(cls, mz_array, intensity_array, config) -> "SpectrumIndex":
        """
        Create an index using the fragment settings of a configuration.

        Args:
            mz_array: Array of m/z values
            intensity_array: Array of intensity values
            config: IonMatchConfig object

        Returns:
            SpectrumIndex object
        """
        return cls(
            mz_array,
            intensity_array,
            tolerance=config.get("fragment_mass_tolerance"),
            ppm=config.is_fragment_ppm(),
            min_mz=config.get("min_mz", 0.0),
        )

    def __len__(self):
        return len(self.mz_array)

    def is_empty(self) -> bool:
        return len(self.mz_array) == 0

    def tolerance_window(self, mz: float) -> Tuple[float, float]:
        """
        Get the m/z window matching a query.

        Args:
            mz: Query m/z

        Returns:
            Tuple of (lower bound, upper bound)
        """
        if self.ppm:
            delta = mz * self.tolerance * PPM
        else:
            delta = self.tolerance
        return mz - delta, mz + delta

    def get_matching_peaks(self, mz: float) -> np.ndarray:
        """
        Find the peaks within tolerance of an m/z using binary search.

        Args:
            mz: Query m/z

        Returns:
            Array of indices into mz_array and intensity_array
        """
        lower, upper = self.tolerance_window(mz)
        start = np.searchsorted(self.mz_array, lower, side="left")
        end = np.searchsorted(self.mz_array, upper, side="right")
        return np.arange(start, end)

    def get_peak(self, index: int) -> Peak:
        return Peak(self.mz_array[index], self.intensity_array[index])

    def most_intense(self, mz: float) -> Optional[Peak]:
        """
        Get the most intense peak within tolerance of an m/z.

        Args:
            mz: Query m/z

        Returns:
            Peak, or None if no peak matches
        """
        indexes = self.get_matching_peaks(mz)
        if len(indexes) == 0:
            return None
        best = indexes[np.argmax(self.intensity_array[indexes])]
        return self.get_peak(best)
