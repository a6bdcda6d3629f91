"""
Test peaks and the spectrum index.
"""

import numpy as np
import pytest

from ionmatch.config import IonMatchConfig
from ionmatch.constants import PROTON_MASS
from ionmatch.spectrum import Peak, Precursor, SpectrumIndex


def test_peak_mass():
    """Test the neutral mass of a peak at a charge."""
    peak = Peak(500.0, 100.0)

    assert peak.mass(1) == pytest.approx(500.0 - PROTON_MASS)
    assert peak.mass(2) == pytest.approx(1000.0 - 2 * PROTON_MASS)


def test_peak_equality():
    """Test that peaks compare on m/z and intensity."""
    assert Peak(100.0, 10.0) == Peak(100.0, 10.0)
    assert Peak(100.0, 10.0) != Peak(100.0, 11.0)
    assert len({Peak(100.0, 10.0), Peak(100.0, 10.0)}) == 1


def test_peak_sorting():
    """Test the sort keys."""
    peaks = [Peak(300.0, 5.0), Peak(100.0, 50.0), Peak(200.0, 1.0)]

    assert [p.mz for p in sorted(peaks, key=Peak.by_mz)] == [100.0, 200.0, 300.0]
    assert [p.intensity for p in sorted(peaks, key=Peak.by_intensity, reverse=True)] == [50.0, 5.0, 1.0]


def test_precursor_dict():
    """Test precursor conversion to and from a dictionary."""
    precursor = Precursor(650.3, 1e6, rt=1234.5, possible_charges=(2, 3))
    data = precursor.to_dict()

    assert data["possible_charges"] == [2, 3]
    restored = Precursor.from_dict(data)
    assert restored.rt == 1234.5
    assert restored.possible_charges == (2, 3)
    assert restored == precursor


def test_index_filters_and_sorts_peaks():
    """Test that the index drops empty and low m/z peaks and sorts by m/z."""
    index = SpectrumIndex([300.0, 100.0, 200.0, 50.0], [10.0, 20.0, 0.0, 5.0], min_mz=60.0)

    np.testing.assert_array_equal(index.mz_array, [100.0, 300.0])
    np.testing.assert_array_equal(index.intensity_array, [20.0, 10.0])
    assert len(index) == 2


def test_matching_peaks_in_daltons():
    """Test tolerance lookup in Da."""
    index = SpectrumIndex([100.0, 100.015, 100.03, 200.0], [1.0, 2.0, 3.0, 4.0], tolerance=0.02)

    assert list(index.get_matching_peaks(100.0)) == [0, 1]
    assert list(index.get_matching_peaks(150.0)) == []


def test_matching_peaks_in_ppm():
    """Test tolerance lookup in ppm."""
    index = SpectrumIndex([1000.0, 1000.008, 1000.02], [1.0, 2.0, 3.0], tolerance=10.0, ppm=True)

    assert index.tolerance_window(1000.0) == pytest.approx((999.99, 1000.01))
    assert list(index.get_matching_peaks(1000.0)) == [0, 1]


def test_most_intense():
    """Test picking the most intense matching peak."""
    index = SpectrumIndex([100.0, 100.01], [5.0, 9.0], tolerance=0.02)

    assert index.most_intense(100.0) == Peak(100.01, 9.0)
    assert index.most_intense(300.0) is None


def test_empty_index():
    """Test an index without peaks."""
    index = SpectrumIndex([], [])

    assert index.is_empty()
    assert len(index.get_matching_peaks(100.0)) == 0


def test_index_from_config():
    """Test creating an index from configuration settings."""
    config = IonMatchConfig({"fragment_mass_tolerance": 20.0, "fragment_error_units": "ppm"})
    index = SpectrumIndex.from_config([500.0], [1.0], config)

    assert index.ppm
    assert index.tolerance == 20.0
    assert list(index.get_matching_peaks(500.009)) == [0]


def test_index_from_peaks():
    index = SpectrumIndex.from_peaks([Peak(200.0, 1.0), Peak(100.0, 2.0)])

    np.testing.assert_array_equal(index.mz_array, [100.0, 200.0])
