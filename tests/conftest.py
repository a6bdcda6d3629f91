"""
Test configuration and fixtures for ionmatch tests.
"""

import pytest
import sys
import os

# Add the parent directory to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ionmatch.constants import PROTON_MASS, B_ION, Y_ION
from ionmatch.ions import PeptideFragmentIon, PrecursorIon, H2O

# Monoisotopic residue masses used to build expected values independently of PyOpenMS
RESIDUE_MASSES = {
    "P": 97.05276,
    "E": 129.04259,
    "T": 101.04768,
    "I": 113.08406,
    "D": 115.02694,
    "K": 128.09496,
}


@pytest.fixture
def b3_ion():
    """b3 ion of PEPTIDE."""
    mass = RESIDUE_MASSES["P"] + RESIDUE_MASSES["E"] + RESIDUE_MASSES["P"]
    return PeptideFragmentIon(B_ION, 3, mass)


@pytest.fixture
def y2_water_loss_ion():
    """y2 ion with a water loss."""
    return PeptideFragmentIon(Y_ION, 2, 234.1, (H2O,))


@pytest.fixture
def precursor_ion():
    """Precursor ion of PEPTIDE."""
    return PrecursorIon(799.35996)


@pytest.fixture
def ion_with_mz():
    """Factory for a precursor ion with a given m/z at a given charge."""

    def _make(mz, charge):
        return PrecursorIon(mz * charge - charge * PROTON_MASS)

    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "cli: marks tests that test CLI functionality")
    config.addinivalue_line("markers", "openms: marks tests that compute masses with PyOpenMS")
