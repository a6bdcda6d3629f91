"""
Test the precursor accuracy score.
"""

import pytest

from ionmatch.atoms import C13_DELTA
from ionmatch.constants import PROTON_MASS
from ionmatch.scoring import PrecursorAccuracy
from ionmatch.spectrum import Precursor

PEPTIDE_MASS = 799.35996
MZ_2 = (PEPTIDE_MASS + 2 * PROTON_MASS) / 2


def test_score_in_daltons():
    """Test the score in Da."""
    precursor = Precursor(MZ_2 + 0.002, 1e6)
    score = PrecursorAccuracy().get_score(PEPTIDE_MASS, 2, precursor, False, 0, 1)

    assert score == pytest.approx(0.002, abs=1e-9)


def test_score_in_ppm():
    """Test the score in ppm."""
    precursor = Precursor(MZ_2 + 0.002, 1e6)
    score = PrecursorAccuracy().get_score(PEPTIDE_MASS, 2, precursor, True, 0, 1)

    assert score == pytest.approx(0.002 * 1e6 / MZ_2, rel=1e-6)


def test_score_is_absolute():
    """Test that negative errors give positive scores."""
    precursor = Precursor(MZ_2 - 0.003, 1e6)
    score = PrecursorAccuracy().get_score(PEPTIDE_MASS, 2, precursor, False, 0, 1)

    assert score == pytest.approx(0.003, abs=1e-9)


def test_score_corrects_isotope():
    """Test that a 13C precursor pick is corrected within the isotope range."""
    precursor = Precursor(MZ_2 + C13_DELTA / 2, 1e6)
    scorer = PrecursorAccuracy()

    assert scorer.get_score(PEPTIDE_MASS, 2, precursor, True, 0, 1) == pytest.approx(0.0, abs=1e-6)
    assert scorer.get_score(PEPTIDE_MASS, 2, precursor, False, 0, 0) == pytest.approx(C13_DELTA / 2)
