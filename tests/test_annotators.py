"""
Test fragment and reporter ion annotators.
"""

import pytest

from ionmatch.annotators import FragmentAnnotator, ReporterIonAnnotator
from ionmatch.constants import PROTON_MASS, B_ION, Y_ION
from ionmatch.ions import TMT_6PLEX
from ionmatch.spectrum import SpectrumIndex

from conftest import RESIDUE_MASSES

WATER = 18.010565
AMMONIA = 17.026549

B2_MZ = RESIDUE_MASSES["P"] + RESIDUE_MASSES["E"] + PROTON_MASS
Y2_MZ = RESIDUE_MASSES["D"] + RESIDUE_MASSES["E"] + WATER + PROTON_MASS
B6_MASS = sum(RESIDUE_MASSES[aa] for aa in "PEPTID")
B6_2_MZ = (B6_MASS + 2 * PROTON_MASS) / 2

pytestmark = pytest.mark.openms


def _labels(matches):
    return sorted(match.peak_annotation() for match in matches)


def test_b_and_y_ions():
    """Test annotation of singly charged b and y ions."""
    index = SpectrumIndex([B2_MZ, Y2_MZ, 500.0], [100.0, 200.0, 50.0], tolerance=0.02)
    matches = FragmentAnnotator("PEPTIDE").get_ion_matches(index, 2)

    assert _labels(matches) == ["b2", "y2"]
    for match in matches:
        assert abs(match.absolute_error()) < 0.005
        assert match.charge == 1
    by_type = {match.ion.sub_type: match for match in matches}
    assert by_type[B_ION].ion.number == 2
    assert by_type[Y_ION].ion.number == 2
    assert by_type[Y_ION].peak_intensity == 200.0


def test_doubly_charged_fragments_need_higher_peptide_charge():
    """Test that fragments are annotated up to the peptide charge minus one."""
    index = SpectrumIndex([B6_2_MZ], [100.0], tolerance=0.02)
    annotator = FragmentAnnotator("PEPTIDE")

    assert annotator.get_ion_matches(index, 2) == []
    matches = annotator.get_ion_matches(index, 3)
    assert _labels(matches) == ["b62+"]
    assert matches[0].charge == 2


def test_c_ions():
    """Test the c/z ion series."""
    index = SpectrumIndex([B2_MZ + AMMONIA], [100.0], tolerance=0.02)
    matches = FragmentAnnotator("PEPTIDE", "cz").get_ion_matches(index, 2)

    assert _labels(matches) == ["c2"]


def test_fragment_count():
    """Test that fragments 1 to length - 1 are generated."""
    annotator = FragmentAnnotator("PEPTIDE")

    assert annotator.peptide_length == 7
    assert len(annotator.forward_ion_mz1) == 6
    assert annotator.forward_ion_mz1[1] == pytest.approx(B2_MZ, abs=1e-3)


def test_modified_sequence():
    """Test that modifications shift the fragments that carry them."""
    plain = FragmentAnnotator("PEPTIDE")
    modified = FragmentAnnotator("PEPT(Phospho)IDE")

    assert modified.forward_ion_mz1[2] == pytest.approx(plain.forward_ion_mz1[2], abs=1e-6)
    assert modified.forward_ion_mz1[3] - plain.forward_ion_mz1[3] == pytest.approx(79.96633, abs=1e-4)


def test_unsupported_ion_series():
    """Test that unknown ion series are rejected."""
    with pytest.raises(ValueError):
        FragmentAnnotator("PEPTIDE", "xx")


def test_reporter_ions():
    """Test annotation of reporter ions."""
    index = SpectrumIndex([126.1277, 127.1248, 140.0], [10.0, 20.0, 30.0], tolerance=0.002)
    matches = ReporterIonAnnotator(TMT_6PLEX).get_ion_matches(index)

    assert _labels(matches) == ["TMT126", "TMT127"]
    assert all(match.charge == 1 for match in matches)
