"""
ionmatch: matching of mass spectrometry peaks to theoretical ions.

This package computes mass errors in Da or ppm, with optional isotope
correction, and builds match keys and peak annotations for peptide fragment,
tag fragment, precursor and reporter ions.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .ions import (
    IonType,
    NeutralLoss,
    PeptideFragmentIon,
    TagFragmentIon,
    PrecursorIon,
    ReporterIon,
    ImmoniumIon,
    ElementaryIon,
)
from .matches import IonMatch, IonMatchKeysCache, MzErrorType, get_match_key, peak_annotation
from .scoring import PrecursorAccuracy

__all__ = [
    "IonType",
    "NeutralLoss",
    "PeptideFragmentIon",
    "TagFragmentIon",
    "PrecursorIon",
    "ReporterIon",
    "ImmoniumIon",
    "ElementaryIon",
    "IonMatch",
    "IonMatchKeysCache",
    "MzErrorType",
    "get_match_key",
    "peak_annotation",
    "PrecursorAccuracy",
]
