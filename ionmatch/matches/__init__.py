"""
Matches of peaks to theoretical ions: mass errors, match keys and annotations.
"""

from .ion_match import IonMatch, MzErrorType, match_errors, round_half_up
from .keys import IonMatchKeysCache, MatchKeysProvider, NoKeysCache, get_match_key, match_key_from_fields
from .annotation import peak_annotation, plain_annotation, html_annotation

__all__ = [
    "IonMatch",
    "MzErrorType",
    "match_errors",
    "round_half_up",
    "IonMatchKeysCache",
    "MatchKeysProvider",
    "NoKeysCache",
    "get_match_key",
    "match_key_from_fields",
    "peak_annotation",
    "plain_annotation",
    "html_annotation",
]
