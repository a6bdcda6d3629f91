"""
Match keys module.

A match key uniquely represents a peak annotation:
``ionTypeIndex_ionSubType_fragmentNumber_neutralLosses_charge``.
Neutral-loss names cannot contain "_", which keeps keys injective.
"""

import logging
from typing import Dict, Optional, Tuple

from ..ions import Ion, IonType

logger = logging.getLogger(__name__)


def match_key_from_fields(
    ion_type_index: int,
    ion_sub_type: int,
    fragment_number: int,
    neutral_losses: str,
    charge: int,
) -> str:
    """
    Build the key from the different attributes of a match.

    Args:
        ion_type_index: Index of the ion type
        ion_sub_type: Index of the ion subtype
        fragment_number: Number of the fragment ion, 0 if none
        neutral_losses: Neutral losses as a string
        charge: Charge

    Returns:
        Key for the ion match
    """
    return f"{ion_type_index}_{ion_sub_type}_{fragment_number}_{neutral_losses}_{charge}"


def build_match_key(ion: Ion, charge: int) -> str:
    """Build the key for an ion at a charge without any caching."""
    if ion.type in (IonType.PEPTIDE_FRAGMENT_ION, IonType.TAG_FRAGMENT_ION):
        fragment_number = ion.number
    else:
        fragment_number = 0

    return match_key_from_fields(
        ion.type.index,
        ion.sub_type,
        fragment_number,
        ion.neutral_losses_as_string,
        charge,
    )


class MatchKeysProvider:
    """Base class of the objects handing out match keys."""

    def get_match_key(self, ion: Ion, charge: int) -> str:
        raise NotImplementedError

    def __len__(self):
        return 0


class NoKeysCache(MatchKeysProvider):
    """Keys provider that builds every key on demand."""

    def get_match_key(self, ion: Ion, charge: int) -> str:
        return build_match_key(ion, charge)


class IonMatchKeysCache(MatchKeysProvider):
    """
    Memoization of match keys per (ion, charge).

    The cache holds no lock: use one instance per thread, or per spectrum
    annotation pass.
    """

    def __init__(self):
        self._keys: Dict[Tuple[Ion, int], str] = {}
        self.hits = 0
        self.misses = 0

    def get_match_key(self, ion: Ion, charge: int) -> str:
        """
        Get the key for an ion at a charge, building and storing it on a miss.

        Args:
            ion: Matched ion
            charge: Charge

        Returns:
            Key for the ion match
        """
        cache_key = (ion, charge)
        key = self._keys.get(cache_key)
        if key is None:
            self.misses += 1
            key = build_match_key(ion, charge)
            self._keys[cache_key] = key
        else:
            self.hits += 1
        return key

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._keys)} cached match keys")
        self._keys.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self._keys)

    def __contains__(self, item):
        return item in self._keys


NO_CACHE = NoKeysCache()


def get_match_key(ion: Ion, charge: int, keys_cache: Optional[MatchKeysProvider] = None) -> str:
    """
    Get the key uniquely representing the annotation of an ion at a charge.

    Args:
        ion: Matched ion
        charge: Charge
        keys_cache: Optional cache for the keys

    Returns:
        Key for the ion match
    """
    if keys_cache is None:
        keys_cache = NO_CACHE
    return keys_cache.get_match_key(ion, charge)
