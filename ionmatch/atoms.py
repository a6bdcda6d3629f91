"""
Atom module.

This module contains the Atom class and the table of atoms used for isotope
corrections.
"""

from typing import Dict


class Atom:
    """
    Class representing a chemical element and its implemented isotopes.

    Isotopes are indexed by the number of extra neutrons relative to the
    monoisotopic species, 0 being the monoisotopic mass.
    """

    __slots__ = ["symbol", "name", "isotope_masses"]

    def __init__(self, symbol: str, name: str, isotope_masses: Dict[int, float]):
        """
        Initialize a new Atom instance.

        Args:
            symbol: Element symbol
            name: Element name
            isotope_masses: Isotope index -> mass in Da
        """
        self.symbol = symbol
        self.name = name
        self.isotope_masses = dict(isotope_masses)

    @property
    def monoisotopic_mass(self) -> float:
        return self.isotope_masses[0]

    def isotope_mass(self, isotope: int) -> float:
        """
        Get the mass of an isotope.

        Args:
            isotope: Number of extra neutrons

        Returns:
            Isotope mass in Da

        Raises:
            KeyError: If the isotope is not implemented for this atom
        """
        if isotope not in self.isotope_masses:
            raise KeyError(f"Isotope {isotope} not implemented for atom {self.symbol}")
        return self.isotope_masses[isotope]

    def difference_to_monoisotopic(self, isotope: int) -> float:
        """
        Get the mass difference between an isotope and the monoisotopic mass.

        Args:
            isotope: Number of extra neutrons

        Returns:
            Mass difference in Da
        """
        return self.isotope_mass(isotope) - self.monoisotopic_mass

    def __repr__(self):
        return f"Atom({self.symbol})"


H = Atom("H", "Hydrogen", {0: 1.00782503207, 1: 2.0141017778})
C = Atom("C", "Carbon", {0: 12.0, 1: 13.0033548378})
N = Atom("N", "Nitrogen", {0: 14.0030740048, 1: 15.0001088982})
O = Atom("O", "Oxygen", {0: 15.99491461956, 1: 16.99913170, 2: 17.9991610})
P = Atom("P", "Phosphorus", {0: 30.97376163})
S = Atom("S", "Sulfur", {0: 31.97207100, 1: 32.97145876, 2: 33.96786690})

ATOMS = {atom.symbol: atom for atom in (H, C, N, O, P, S)}

# Mass difference between 13C and 12C
C13_DELTA = C.difference_to_monoisotopic(1)


def get_atom(symbol: str) -> Atom:
    """
    Get an atom by its symbol.

    Args:
        symbol: Element symbol

    Returns:
        Atom object

    Raises:
        KeyError: If the atom is not in the table
    """
    if symbol not in ATOMS:
        raise KeyError(f"Unknown atom: {symbol}")
    return ATOMS[symbol]
